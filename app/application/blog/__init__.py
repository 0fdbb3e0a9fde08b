"""
Application layer for the blog bounded context.

Use cases map inbound commands to domain entities and forward them to
the narrow repository ports. No framework or infrastructure imports allowed.
"""
