"""
Interfaces for the blog bounded context: router, schemas and the
dependency-injection composition root.
"""
