"""
Blog bounded context, domain layer.

This module contains all domain logic for the blog context:
- The Blog entity and its word-frequency count
- Domain errors
- Narrow, capability-scoped repository ports
"""
