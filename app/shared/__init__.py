"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error classification and mapping
- Request middleware (request ids, secure headers)
- Rate limiting
- Logging configuration
"""
