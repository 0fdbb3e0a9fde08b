"""
Shared error handling package.

Centralizes error-to-HTTP mapping: the classifier turns any error into
a status code and sanitized message, and the handlers register it on
the application.
"""
