"""
Interfaces layer package.

HTTP surface: the blog router, health probes and their Pydantic
schemas. Handlers map requests to use-case inputs and nothing more.
"""
