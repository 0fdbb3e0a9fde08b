"""
Domain-specific errors for the blog bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class BlogDomainError(Exception):
    """Base error for all blog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BlogNotFoundError(BlogDomainError):
    """Raised when no live blog row matches the requested id."""

    def __init__(self, blog_id: int) -> None:
        super().__init__(f"Blog not found: {blog_id}")
        self.blog_id = blog_id
