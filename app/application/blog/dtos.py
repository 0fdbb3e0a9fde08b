"""
Data Transfer Objects for the blog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior, intentionally decoupled
from the Blog entity so the wire contract and the storage schema can
evolve independently.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateBlogCommand:
    """Input DTO for creating a blog.

    Attributes:
        title: Blog title.
        body: Blog body text.
    """

    title: str
    body: str


@dataclass(frozen=True)
class UpdateBlogCommand:
    """Input DTO for replacing a blog's title and body.

    Attributes:
        blog_id: Id of the blog to overwrite.
        title: New title.
        body: New body. Omitted bodies are written as the empty string.
    """

    blog_id: int
    title: str
    body: str = ""
