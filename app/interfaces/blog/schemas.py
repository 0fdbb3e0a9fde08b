"""
Pydantic schemas for blog API request/response validation.

These schemas enforce input validation and define the API contract.
Request schemas are intentionally separate from the Blog entity so the
wire shape can change without touching storage.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.blog.entities import Blog


class CreateBlogRequest(BaseModel):
    """Request schema for creating a blog.

    Attributes:
        title: Blog title (required, non-empty).
        body: Blog body (required, non-empty).
    """

    title: str = Field(..., min_length=1, description="Blog title")
    body: str = Field(..., min_length=1, description="Blog body text")


class UpdateBlogRequest(BaseModel):
    """Request schema for replacing a blog's title and body."""

    title: str = Field(..., min_length=1, description="Blog title")
    body: str = Field(..., min_length=1, description="Blog body text")


class BlogResponse(BaseModel):
    """A live blog as returned by the API.

    Soft-deleted blogs are never returned, so there is no deletion stamp.
    """

    id: int
    title: str
    body: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogResponse":
        return cls(
            id=blog.id,
            title=blog.title,
            body=blog.body,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    code: int
    message: str
