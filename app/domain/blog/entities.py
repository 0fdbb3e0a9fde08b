"""
Domain entities for the blog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.blog.words import count_words


@dataclass(frozen=True)
class Blog:
    """A blog post.

    `id` and the timestamps are assigned by the store; a Blog built from a
    request carries only `title` and `body`. A non-null `deleted_at` marks
    a soft-deleted post, which standard reads never return.
    """

    title: str
    body: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def word_count(self) -> dict[str, int]:
        """Return the word-frequency mapping of the body."""
        return count_words(self.body)
