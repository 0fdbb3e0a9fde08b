"""
Use case: Word-frequency count of a blog body.

Input: blog id
Output: dict[str, int] mapping each word to its occurrence count
Side effects: None (read-only query).
Failure cases: BlogNotFoundError, storage errors.
"""

from app.core.container import Container
from app.domain.blog.ports import SingleBlogGetter


class CountBlogWordsUseCase:
    """Fetches a blog and returns the word count computed by the entity."""

    def __init__(self, getter: SingleBlogGetter, container: Container) -> None:
        self._getter = getter
        self._logger = container.get_logger("application.blog")

    def execute(self, blog_id: int) -> dict[str, int]:
        """Return the word-frequency mapping for the blog with `blog_id`."""
        blog = self._getter.get_by_id(blog_id)
        counts = blog.word_count()
        self._logger.debug("Counted %d distinct words in blog id=%d", len(counts), blog_id)
        return counts
