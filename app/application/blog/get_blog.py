"""
Use case: Fetch a single blog.

Input: blog id
Output: Blog
Side effects: None (read-only query).
Failure cases: BlogNotFoundError, storage errors.
"""

from app.core.container import Container
from app.domain.blog.entities import Blog
from app.domain.blog.ports import SingleBlogGetter


class GetBlogUseCase:
    """Read-only lookup of one blog by id."""

    def __init__(self, getter: SingleBlogGetter, container: Container) -> None:
        self._getter = getter
        self._logger = container.get_logger("application.blog")

    def execute(self, blog_id: int) -> Blog:
        """Return the blog with `blog_id`."""
        self._logger.debug("Fetching blog id=%d", blog_id)
        return self._getter.get_by_id(blog_id)
