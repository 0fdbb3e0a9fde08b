"""
Use case: Soft-delete a blog.

Input: blog id
Output: None
Side effects: Marks the row deleted; later reads exclude it.
Failure cases: Storage errors. Unknown ids are not an error.
"""

from app.core.container import Container
from app.domain.blog.ports import BlogDeleter


class DeleteBlogUseCase:
    def __init__(self, deleter: BlogDeleter, container: Container) -> None:
        self._deleter = deleter
        self._logger = container.get_logger("application.blog")

    def execute(self, blog_id: int) -> None:
        self._deleter.delete(blog_id)
        self._logger.info("Deleted blog id=%d", blog_id)
