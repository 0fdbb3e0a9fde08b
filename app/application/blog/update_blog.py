"""
Use case: Overwrite a blog.

Input: UpdateBlogCommand (blog_id, title, body)
Output: Blog as stored after the update
Side effects: Rewrites title, body and updated_at of one row.
Failure cases: BlogNotFoundError, storage errors.

The update replaces both fields; it does not fetch and merge the stored
row first.
"""

from app.application.blog.dtos import UpdateBlogCommand
from app.core.container import Container
from app.domain.blog.entities import Blog
from app.domain.blog.ports import BlogUpdater


class UpdateBlogUseCase:
    """Maps the command onto a Blog and overwrites the stored one."""

    def __init__(self, updater: BlogUpdater, container: Container) -> None:
        self._updater = updater
        self._logger = container.get_logger("application.blog")

    def execute(self, command: UpdateBlogCommand) -> Blog:
        """Run the update use case.

        Args:
            command: Target id plus the replacement title and body.

        Returns:
            The updated blog.
        """
        blog = Blog(title=command.title, body=command.body)
        updated = self._updater.update(command.blog_id, blog)
        self._logger.info("Updated blog id=%d", command.blog_id)
        return updated
