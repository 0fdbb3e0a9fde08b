"""
Use case: Create a blog.

Input: CreateBlogCommand (title, body)
Output: Blog with its store-assigned id
Side effects: Inserts one row.
Failure cases: Storage errors, propagated unchanged.
"""

from app.application.blog.dtos import CreateBlogCommand
from app.core.container import Container
from app.domain.blog.entities import Blog
from app.domain.blog.ports import BlogCreator


class CreateBlogUseCase:
    """Maps the command onto a new Blog and persists it."""

    def __init__(self, creator: BlogCreator, container: Container) -> None:
        self._creator = creator
        self._logger = container.get_logger("application.blog")

    def execute(self, command: CreateBlogCommand) -> Blog:
        """Run the create use case.

        Args:
            command: Title and body of the new blog.

        Returns:
            The persisted blog.
        """
        blog = Blog(title=command.title, body=command.body)
        created = self._creator.create(blog)
        self._logger.info("Created blog id=%s", created.id)
        return created
