"""
Use case: List every live blog.

Input: None
Output: list[Blog] (possibly empty)
Side effects: None (read-only query).
Failure cases: Storage errors.
"""

from app.core.container import Container
from app.domain.blog.entities import Blog
from app.domain.blog.ports import MultiBlogGetter


class ListBlogsUseCase:
    def __init__(self, getter: MultiBlogGetter, container: Container) -> None:
        self._getter = getter
        self._logger = container.get_logger("application.blog")

    def execute(self) -> list[Blog]:
        blogs = self._getter.get_all()
        self._logger.debug("Listed %d blogs", len(blogs))
        return blogs
