"""
Port interfaces (ABCs) for the blog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

Each CRUD capability is its own port, so a consumer (and its test
double) depends only on the operation it actually calls.
"""

from abc import ABC, abstractmethod

from app.domain.blog.entities import Blog


class BlogCreator(ABC):
    """Port for persisting new blogs."""

    @abstractmethod
    def create(self, blog: Blog) -> Blog:
        """Persist a new blog and return it with its store-assigned id."""
        raise NotImplementedError


class SingleBlogGetter(ABC):
    """Port for fetching one blog by id."""

    @abstractmethod
    def get_by_id(self, blog_id: int) -> Blog:
        """Return the live blog with this id.

        Raises:
            BlogNotFoundError: If no live blog matches.
        """
        raise NotImplementedError


class MultiBlogGetter(ABC):
    """Port for listing blogs."""

    @abstractmethod
    def get_all(self) -> list[Blog]:
        """Return every live blog; an empty list when there are none."""
        raise NotImplementedError


class BlogUpdater(ABC):
    """Port for overwriting an existing blog."""

    @abstractmethod
    def update(self, blog_id: int, blog: Blog) -> Blog:
        """Replace title and body of the blog with this id.

        Fields are not merged with the stored row: whatever `blog` carries
        (including defaults) is written.

        Raises:
            BlogNotFoundError: If no live blog matches.
        """
        raise NotImplementedError


class BlogDeleter(ABC):
    """Port for soft-deleting blogs."""

    @abstractmethod
    def delete(self, blog_id: int) -> None:
        """Soft-delete the blog with this id. Unknown ids are not an error."""
        raise NotImplementedError


class BlogRepository(
    BlogCreator, SingleBlogGetter, MultiBlogGetter, BlogUpdater, BlogDeleter
):
    """Full CRUD port, implemented by storage adapters."""
