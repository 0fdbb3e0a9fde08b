"""
Adapter: Blog repository.

Implements the BlogRepository port on top of a SQLAlchemy engine.
Soft-deleted rows (deleted_at set) are invisible to every read.
Storage errors are not caught or wrapped here; classification happens
at the interface layer.
"""

from datetime import datetime, timezone

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Connection, Engine, Row

from app.core.container import Container
from app.domain.blog.entities import Blog
from app.domain.blog.errors import BlogNotFoundError
from app.domain.blog.ports import BlogRepository
from app.infrastructure.blog.tables import blogs

# Widest integer key any supported store can hold (signed 64-bit).
MAX_BLOG_ID = 2**63 - 1


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _storable(blog_id: int) -> bool:
    return 0 < blog_id <= MAX_BLOG_ID


def _to_entity(row: Row) -> Blog:
    return Blog(
        id=row.id,
        title=row.title,
        body=row.body,
        created_at=row.created_at,
        updated_at=row.updated_at,
        deleted_at=row.deleted_at,
    )


class SQLAlchemyBlogRepository(BlogRepository):
    """Persists blogs in the `blogs` table.

    Works against any SQLAlchemy dialect; PostgreSQL in production,
    SQLite in the test suite.
    """

    def __init__(self, container: Container, engine: Engine) -> None:
        self._engine = engine
        self._logger = container.get_logger("infrastructure.blog")

    def _select_live(self, conn: Connection, blog_id: int) -> Blog:
        if not _storable(blog_id):
            raise BlogNotFoundError(blog_id)
        query = select(blogs).where(blogs.c.id == blog_id, blogs.c.deleted_at.is_(None))
        row = conn.execute(query).first()
        if row is None:
            raise BlogNotFoundError(blog_id)
        return _to_entity(row)

    def create(self, blog: Blog) -> Blog:
        """Insert a new row and return it as stored.

        Args:
            blog: Blog carrying title and body; any id on it is ignored.

        Returns:
            The stored blog, with id and timestamps assigned.
        """
        now = _now()
        query = insert(blogs).values(
            title=blog.title,
            body=blog.body,
            created_at=now,
            updated_at=now,
        )

        with self._engine.begin() as conn:
            result = conn.execute(query)
            created = self._select_live(conn, result.inserted_primary_key[0])

        self._logger.debug("Inserted blog id=%d.", created.id)
        return created

    def get_by_id(self, blog_id: int) -> Blog:
        """Return the live blog with `blog_id`.

        Raises:
            BlogNotFoundError: If the id is unknown or soft-deleted.
        """
        with self._engine.connect() as conn:
            return self._select_live(conn, blog_id)

    def get_all(self) -> list[Blog]:
        """Return every live blog ordered by id."""
        query = select(blogs).where(blogs.c.deleted_at.is_(None)).order_by(blogs.c.id)

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [_to_entity(row) for row in rows]

    def update(self, blog_id: int, blog: Blog) -> Blog:
        """Overwrite title and body of a live blog.

        Both fields are written as given, without merging with the stored
        row.

        Raises:
            BlogNotFoundError: If the id is unknown or soft-deleted.
        """
        if not _storable(blog_id):
            raise BlogNotFoundError(blog_id)
        query = (
            update(blogs)
            .where(blogs.c.id == blog_id, blogs.c.deleted_at.is_(None))
            .values(title=blog.title, body=blog.body, updated_at=_now())
        )

        with self._engine.begin() as conn:
            result = conn.execute(query)
            if result.rowcount == 0:
                raise BlogNotFoundError(blog_id)
            updated = self._select_live(conn, blog_id)

        self._logger.debug("Updated blog id=%d.", blog_id)
        return updated

    def delete(self, blog_id: int) -> None:
        """Soft-delete the blog; a no-op for unknown or already deleted ids."""
        if not _storable(blog_id):
            return
        query = (
            update(blogs)
            .where(blogs.c.id == blog_id, blogs.c.deleted_at.is_(None))
            .values(deleted_at=_now())
        )

        with self._engine.begin() as conn:
            result = conn.execute(query)

        self._logger.debug("Soft-deleted blog id=%d (rows=%d).", blog_id, result.rowcount)
