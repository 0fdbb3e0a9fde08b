"""
Database engine construction.

Builds the SQLAlchemy engine from the configured connection string,
verifies the store is reachable and creates the schema.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.infrastructure.blog.tables import metadata

logger = logging.getLogger(__name__)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for `url`.

    In-memory SQLite URLs share a single connection across threads so
    that every request sees the same database.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, echo=echo, pool_pre_ping=True)


def check_connection(engine: Engine) -> None:
    """Run a trivial query; raises the driver's error if the store is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Connected to database dialect=%s", engine.dialect.name)


def create_schema(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    metadata.create_all(engine)
