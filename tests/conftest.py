"""
Shared fixtures.

Repository and API tests run against an in-memory SQLite database; each
test gets a fresh engine, so no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.container import build_container
from app.infrastructure.blog.repository import SQLAlchemyBlogRepository
from app.infrastructure.database import create_db_engine, create_schema
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(postgresql_url="sqlite://", rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings.get_postgresql_url())
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def container(settings):
    return build_container(settings)


@pytest.fixture
def repository(container, engine) -> SQLAlchemyBlogRepository:
    return SQLAlchemyBlogRepository(container=container, engine=engine)


@pytest.fixture
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
