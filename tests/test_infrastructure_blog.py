"""
Tests for the SQLAlchemy blog repository.

Runs against an in-memory SQLite database built per test.
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from app.domain.blog.entities import Blog
from app.domain.blog.errors import BlogNotFoundError
from app.infrastructure.blog.repository import MAX_BLOG_ID
from app.infrastructure.blog.tables import blogs
from app.shared.errors.classifier import classify


class TestCreate:
    def test_create_assigns_identity(self, repository) -> None:
        """The returned blog has a store-assigned id and echoes the input."""
        created = repository.create(Blog(title="my first blog post", body="hello world!"))

        assert created.id is not None and created.id > 0
        assert created.title == "my first blog post"
        assert created.body == "hello world!"
        assert created.created_at is not None
        assert created.updated_at is not None
        assert created.deleted_at is None

    def test_ids_are_distinct(self, repository) -> None:
        first = repository.create(Blog(title="a", body="a"))
        second = repository.create(Blog(title="b", body="b"))

        assert first.id != second.id

    def test_incoming_id_is_ignored(self, repository) -> None:
        existing = repository.create(Blog(title="a", body="a"))

        created = repository.create(Blog(id=existing.id, title="b", body="b"))

        assert created.id != existing.id


class TestGetByID:
    def test_fetch_equals_created(self, repository) -> None:
        created = repository.create(Blog(title="t", body="b"))

        assert repository.get_by_id(created.id) == created

    def test_unknown_id_raises_not_found(self, repository) -> None:
        with pytest.raises(BlogNotFoundError) as exc_info:
            repository.get_by_id(12345)

        assert exc_info.value.blog_id == 12345

    def test_id_beyond_storage_range_raises_not_found(self, repository) -> None:
        """Ids wider than a 64-bit key cannot exist in any store."""
        with pytest.raises(BlogNotFoundError):
            repository.get_by_id(99999999999999999999)

    def test_zero_id_raises_not_found(self, repository) -> None:
        with pytest.raises(BlogNotFoundError):
            repository.get_by_id(0)


class TestGetAll:
    def test_empty_store_returns_empty_list(self, repository) -> None:
        assert repository.get_all() == []

    def test_returns_live_blogs_in_id_order(self, repository) -> None:
        first = repository.create(Blog(title="a", body="a"))
        second = repository.create(Blog(title="b", body="b"))

        assert repository.get_all() == [first, second]

    def test_soft_deleted_blogs_are_excluded(self, repository) -> None:
        kept = repository.create(Blog(title="a", body="a"))
        removed = repository.create(Blog(title="b", body="b"))

        repository.delete(removed.id)

        assert repository.get_all() == [kept]


class TestUpdate:
    def test_update_replaces_title_and_body(self, repository) -> None:
        created = repository.create(Blog(title="old", body="old body"))

        updated = repository.update(created.id, Blog(title="new", body="new body"))

        assert updated.id == created.id
        assert updated.title == "new"
        assert updated.body == "new body"
        assert updated.created_at == created.created_at
        assert repository.get_by_id(created.id) == updated

    def test_update_without_body_resets_body(self, repository) -> None:
        """Fields missing from the patch are not merged: body becomes empty."""
        created = repository.create(Blog(title="old", body="keep me?"))

        updated = repository.update(created.id, Blog(title="new title"))

        assert updated.body == ""
        assert repository.get_by_id(created.id).body == ""

    def test_update_unknown_id_raises_not_found(self, repository) -> None:
        with pytest.raises(BlogNotFoundError):
            repository.update(999, Blog(title="t", body="b"))

    def test_update_deleted_blog_raises_not_found(self, repository) -> None:
        created = repository.create(Blog(title="t", body="b"))
        repository.delete(created.id)

        with pytest.raises(BlogNotFoundError):
            repository.update(created.id, Blog(title="t2", body="b2"))

    def test_update_out_of_range_id_raises_not_found(self, repository) -> None:
        with pytest.raises(BlogNotFoundError):
            repository.update(MAX_BLOG_ID + 1, Blog(title="t", body="b"))


class TestDelete:
    def test_delete_is_soft(self, repository, engine) -> None:
        """The row stays in the table with deleted_at set."""
        created = repository.create(Blog(title="t", body="b"))

        repository.delete(created.id)

        with pytest.raises(BlogNotFoundError):
            repository.get_by_id(created.id)
        with engine.connect() as conn:
            row = conn.execute(select(blogs).where(blogs.c.id == created.id)).one()
        assert row.deleted_at is not None

    def test_delete_unknown_id_is_not_an_error(self, repository) -> None:
        assert repository.delete(424242) is None

    def test_delete_out_of_range_id_is_not_an_error(self, repository) -> None:
        assert repository.delete(10**20) is None

    def test_delete_twice_is_not_an_error(self, repository) -> None:
        created = repository.create(Blog(title="t", body="b"))

        repository.delete(created.id)
        repository.delete(created.id)


class TestDuplicateKey:
    def test_primary_key_collision_classifies_as_conflict(self, engine) -> None:
        """A real duplicate-key error from the store maps to 409."""
        now = datetime.now(timezone.utc)
        row = {"id": 1, "title": "t", "body": "b", "created_at": now, "updated_at": now}
        with engine.begin() as conn:
            conn.execute(insert(blogs).values(**row))

        with pytest.raises(IntegrityError) as exc_info:
            with engine.begin() as conn:
                conn.execute(insert(blogs).values(**row))

        assert classify(exc_info.value).status_code == 409
