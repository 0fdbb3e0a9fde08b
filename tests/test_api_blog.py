"""
Tests for the blog API endpoints.

Exercises the full stack (router, use cases, SQLAlchemy repository) on
in-memory SQLite, plus error mapping with failing repository doubles.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.domain.blog.entities import Blog
from app.domain.blog.ports import BlogRepository
from app.interfaces.blog.dependencies import get_blog_repository

COLORS = "red red red blue green green yellow yellow yellow yellow"


class DuplicateKeyError(Exception):
    pgcode = "23505"


class FailingRepository(BlogRepository):
    """Repository whose every operation raises `error`."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    def create(self, blog: Blog) -> Blog:
        raise self._error

    def get_by_id(self, blog_id: int) -> Blog:
        raise self._error

    def get_all(self) -> list[Blog]:
        raise self._error

    def update(self, blog_id: int, blog: Blog) -> Blog:
        raise self._error

    def delete(self, blog_id: int) -> None:
        raise self._error


def _create(client: TestClient, title: str = "my first blog post", body: str = "hello world!") -> dict:
    response = client.post("/blogs/", json={"title": title, "body": body})
    assert response.status_code == 200
    return response.json()


class TestCreateEndpoint:
    """Tests for POST /blogs/."""

    def test_create_returns_entity(self, client) -> None:
        body = _create(client)

        assert body["id"] > 0
        assert body["title"] == "my first blog post"
        assert body["body"] == "hello world!"
        assert body["created_at"] is not None
        assert "deleted_at" not in body

    def test_missing_body_rejected(self, client) -> None:
        response = client.post("/blogs/", json={"title": "only a title"})
        assert response.status_code == 422

    def test_empty_title_rejected(self, client) -> None:
        response = client.post("/blogs/", json={"title": "", "body": "text"})
        assert response.status_code == 422

    def test_malformed_json_rejected(self, client) -> None:
        response = client.post(
            "/blogs/", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 422


class TestReadEndpoints:
    """Tests for GET /blogs/, /blogs/{id} and /blogs/{id}/words."""

    def test_list_is_empty_initially(self, client) -> None:
        response = client.get("/blogs/")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_created_blogs(self, client) -> None:
        first = _create(client, title="a", body="a")
        second = _create(client, title="b", body="b")

        assert client.get("/blogs/").json() == [first, second]

    def test_show_equals_created(self, client) -> None:
        created = _create(client)

        response = client.get(f"/blogs/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_show_unknown_is_404(self, client) -> None:
        response = client.get("/blogs/999")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Not Found"}

    def test_non_numeric_id_falls_through(self, client) -> None:
        """Non-integer segments do not match the show route."""
        assert client.get("/blogs/not-a-number").status_code == 404

    def test_out_of_range_id_is_404(self, client) -> None:
        response = client.get("/blogs/99999999999999999999")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Not Found"}

    def test_word_count(self, client) -> None:
        created = _create(client, title="colors", body=COLORS)

        response = client.get(f"/blogs/{created['id']}/words")

        assert response.status_code == 200
        assert response.json() == {"red": 3, "blue": 1, "green": 2, "yellow": 4}

    def test_word_count_unknown_is_404(self, client) -> None:
        assert client.get("/blogs/999/words").status_code == 404

    def test_word_count_non_numeric_id_rejected(self, client) -> None:
        assert client.get("/blogs/abc/words").status_code == 422

    def test_word_count_out_of_range_id_is_404(self, client) -> None:
        assert client.get("/blogs/99999999999999999999/words").status_code == 404


class TestNewEndpoint:
    """Tests for GET /blogs/new."""

    def test_new_is_not_implemented(self, client) -> None:
        response = client.get("/blogs/new")

        assert response.status_code == 501
        assert response.json() == {"code": 501, "message": "Not Implemented"}

    def test_new_does_not_leak_internal_text(self, client) -> None:
        response = client.get("/blogs/new")

        assert "creation form" not in response.text


class TestUpdateEndpoint:
    """Tests for PUT /blogs/{id}."""

    def test_update_replaces_fields(self, client) -> None:
        created = _create(client)

        response = client.put(
            f"/blogs/{created['id']}", json={"title": "edited", "body": "new body"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["title"] == "edited"
        assert body["body"] == "new body"
        assert client.get(f"/blogs/{created['id']}").json() == body

    def test_update_requires_both_fields(self, client) -> None:
        created = _create(client)

        response = client.put(f"/blogs/{created['id']}", json={"title": "edited"})

        assert response.status_code == 422

    def test_update_unknown_is_404(self, client) -> None:
        response = client.put("/blogs/999", json={"title": "t", "body": "b"})
        assert response.status_code == 404

    def test_update_non_numeric_id_matches_no_route(self, client) -> None:
        response = client.put("/blogs/abc", json={"title": "t", "body": "b"})
        assert response.status_code == 404


class TestDeleteEndpoint:
    """Tests for DELETE /blogs/{id}."""

    def test_delete_returns_204_without_body(self, client) -> None:
        created = _create(client)

        response = client.delete(f"/blogs/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""

    def test_deleted_blog_is_not_found(self, client) -> None:
        created = _create(client)
        client.delete(f"/blogs/{created['id']}")

        response = client.get(f"/blogs/{created['id']}")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Not Found"}
        assert client.get("/blogs/").json() == []

    def test_delete_unknown_is_204(self, client) -> None:
        assert client.delete("/blogs/999").status_code == 204


class TestErrorMapping:
    """Storage failures are classified regardless of the operation."""

    @pytest.fixture
    def duplicate_key_client(self, app):
        error = IntegrityError("INSERT INTO blogs ...", {}, DuplicateKeyError("duplicate key"))
        app.dependency_overrides[get_blog_repository] = lambda: FailingRepository(error)
        with TestClient(app) as client:
            yield client
        app.dependency_overrides.clear()

    @pytest.mark.parametrize(
        "method, path, payload",
        [
            ("post", "/blogs/", {"title": "t", "body": "b"}),
            ("put", "/blogs/1", {"title": "t", "body": "b"}),
            ("get", "/blogs/1", None),
            ("delete", "/blogs/1", None),
        ],
    )
    def test_duplicate_key_is_409(self, duplicate_key_client, method, path, payload) -> None:
        kwargs = {"json": payload} if payload is not None else {}

        response = getattr(duplicate_key_client, method)(path, **kwargs)

        assert response.status_code == 409
        assert response.json() == {"code": 409, "message": "Conflict"}

    def test_unexpected_error_is_sanitized_500(self, app) -> None:
        error = RuntimeError("password=hunter2 host=db.internal")
        app.dependency_overrides[get_blog_repository] = lambda: FailingRepository(error)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/blogs/")
        app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"code": 500, "message": "Internal Server Error"}
        assert "hunter2" not in response.text

    def test_unexpected_error_keeps_response_headers(self, app, caplog) -> None:
        """A 500 from an unhandled error still gets the request id and security headers."""
        app.dependency_overrides[get_blog_repository] = lambda: FailingRepository(RuntimeError("boom"))

        with TestClient(app) as client:
            with caplog.at_level(logging.ERROR, logger="app.shared.middleware"):
                response = client.get("/blogs/", headers={"X-Request-ID": "req-500"})
        app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"code": 500, "message": "Internal Server Error"}
        assert response.headers["X-Request-ID"] == "req-500"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert any(
            "request_id=req-500" in record.getMessage()
            for record in caplog.records
            if record.name == "app.shared.middleware"
        )
