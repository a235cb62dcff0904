"""Unit tests for domain error to HTTP mapping."""

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from collab.domain.error import (
    DomainError,
    InvalidTokenError,
    InviteAlreadyUsedError,
    LinkRevokedError,
    NotAuthorizedError,
    NotFoundError,
    RoleMismatchError,
    StorageError,
    TokenExpiredError,
    ValidationError,
)
from collab.interface.error import register_exception_handlers


@pytest.fixture
def raising_client():
    """App with one route that raises whatever error the test puts in."""
    app = FastAPI()
    register_exception_handlers(app)
    state = {}

    @app.get("/boom")
    async def boom():
        raise state["error"]

    client = TestClient(app)

    def call(error: Exception):
        state["error"] = error
        return client.get("/boom")

    return call


class TestAccessDenied:
    """Guest rejections look identical whatever the cause."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidTokenError(),
            LinkRevokedError(),
            TokenExpiredError(),
            InviteAlreadyUsedError(),
        ],
    )
    def test_neutral_response(self, raising_client, error):
        response = raising_client(error)

        assert response.status_code == 403
        assert response.json() == {
            "title": "Access Restricted",
            "detail": "This link has been revoked or expired",
        }

    def test_role_mismatch(self, raising_client):
        """A valid token used beyond its role gets a distinct message."""
        response = raising_client(RoleMismatchError("viewer", "edit"))

        assert response.status_code == 403
        assert response.json()["title"] == "Access Restricted"
        assert response.json()["detail"] == "This link does not allow that action"


class TestOwnerErrors:
    """Owner-facing errors map to their usual status codes."""

    def test_validation(self, raising_client):
        response = raising_client(ValidationError("role", "Bad role"))

        assert response.status_code == 400
        assert response.json() == {"detail": "Bad role", "field": "role"}

    def test_not_found(self, raising_client):
        response = raising_client(NotFoundError("Objective", "obj-1"))

        assert response.status_code == 404

    def test_not_authorized(self, raising_client):
        response = raising_client(NotAuthorizedError("objective", "obj-1", "u"))

        assert response.status_code == 403

    def test_storage(self, raising_client):
        """Storage failures are 503, never an access decision."""
        response = raising_client(StorageError("db down"))

        assert response.status_code == 503
        assert "db down" not in response.text

    def test_other_domain_error(self, raising_client):
        response = raising_client(DomainError("odd"))

        assert response.status_code == 400


class TestRequestValidation:
    """Malformed request parameters get the same body as domain validation."""

    def test_out_of_range_query(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/items")
        async def items(limit: int = Query(default=10, le=50)):
            return {"limit": limit}

        response = TestClient(app).get("/items", params={"limit": 51})

        assert response.status_code == 400
        assert response.json()["field"] == "limit"
