"""Test error handling functionality.

Verifies that custom exceptions carry the expected attributes and that the
handlers render every failure in the same JSON envelope.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from core.error_handlers import register_exception_handlers
from core.exceptions import (
    AppException,
    DatabaseError,
    MealPlanNotFoundError,
    NotFoundError,
    ProfileRequiredError,
)


@pytest.fixture(scope="module")
def error_client():
    """A bare app whose routes raise each kind of error."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/app-error")
    def app_error():
        raise ProfileRequiredError(7)

    @app.get("/db-error")
    def db_error():
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


def test_exception_classes_have_proper_attributes():
    """Test that custom exception classes have expected attributes."""
    exc = NotFoundError("User", 123)
    assert exc.status_code == 404
    assert "User" in exc.message
    assert "123" in exc.message

    exc = MealPlanNotFoundError(1, "2026-10-18")
    assert exc.status_code == 404
    assert exc.details["date"] == "2026-10-18"

    exc = DatabaseError("Write failed", operation="upsert")
    assert exc.status_code == 500
    assert exc.details == {"operation": "upsert"}
    assert isinstance(exc, AppException)


def test_app_exception_is_rendered_with_details(error_client):
    response = error_client.get("/app-error", headers={"x-request-id": "req-42"})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["status_code"] == 400
    assert error["details"]["user_id"] == 7
    assert error["request_id"] == "req-42"


def test_database_errors_are_opaque(error_client):
    response = error_client.get("/db-error")
    assert response.status_code == 500
    body = response.json()
    assert body["error"]["message"] == "A database error occurred"
    assert "disk" not in response.text


def test_unhandled_errors_are_opaque(error_client):
    response = error_client.get("/boom")
    assert response.status_code == 500
    assert response.json()["error"]["details"] == {"type": "internal_error"}
    assert "secret" not in response.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
