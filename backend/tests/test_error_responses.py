# backend/tests/test_error_responses.py

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    StoreFailureError,
    ValidationError,
    integrity_error_to_api_error,
    register_exception_handlers,
)


class _Body(BaseModel):
    count: int


@pytest.fixture
def error_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    def missing():
        raise NotFoundError("Equipment item 3 not found.")

    @app.get("/busy")
    def busy():
        raise InvalidStateError("No active checkout found for this item.")

    @app.get("/broken")
    def broken():
        raise StoreFailureError()

    @app.post("/echo")
    def echo(body: _Body):
        return body

    return TestClient(app)


@pytest.mark.parametrize(
    "path,status_code,error_code",
    [
        ("/missing", 404, "NOT_FOUND"),
        ("/busy", 400, "INVALID_STATE"),
        ("/broken", 500, "STORE_FAILURE"),
    ],
)
def test_api_errors_share_one_shape(error_app, path, status_code, error_code):
    response = error_app.get(path)

    assert response.status_code == status_code
    body = response.json()
    assert set(body) == {"message", "error_code", "path"}
    assert body["error_code"] == error_code
    assert body["path"] == path


def test_request_validation_is_400(error_app):
    response = error_app.post("/echo", json={"count": "many"})

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["loc"] == ["body", "count"]


class TestIntegrityErrorTranslation:
    def _translate(self, message):
        return integrity_error_to_api_error(
            IntegrityError("INSERT", {}, Exception(message)),
            duplicate_message="duplicate",
            reference_message="reference",
        )

    def test_sqlite_foreign_key(self):
        error = self._translate("FOREIGN KEY constraint failed")
        assert isinstance(error, ValidationError)
        assert error.detail == "reference"

    def test_postgres_foreign_key(self):
        error = self._translate(
            'update or delete on table "staff_members" violates foreign key constraint'
        )
        assert error.error_code == "FOREIGN_KEY_VIOLATION"

    def test_unique(self):
        error = self._translate("UNIQUE constraint failed: roles.name")
        assert isinstance(error, ConflictError)
        assert error.status_code == 400
        assert error.detail == "duplicate"

    def test_other_constraint(self):
        error = self._translate("NOT NULL constraint failed: staff_members.email")
        assert error.error_code == "INTEGRITY_ERROR"
