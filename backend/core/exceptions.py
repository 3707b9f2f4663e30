"""
Custom exception handlers for consistent API error responses.

Every error leaves the API as ``{"message", "error_code", "path"}`` so the
admin UI can surface ``message`` verbatim.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """Base API error with consistent structure"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundError(APIError):
    """Resource not found error"""

    def __init__(
        self, detail: str = "Resource not found", error_code: str = "NOT_FOUND"
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=detail, error_code=error_code
        )


class InvalidStateError(APIError):
    """Operation not legal for the resource's current state"""

    def __init__(
        self,
        detail: str = "Operation not allowed in current state",
        error_code: str = "INVALID_STATE",
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class ValidationError(APIError):
    """Validation error"""

    def __init__(
        self, detail: str = "Validation failed", error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class ConflictError(APIError):
    """Duplicate unique value; reported as 400 like every other bad write"""

    def __init__(self, detail: str = "Resource conflict", error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class StoreFailureError(APIError):
    """Transaction, constraint or connectivity error from the database"""

    def __init__(
        self,
        detail: str = "Database operation failed",
        error_code: str = "STORE_FAILURE",
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=error_code,
        )


def integrity_error_to_api_error(
    exc: IntegrityError,
    duplicate_message: str,
    reference_message: str,
) -> APIError:
    """Translate a database integrity error into the matching API error."""
    error_info = str(exc.orig).lower() if exc.orig else str(exc).lower()

    if "foreign key" in error_info:
        return ValidationError(reference_message, error_code="FOREIGN_KEY_VIOLATION")
    if "unique" in error_info or "duplicate" in error_info:
        return ConflictError(duplicate_message, error_code="UNIQUE_VIOLATION")
    return ValidationError("Database constraint violation", error_code="INTEGRITY_ERROR")


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.detail,
            "error_code": exc.error_code,
            "path": str(request.url.path),
        },
        headers=exc.headers,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or malformed request fields are a 400, not a 422"""
    logger.warning(f"Request validation failed at {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Missing or invalid request fields.",
            "error_code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
            "path": str(request.url.path),
        },
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
