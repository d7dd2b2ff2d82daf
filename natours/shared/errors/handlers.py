"""
Centralized error handlers for FastAPI.

Maps tours domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the JSend shape: {"status", "message"}.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from natours.domain.tours.errors import (
    TourDomainError,
    TourNotFoundError,
    TourPersistenceError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

STATUS_FAIL = "fail"
STATUS_ERROR = "error"

INVALID_ID_MESSAGE = "Invalid ID"
WRITE_FAILED_MESSAGE = "Error writing file"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(
    status_code: int,
    message: str,
    status: str = STATUS_FAIL,
    headers: Optional[dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"status": status, "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(TourNotFoundError)
    async def handle_tour_not_found(
        _request: Request, exc: TourNotFoundError
    ) -> JSONResponse:
        """Handle lookups for an id with no matching tour."""
        logger.info("Tour not found: %s", exc.tour_id)
        return error_response(HTTP_404, INVALID_ID_MESSAGE)

    @app.exception_handler(TourPersistenceError)
    async def handle_tour_persistence(
        _request: Request, exc: TourPersistenceError
    ) -> JSONResponse:
        """Handle failures writing the collection to disk."""
        logger.error("Tour persistence failed: %s", exc.reason)
        return error_response(HTTP_500, WRITE_FAILED_MESSAGE)

    @app.exception_handler(TourDomainError)
    async def handle_tour_domain(
        _request: Request, exc: TourDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled tours domain errors."""
        logger.error("Unhandled tours domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE, status=STATUS_ERROR)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies."""
        logger.info("Rejected request body: %d validation errors", len(exc.errors()))
        return error_response(
            HTTP_422,
            "Invalid request body",
            errors=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing-level errors such as unknown paths."""
        if exc.status_code == HTTP_404:
            message = f"Can't find {request.url.path} on this server"
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, message, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE, status=STATUS_ERROR)
