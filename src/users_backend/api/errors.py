"""Exception handlers translating failures into envelope responses."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_backend.api.models import ErrorResponse
from users_backend.api.services import UsersServiceError

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    description: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(description=description, code=code, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def users_service_exception_handler(
    request: Request, exc: UsersServiceError
) -> JSONResponse:
    """Convert a :class:`UsersServiceError` to its HTTP status."""
    return _error_response(exc.status_code, exc.message, exc.code)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, bad method, unreadable body)."""
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    return _error_response(
        exc.status_code, str(exc.detail), code, headers=exc.headers
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 with one entry per failed field."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request data",
        "VALIDATION_ERROR",
        errors,
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Hide unexpected database failures behind a generic 500."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Unexpected database error",
        "DATABASE_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the shared exception handlers to ``app``."""
    app.add_exception_handler(UsersServiceError, users_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)


__all__ = [
    "database_exception_handler",
    "http_exception_handler",
    "register_exception_handlers",
    "users_service_exception_handler",
    "validation_exception_handler",
]
