# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exception handlers rendering every failure as ``{"message": ...}``.

Services raise AppError subclasses carrying their HTTP status. Request
validation, unique constraint violations, unknown routes and unexpected
errors are translated here so clients always see the same body shape.

Example:
    app = FastAPI()
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import get_settings
from src.core.exceptions import AppError, ConflictError, ValidationError
from src.infrastructure.database.connection import DatabaseError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def validation_message(errors: list[dict]) -> str:
    """Summarize pydantic errors as one client message.

    Any missing field yields the generic message; otherwise the first
    offending field is named in camelCase.
    """
    if any(error.get("type") == "missing" for error in errors):
        return ValidationError.default_message

    for error in errors:
        fields = [part for part in error.get("loc", ()) if isinstance(part, str)]
        fields = [part for part in fields if part not in ("body", "query", "path", "form")]
        if fields:
            name = fields[-1]
            return f"Invalid {to_camel(name) if '_' in name else name}"

    return "Invalid request"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError | PydanticValidationError,
) -> JSONResponse:
    message = validation_message(exc.errors())
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.info("Unique constraint violated on %s %s", request.method, request.url.path)
    return error_response(ConflictError.status_code, ConflictError.default_message)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return error_response(exc.status_code, ROUTE_NOT_FOUND_MESSAGE)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log and answer 500 without leaking internals.

    Production logs carry only the exception type; elsewhere the full
    traceback is logged.
    """
    if get_settings().is_production:
        logger.error(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
        )
    else:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the uniform error handlers on an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
