# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application error hierarchy.

Every error a service or the auth gate raises on purpose derives from
AppError and carries the HTTP status the API layer answers with. The API
layer renders all of them as ``{"message": ...}``.

Example:
    >>> raise NotFoundError("Teacher not found")
"""

from typing import Any


class AppError(Exception):
    """Base exception for expected application failures.

    Attributes:
        status_code: HTTP status used when rendered by the API.
        default_message: Message used when none is given.
        message: Human readable message sent to the client.
        details: Optional extra context for logging.
    """

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationError(AppError):
    """Malformed input: missing fields, bad ids, out of range values."""

    status_code = 400
    default_message = "Missing required fields"


class ConflictError(AppError):
    """A unique value is already taken."""

    status_code = 400
    default_message = "Duplicate field value"


class AuthError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = "Invalid credentials"


class ForbiddenError(AppError):
    """Authenticated but not allowed."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    """Requested record does not exist or is inactive."""

    status_code = 404
    default_message = "Not found"


class ConfigError(AppError):
    """Required configuration is missing."""

    status_code = 500
    default_message = "Server configuration error"


class AuthenticationFailure(AppError):
    """Token verification failed for a reason other than a bad token."""

    status_code = 500
    default_message = "Internal authentication error"
