# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rate limiting using slowapi.

Every API route shares the default limit (100 requests per 15 minutes per
client IP by default). Health and root routes are exempt, and requests that
match no route handler (static uploads) are not counted.

Example:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from src.core.config import get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def get_client_identifier(request: Request) -> str:
    """Identify the client by IP address.

    Args:
        request: HTTP request.

    Returns:
        Client identifier string.
    """
    return f"ip:{get_remote_address(request)}"


settings = get_settings()
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[settings.rate_limit.limit_string],
    storage_uri="memory://",
    enabled=settings.rate_limit.enabled,
)


def rate_limit_exceeded_handler(
    request: Request,
    exc: RateLimitExceeded,
) -> JSONResponse:
    """Answer 429 with the uniform error body.

    SlowAPIMiddleware calls this synchronously, so it must stay a plain
    function.

    Args:
        request: HTTP request.
        exc: Rate limit exceeded exception.

    Returns:
        JSON response with the error message.
    """
    logger.warning(
        "Rate limit exceeded: %s for %s",
        exc.detail,
        get_client_identifier(request),
    )

    return JSONResponse(status_code=429, content={"message": RATE_LIMIT_MESSAGE})
