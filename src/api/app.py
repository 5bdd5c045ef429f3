# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the LMS admin
panel API.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from src.api.admin import router as admin_router
from src.api.dependencies import close_db, init_db
from src.api.errors import register_exception_handlers
from src.api.middleware.auth import AuthMiddleware
from src.api.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from src.api.routes import health
from src.core.config import get_settings
from src.infrastructure.storage.uploads import UPLOAD_URL_PREFIX
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Startup fails, and the process exits, when required configuration is
    missing or the database cannot be reached.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting LMS Admin Panel API",
        extra={"environment": settings.environment, "debug": settings.debug},
    )

    try:
        await init_db()
    except Exception as e:
        logger.critical("Startup failed: %s", e)
        raise
    logger.info("Database connection initialized")

    yield

    await close_db()
    logger.info("Shutting down LMS Admin Panel API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="LMS Admin Panel API",
        description="Administration backend for teachers, courses, classes, students and parents",
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        # A 307 to the slashed path would drop the Authorization header
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.limiter = limiter

    # =========================================================================
    # Exception handlers
    # =========================================================================
    register_exception_handlers(app)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # =========================================================================
    # Middleware (order matters - last added is first executed)
    # =========================================================================
    app.add_middleware(AuthMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(admin_router)
    Path(settings.uploads.directory).mkdir(parents=True, exist_ok=True)
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.uploads.directory, check_dir=False),
        name="uploads",
    )

    return app
