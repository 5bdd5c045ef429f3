# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Service info and health check endpoints.

These routes are public and exempt from rate limiting.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.api.middleware.rate_limit import limiter
from src.core.config import get_settings
from src.infrastructure.database.connection import check_database_connection

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "LMS Admin Panel API"

# Track server start time for uptime calculation
_server_start_time = time.monotonic()


class ServiceInfo(BaseModel):
    """Root endpoint response."""
    message: str = Field(description="Service name")
    environment: str = Field(description="Deployment environment")


class HealthResponse(BaseModel):
    """Liveness response."""
    status: str = Field(description="Always OK while the process serves requests")
    uptime: float = Field(description="Seconds since the process started")
    timestamp: datetime = Field(description="Current server time (UTC)")


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    ready: bool = Field(description="Whether the service is ready")
    checks: dict[str, Any] = Field(description="Individual check results")


@router.get("/", response_model=ServiceInfo)
@limiter.exempt
async def service_info(request: Request) -> ServiceInfo:
    """Name and environment of the running service."""
    return ServiceInfo(message=SERVICE_NAME, environment=get_settings().environment)


@router.get("/health", response_model=HealthResponse)
@limiter.exempt
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: the process is up."""
    return HealthResponse(
        status="OK",
        uptime=round(time.monotonic() - _server_start_time, 3),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
@limiter.exempt
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Readiness probe: the database answers ``SELECT 1``.

    Returns 503 while the database is unreachable.
    """
    start = time.monotonic()
    db_ok = await check_database_connection()
    latency_ms = round((time.monotonic() - start) * 1000, 2)

    checks = {"database": {"status": "healthy" if db_ok else "unhealthy", "latency_ms": latency_ms}}
    if not db_ok:
        logger.error("Readiness check failed: database unreachable")
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(ready=False, checks=checks).model_dump(),
        )

    return ReadinessResponse(ready=True, checks=checks)
