# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard API endpoints.

Endpoints:
    GET /dashboard/stats - Entity counts and the newest records
    GET /dashboard/activity/{activity_type} - Newest records of one type
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_dashboard_service
from src.domains.dashboard.service import DashboardService
from src.models.dashboard import ActivityResponse, DashboardStatsResponse

router = APIRouter()

Service = Annotated[DashboardService, Depends(get_dashboard_service)]


@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    summary="Dashboard statistics",
    description="Active totals per entity and the five newest teachers, courses and classes.",
)
async def get_stats(service: Service) -> DashboardStatsResponse:
    return await service.get_stats()


@router.get(
    "/activity/{activity_type}",
    response_model=ActivityResponse,
    summary="Recent activity",
    description="activity_type is one of teachers, courses or classes.",
)
async def get_activity(
    activity_type: str,
    service: Service,
    limit: Annotated[int, Query(description="Maximum records, at most 50")] = 10,
) -> ActivityResponse:
    return await service.get_activity(activity_type, limit=limit)
