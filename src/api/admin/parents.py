# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Parent read-only API endpoints.

Endpoints:
    GET /parents - List active parents with their active children
    GET /parents/{parent_id} - Get one parent, children with their class
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_parent_service
from src.domains.parent.service import ParentService
from src.models.student import ParentListResponse, ParentResponse

router = APIRouter()

Service = Annotated[ParentService, Depends(get_parent_service)]


@router.get(
    "",
    response_model=ParentListResponse,
    summary="List parents",
)
async def list_parents(
    service: Service,
    search: Annotated[str | None, Query(description="Match name, email or phone")] = None,
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int, Query(description="Page size, at most 50")] = 10,
) -> ParentListResponse:
    return await service.list_parents(search=search, page=page, limit=limit)


@router.get(
    "/{parent_id}",
    response_model=ParentResponse,
    summary="Get parent",
)
async def get_parent(parent_id: str, service: Service) -> ParentResponse:
    return await service.get_parent(parent_id)
