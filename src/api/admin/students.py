# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student read-only API endpoints.

Endpoints:
    GET /students - List active students
    GET /students/{student_id} - Get one student
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_student_service
from src.domains.student.service import StudentService
from src.models.student import StudentListResponse, StudentResponse

router = APIRouter()

Service = Annotated[StudentService, Depends(get_student_service)]


@router.get(
    "",
    response_model=StudentListResponse,
    summary="List students",
    description="Active students, newest first, with class and parent resolved.",
)
async def list_students(
    service: Service,
    search: Annotated[str | None, Query(description="Match name or email")] = None,
    class_id: Annotated[str | None, Query(alias="classId", description="Class id")] = None,
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int, Query(description="Page size, at most 50")] = 10,
) -> StudentListResponse:
    return await service.list_students(search=search, class_id=class_id, page=page, limit=limit)


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student",
)
async def get_student(student_id: str, service: Service) -> StudentResponse:
    return await service.get_student(student_id)
