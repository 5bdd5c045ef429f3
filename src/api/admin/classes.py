# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class management API endpoints (JSON bodies).

Endpoints:
    GET /classes - List active classes
    GET /classes/{class_id} - Get one class
    POST /classes - Create a class
    PUT /classes/{class_id} - Update a class
    DELETE /classes/{class_id} - Archive a class

Example:
    POST /api/classes
    Body:
        {
            "className": "Algebra A",
            "classCode": "alg-a",
            "courseLinked": "<course id>",
            "teacherAssigned": "<teacher id>",
            "schedule": {"day": "monday", "time": "10:00"},
            "maxStudents": 30
        }
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_class_service
from src.domains.class_.service import ClassService
from src.models.class_ import (
    ClassCreateRequest,
    ClassListResponse,
    ClassMutationResponse,
    ClassResponse,
    ClassUpdateRequest,
)
from src.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[ClassService, Depends(get_class_service)]


@router.get(
    "",
    response_model=ClassListResponse,
    summary="List classes",
    description="Active classes, newest first, with course and teacher resolved.",
)
async def list_classes(
    service: Service,
    course: Annotated[str | None, Query(description="Course id")] = None,
    teacher: Annotated[str | None, Query(description="Teacher id")] = None,
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int, Query(description="Page size, at most 50")] = 10,
) -> ClassListResponse:
    return await service.list_classes(course_id=course, teacher_id=teacher, page=page, limit=limit)


@router.get(
    "/{class_id}",
    response_model=ClassResponse,
    summary="Get class",
)
async def get_class(class_id: str, service: Service) -> ClassResponse:
    return await service.get_class(class_id)


@router.post(
    "",
    response_model=ClassMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create class",
    description="The linked course and the assigned teacher must exist and be active.",
)
async def create_class(data: ClassCreateRequest, service: Service) -> ClassMutationResponse:
    return await service.create_class(data)


@router.put(
    "/{class_id}",
    response_model=ClassMutationResponse,
    summary="Update class",
    description="Only className, schedule, maxStudents and teacherAssigned change.",
)
async def update_class(
    class_id: str,
    data: ClassUpdateRequest,
    service: Service,
) -> ClassMutationResponse:
    return await service.update_class(class_id, data)


@router.delete(
    "/{class_id}",
    response_model=MessageResponse,
    summary="Archive class",
    description="Marks the class inactive. Enrolled students are left untouched.",
)
async def archive_class(class_id: str, service: Service) -> MessageResponse:
    return await service.archive_class(class_id)
