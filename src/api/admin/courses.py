# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course management API endpoints.

Create and update accept multipart form data with an optional
``thumbnail`` image (JPEG or PNG up to 5 MB).

Endpoints:
    GET /courses - List active courses
    GET /courses/{course_id} - Get one course
    POST /courses - Create a course
    PUT /courses/{course_id} - Update a course
    DELETE /courses/{course_id} - Archive a course
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from src.api.dependencies import Uploads, get_course_service
from src.domains.course.service import CourseService
from src.models.common import MessageResponse
from src.models.course import (
    CourseCreateRequest,
    CourseListResponse,
    CourseMutationResponse,
    CourseResponse,
    CourseUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[CourseService, Depends(get_course_service)]


@router.get(
    "",
    response_model=CourseListResponse,
    summary="List courses",
    description="Active courses, newest first, with the assigned teacher resolved.",
)
async def list_courses(
    service: Service,
    search: Annotated[str | None, Query(description="Match course name")] = None,
    class_level: Annotated[str | None, Query(alias="classLevel", description="1 to 12")] = None,
    subject: Annotated[str | None, Query(description="Exact subject")] = None,
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int, Query(description="Page size, at most 50")] = 10,
) -> CourseListResponse:
    return await service.list_courses(
        search=search,
        class_level=class_level,
        subject=subject,
        page=page,
        limit=limit,
    )


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Get course",
)
async def get_course(course_id: str, service: Service) -> CourseResponse:
    return await service.get_course(course_id)


@router.post(
    "",
    response_model=CourseMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    description="The assigned teacher must exist and be active.",
)
async def create_course(
    service: Service,
    uploads: Uploads,
    course_name: Annotated[str, Form(alias="courseName")],
    class_level: Annotated[str, Form(alias="classLevel")],
    subject: Annotated[str, Form()],
    description: Annotated[str, Form()],
    duration_in_weeks: Annotated[str, Form(alias="durationInWeeks")],
    teacher_assigned: Annotated[str, Form(alias="teacherAssigned")],
    price: Annotated[str | None, Form()] = None,
    thumbnail: Annotated[UploadFile | None, File()] = None,
) -> CourseMutationResponse:
    request = CourseCreateRequest(
        course_name=course_name,
        class_level=class_level,
        subject=subject,
        description=description,
        duration_in_weeks=duration_in_weeks,
        teacher_assigned=teacher_assigned,
        price=price or 0,
    )
    thumbnail_path = await uploads.save(thumbnail)
    return await service.create_course(request, thumbnail=thumbnail_path)


@router.put(
    "/{course_id}",
    response_model=CourseMutationResponse,
    summary="Update course",
    description="Only courseName, description, price, durationInWeeks, status and thumbnail change.",
)
async def update_course(
    course_id: str,
    service: Service,
    uploads: Uploads,
    course_name: Annotated[str | None, Form(alias="courseName")] = None,
    description: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    duration_in_weeks: Annotated[str | None, Form(alias="durationInWeeks")] = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    thumbnail: Annotated[UploadFile | None, File()] = None,
) -> CourseMutationResponse:
    request = CourseUpdateRequest(
        course_name=course_name,
        description=description,
        price=price,
        duration_in_weeks=duration_in_weeks,
        status=status_,
    )
    thumbnail_path = await uploads.save(thumbnail)
    return await service.update_course(course_id, request, thumbnail=thumbnail_path)


@router.delete(
    "/{course_id}",
    response_model=MessageResponse,
    summary="Archive course",
    description="Marks the course inactive. Linked classes are left untouched.",
)
async def archive_course(course_id: str, service: Service) -> MessageResponse:
    return await service.archive_course(course_id)
