# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher management API endpoints.

Create and update accept multipart form data so a profile image
(``profileImage``, JPEG or PNG up to 5 MB) can be attached. ``subjects``
may be sent as repeated fields or as one JSON array string.

Endpoints:
    GET /teachers - List active teachers
    GET /teachers/{teacher_id} - Get one teacher
    POST /teachers - Create a teacher
    PUT /teachers/{teacher_id} - Update a teacher
    DELETE /teachers/{teacher_id} - Archive a teacher
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from src.api.dependencies import Uploads, get_teacher_service
from src.domains.teacher.service import TeacherService
from src.models.common import MessageResponse
from src.models.teacher import (
    TeacherCreateRequest,
    TeacherListResponse,
    TeacherMutationResponse,
    TeacherResponse,
    TeacherUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[TeacherService, Depends(get_teacher_service)]


@router.get(
    "",
    response_model=TeacherListResponse,
    summary="List teachers",
    description="Active teachers, newest first, with search and subject filter.",
)
async def list_teachers(
    service: Service,
    search: Annotated[str | None, Query(description="Match name, email or phone")] = None,
    subject: Annotated[str | None, Query(description="Teachers of this subject")] = None,
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int, Query(description="Page size, at most 50")] = 10,
) -> TeacherListResponse:
    return await service.list_teachers(search=search, subject=subject, page=page, limit=limit)


@router.get(
    "/{teacher_id}",
    response_model=TeacherResponse,
    summary="Get teacher",
)
async def get_teacher(teacher_id: str, service: Service) -> TeacherResponse:
    return await service.get_teacher(teacher_id)


@router.post(
    "",
    response_model=TeacherMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create teacher",
)
async def create_teacher(
    service: Service,
    uploads: Uploads,
    name: Annotated[str, Form()],
    email: Annotated[str, Form()],
    phone_number: Annotated[str, Form(alias="phoneNumber")],
    subjects: Annotated[list[str] | None, Form()] = None,
    profile_image: Annotated[UploadFile | None, File(alias="profileImage")] = None,
) -> TeacherMutationResponse:
    """Create a teacher. The new teacher is always active."""
    request = TeacherCreateRequest(
        name=name,
        email=email,
        phone_number=phone_number,
        subjects=subjects,
    )
    image_path = await uploads.save(profile_image)
    return await service.create_teacher(request, profile_image=image_path)


@router.put(
    "/{teacher_id}",
    response_model=TeacherMutationResponse,
    summary="Update teacher",
    description="Only name, email, phoneNumber, subjects, status and profileImage change.",
)
async def update_teacher(
    teacher_id: str,
    service: Service,
    uploads: Uploads,
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    phone_number: Annotated[str | None, Form(alias="phoneNumber")] = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    subjects: Annotated[list[str] | None, Form()] = None,
    profile_image: Annotated[UploadFile | None, File(alias="profileImage")] = None,
) -> TeacherMutationResponse:
    request = TeacherUpdateRequest(
        name=name,
        email=email,
        phone_number=phone_number,
        status=status_,
        subjects=subjects,
    )
    image_path = await uploads.save(profile_image)
    return await service.update_teacher(teacher_id, request, profile_image=image_path)


@router.delete(
    "/{teacher_id}",
    response_model=MessageResponse,
    summary="Archive teacher",
    description="Marks the teacher inactive. Courses and classes keep their reference.",
)
async def archive_teacher(teacher_id: str, service: Service) -> MessageResponse:
    return await service.archive_teacher(teacher_id)
