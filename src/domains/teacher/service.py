# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher service for managing teacher records.

This module provides the TeacherService class for:
- Paginated listing with search and subject filter
- Fetching a single active teacher
- Creating and updating teachers (with optional profile image)
- Archiving teachers (soft delete)
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import NotFoundError
from src.domains.common import clean_search, contains_pattern, parse_id
from src.infrastructure.database.models import STATUS_ACTIVE, STATUS_INACTIVE, Teacher
from src.infrastructure.database.reader import ConcurrentReader
from src.models.common import MessageResponse
from src.models.teacher import (
    TeacherCreateRequest,
    TeacherListResponse,
    TeacherMutationResponse,
    TeacherResponse,
    TeacherUpdateRequest,
)
from src.utils.pagination import normalize_page, total_pages

logger = logging.getLogger(__name__)


class TeacherNotFoundError(NotFoundError):
    """Raised when no teacher matches the id."""

    default_message = "Teacher not found"


class TeacherService:
    """Service for managing teachers.

    Attributes:
        db: Request-scoped session used for single-record reads and writes.
        reader: Opens independent sessions for the concurrent list queries.
    """

    def __init__(self, db: AsyncSession, reader: ConcurrentReader) -> None:
        self.db = db
        self.reader = reader

    async def list_teachers(
        self,
        search: str | None = None,
        subject: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> TeacherListResponse:
        """List active teachers, newest first.

        Args:
            search: Case-insensitive match on name, email or phone number.
            subject: Only teachers teaching this subject.
            page: 1-based page number (floored at 1).
            limit: Page size (default 10, capped at 50).

        Returns:
            One page of teachers with pagination totals.
        """
        paging = normalize_page(page, limit)

        query = select(Teacher).where(Teacher.status == STATUS_ACTIVE)

        search = clean_search(search)
        if search:
            pattern = contains_pattern(search)
            query = query.where(
                or_(
                    Teacher.name.ilike(pattern),
                    Teacher.email.ilike(pattern),
                    Teacher.phone_number.ilike(pattern),
                )
            )

        subject = clean_search(subject)
        if subject:
            query = query.where(Teacher.subjects.contains([subject.lower()]))

        page_query = (
            query.order_by(Teacher.created_at.desc())
            .limit(paging.limit)
            .offset(paging.offset)
        )

        teachers, total = await asyncio.gather(
            self.reader.all(page_query),
            self.reader.count(query),
        )

        return TeacherListResponse(
            teachers=[self._to_response(t) for t in teachers],
            total=total,
            total_pages=total_pages(total, paging.limit),
            current_page=paging.page,
        )

    async def get_teacher(self, teacher_id: str) -> TeacherResponse:
        """Get an active teacher by ID.

        Raises:
            ValidationError: If the id is malformed.
            TeacherNotFoundError: If no active teacher has this id.
        """
        teacher = await self._get_active(parse_id(teacher_id, "teacher"))
        return self._to_response(teacher)

    async def create_teacher(
        self,
        request: TeacherCreateRequest,
        profile_image: str | None = None,
    ) -> TeacherMutationResponse:
        """Create a new active teacher.

        Args:
            request: Validated teacher fields.
            profile_image: Public path of an already stored image.

        Returns:
            The created teacher.
        """
        teacher = Teacher(
            name=request.name,
            email=request.email,
            phone_number=request.phone_number,
            subjects=request.subjects,
            profile_image=profile_image,
            status=STATUS_ACTIVE,
        )

        self.db.add(teacher)
        await self.db.commit()
        await self.db.refresh(teacher)

        logger.info("Created teacher: %s (%s)", teacher.email, teacher.id)

        return TeacherMutationResponse(
            message="Teacher created successfully",
            teacher=self._to_response(teacher),
        )

    async def update_teacher(
        self,
        teacher_id: str,
        request: TeacherUpdateRequest,
        profile_image: str | None = None,
    ) -> TeacherMutationResponse:
        """Update an active teacher.

        Only name, email, phone number, subjects, status and the profile
        image can change.

        Raises:
            ValidationError: If the id is malformed.
            TeacherNotFoundError: If no active teacher has this id.
        """
        teacher = await self._get_active(parse_id(teacher_id, "teacher"))

        for field in ("name", "email", "phone_number", "subjects", "status"):
            value = getattr(request, field)
            if value is not None:
                setattr(teacher, field, value)

        if profile_image:
            teacher.profile_image = profile_image

        await self.db.commit()
        await self.db.refresh(teacher)

        logger.info("Updated teacher: %s", teacher.id)

        return TeacherMutationResponse(
            message="Teacher updated successfully",
            teacher=self._to_response(teacher),
        )

    async def archive_teacher(self, teacher_id: str) -> MessageResponse:
        """Soft delete a teacher. Archiving an inactive teacher is a no-op.

        Raises:
            ValidationError: If the id is malformed.
            TeacherNotFoundError: If no teacher has this id.
        """
        teacher_id = parse_id(teacher_id, "teacher")
        result = await self.db.execute(select(Teacher).where(Teacher.id == teacher_id))
        teacher = result.scalar_one_or_none()
        if not teacher:
            raise TeacherNotFoundError()

        teacher.status = STATUS_INACTIVE
        await self.db.commit()

        logger.info("Archived teacher: %s", teacher_id)

        return MessageResponse(message="Teacher archived successfully")

    async def _get_active(self, teacher_id: str) -> Teacher:
        result = await self.db.execute(
            select(Teacher).where(
                Teacher.id == teacher_id,
                Teacher.status == STATUS_ACTIVE,
            )
        )
        teacher = result.scalar_one_or_none()
        if not teacher:
            raise TeacherNotFoundError()
        return teacher

    def _to_response(self, teacher: Teacher) -> TeacherResponse:
        return TeacherResponse(
            id=str(teacher.id),
            name=teacher.name,
            email=teacher.email,
            phone_number=teacher.phone_number,
            profile_image=teacher.profile_image,
            subjects=list(teacher.subjects or []),
            joining_date=teacher.joining_date,
            status=teacher.status,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
        )
