# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service: read-only access to enrolled students."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from src.core.exceptions import NotFoundError
from src.domains.common import clean_search, contains_pattern, parse_id
from src.infrastructure.database.models import STATUS_ACTIVE, Student
from src.infrastructure.database.reader import ConcurrentReader
from src.models.common import ClassRef
from src.models.student import ParentRef, StudentListResponse, StudentResponse
from src.utils.pagination import normalize_page, total_pages

logger = logging.getLogger(__name__)


class StudentNotFoundError(NotFoundError):
    """Raised when no active student matches the id."""

    default_message = "Student not found"


class StudentService:
    """Lists and fetches students with their class and parent resolved."""

    def __init__(self, db: AsyncSession, reader: ConcurrentReader) -> None:
        self.db = db
        self.reader = reader

    async def list_students(
        self,
        search: str | None = None,
        class_id: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> StudentListResponse:
        """List active students, newest first.

        Args:
            search: Case-insensitive match on name or email.
            class_id: Only students enrolled in this class.
            page: 1-based page number (floored at 1).
            limit: Page size (default 10, capped at 50).

        Raises:
            ValidationError: If class_id is malformed.
        """
        paging = normalize_page(page, limit)

        query = select(Student).where(Student.status == STATUS_ACTIVE)

        search = clean_search(search)
        if search:
            pattern = contains_pattern(search)
            query = query.where(or_(Student.name.ilike(pattern), Student.email.ilike(pattern)))

        if class_id:
            query = query.where(Student.class_id == parse_id(class_id, "class"))

        page_query = (
            query.options(joinedload(Student.class_enrolled), joinedload(Student.parent))
            .order_by(Student.created_at.desc())
            .limit(paging.limit)
            .offset(paging.offset)
        )

        students, total = await asyncio.gather(
            self.reader.all(page_query),
            self.reader.count(query),
        )

        return StudentListResponse(
            students=[self._to_response(s) for s in students],
            total=total,
            total_pages=total_pages(total, paging.limit),
            current_page=paging.page,
        )

    async def get_student(self, student_id: str) -> StudentResponse:
        """Get an active student by ID.

        Raises:
            ValidationError: If the id is malformed.
            StudentNotFoundError: If no active student has this id.
        """
        student_id = parse_id(student_id, "student")
        result = await self.db.execute(
            select(Student)
            .options(joinedload(Student.class_enrolled), joinedload(Student.parent))
            .where(Student.id == student_id, Student.status == STATUS_ACTIVE)
        )
        student = result.scalar_one_or_none()
        if not student:
            raise StudentNotFoundError()
        return self._to_response(student)

    def _to_response(self, student: Student) -> StudentResponse:
        return StudentResponse(
            id=str(student.id),
            name=student.name,
            email=student.email,
            class_enrolled=ClassRef.model_validate(student.class_enrolled)
            if student.class_enrolled
            else None,
            parent=ParentRef.model_validate(student.parent) if student.parent else None,
            created_at=student.created_at,
        )
