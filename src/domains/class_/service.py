# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class service for managing class/section operations.

This module provides the ClassService class for:
- Paginated listing filtered by course and teacher
- Class CRUD with course and teacher resolved
- Archiving classes (soft delete)
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from src.core.exceptions import NotFoundError, ValidationError
from src.domains.common import parse_id
from src.infrastructure.database.models import (
    STATUS_ACTIVE,
    STATUS_INACTIVE,
    Class,
    Course,
    Teacher,
)
from src.infrastructure.database.reader import ConcurrentReader
from src.models.class_ import (
    ClassCreateRequest,
    ClassListResponse,
    ClassMutationResponse,
    ClassResponse,
    ClassUpdateRequest,
    Schedule,
)
from src.models.common import CourseRef, MessageResponse, TeacherRef
from src.utils.pagination import normalize_page, total_pages

logger = logging.getLogger(__name__)


class ClassNotFoundError(NotFoundError):
    """Raised when no class matches the id."""

    default_message = "Class not found"


class ClassService:
    """Service for managing classes.

    Attributes:
        db: Request-scoped session used for single-record reads and writes.
        reader: Opens independent sessions for the concurrent list queries.
    """

    def __init__(self, db: AsyncSession, reader: ConcurrentReader) -> None:
        """Initialize class service.

        Args:
            db: Async database session.
            reader: Concurrent read helper.
        """
        self.db = db
        self.reader = reader

    async def list_classes(
        self,
        course_id: str | None = None,
        teacher_id: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ClassListResponse:
        """List active classes, newest first.

        Args:
            course_id: Only classes linked to this course.
            teacher_id: Only classes taught by this teacher.
            page: 1-based page number (floored at 1).
            limit: Page size (default 10, capped at 50).

        Returns:
            One page of classes with course and teacher resolved.

        Raises:
            ValidationError: If a filter id is malformed.
        """
        paging = normalize_page(page, limit)

        query = select(Class).where(Class.status == STATUS_ACTIVE)

        if course_id:
            query = query.where(Class.course_id == parse_id(course_id, "course"))

        if teacher_id:
            query = query.where(Class.teacher_id == parse_id(teacher_id, "teacher"))

        page_query = (
            query.options(joinedload(Class.course), joinedload(Class.teacher))
            .order_by(Class.created_at.desc())
            .limit(paging.limit)
            .offset(paging.offset)
        )

        classes, total = await asyncio.gather(
            self.reader.all(page_query),
            self.reader.count(query),
        )

        return ClassListResponse(
            classes=[self._to_response(c, c.course, c.teacher) for c in classes],
            total=total,
            total_pages=total_pages(total, paging.limit),
            current_page=paging.page,
        )

    async def get_class(self, class_id: str) -> ClassResponse:
        """Get an active class by ID.

        Raises:
            ValidationError: If the id is malformed.
            ClassNotFoundError: If no active class has this id.
        """
        class_ = await self._get_active(parse_id(class_id, "class"))
        return self._to_response(class_, class_.course, class_.teacher)

    async def create_class(self, request: ClassCreateRequest) -> ClassMutationResponse:
        """Create a new class.

        The linked course and the assigned teacher must both exist and be
        active at the time of the write.

        Args:
            request: Validated class fields.

        Returns:
            The created class with course and teacher resolved.

        Raises:
            ValidationError: If a referenced id is malformed, or the course
                or teacher is missing or inactive. Nothing is stored.
        """
        course = await self._get_active_course(request.course_linked)
        teacher = await self._get_active_teacher(request.teacher_assigned)

        class_ = Class(
            class_name=request.class_name,
            class_code=request.class_code,
            course_id=course.id,
            teacher_id=teacher.id,
            schedule_day=request.schedule.day,
            schedule_time=request.schedule.time,
            max_students=request.max_students,
            status=STATUS_ACTIVE,
        )

        self.db.add(class_)
        await self.db.commit()
        await self.db.refresh(class_)

        logger.info("Created class: %s (%s)", class_.class_code, class_.id)

        return ClassMutationResponse(
            message="Class created successfully",
            class_=self._to_response(class_, course, teacher),
        )

    async def update_class(
        self,
        class_id: str,
        request: ClassUpdateRequest,
    ) -> ClassMutationResponse:
        """Update an active class.

        Only the name, schedule, capacity and teacher can change. A new
        teacher must be active.

        Raises:
            ValidationError: If an id is malformed or the new teacher is
                missing or inactive.
            ClassNotFoundError: If no active class has this id.
        """
        class_ = await self._get_active(parse_id(class_id, "class"))

        if request.teacher_assigned is not None:
            class_.teacher = await self._get_active_teacher(request.teacher_assigned)

        if request.class_name is not None:
            class_.class_name = request.class_name

        if request.schedule is not None:
            class_.schedule_day = request.schedule.day
            class_.schedule_time = request.schedule.time

        if request.max_students is not None:
            class_.max_students = request.max_students

        await self.db.commit()

        logger.info("Updated class: %s", class_.id)

        return ClassMutationResponse(
            message="Class updated successfully",
            class_=self._to_response(class_, class_.course, class_.teacher),
        )

    async def archive_class(self, class_id: str) -> MessageResponse:
        """Soft delete a class. Enrolled students are left untouched.

        Raises:
            ValidationError: If the id is malformed.
            ClassNotFoundError: If no class has this id.
        """
        class_id = parse_id(class_id, "class")
        result = await self.db.execute(select(Class).where(Class.id == class_id))
        class_ = result.scalar_one_or_none()
        if not class_:
            raise ClassNotFoundError()

        class_.status = STATUS_INACTIVE
        await self.db.commit()

        logger.info("Archived class: %s", class_id)

        return MessageResponse(message="Class archived successfully")

    async def _get_active(self, class_id: str) -> Class:
        result = await self.db.execute(
            select(Class)
            .options(joinedload(Class.course), joinedload(Class.teacher))
            .where(Class.id == class_id, Class.status == STATUS_ACTIVE)
        )
        class_ = result.scalar_one_or_none()
        if not class_:
            raise ClassNotFoundError()
        return class_

    async def _get_active_course(self, course_id: str) -> Course:
        course_id = parse_id(course_id, "course")
        result = await self.db.execute(
            select(Course).where(Course.id == course_id, Course.status == STATUS_ACTIVE)
        )
        course = result.scalar_one_or_none()
        if not course:
            raise ValidationError("Course not found or inactive")
        return course

    async def _get_active_teacher(self, teacher_id: str) -> Teacher:
        teacher_id = parse_id(teacher_id, "teacher")
        result = await self.db.execute(
            select(Teacher).where(Teacher.id == teacher_id, Teacher.status == STATUS_ACTIVE)
        )
        teacher = result.scalar_one_or_none()
        if not teacher:
            raise ValidationError("Teacher not found or inactive")
        return teacher

    def _to_response(
        self,
        class_: Class,
        course: Course | None,
        teacher: Teacher | None,
    ) -> ClassResponse:
        return ClassResponse(
            id=str(class_.id),
            class_name=class_.class_name,
            class_code=class_.class_code,
            course_linked=CourseRef.model_validate(course) if course else None,
            teacher_assigned=TeacherRef.model_validate(teacher) if teacher else None,
            schedule=Schedule(day=class_.schedule_day, time=class_.schedule_time),
            max_students=class_.max_students,
            status=class_.status,
            created_at=class_.created_at,
            updated_at=class_.updated_at,
        )
