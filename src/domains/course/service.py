# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course service for managing courses.

This module provides the CourseService class for:
- Paginated listing with search, class level and subject filters
- Course CRUD with the assigned teacher resolved
- Archiving courses (soft delete)
"""

from __future__ import annotations

import asyncio
import logging
from typing import get_args

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from src.core.exceptions import NotFoundError, ValidationError
from src.domains.common import clean_search, contains_pattern, parse_id
from src.infrastructure.database.models import STATUS_ACTIVE, STATUS_INACTIVE, Course, Teacher
from src.infrastructure.database.reader import ConcurrentReader
from src.models.common import MessageResponse, TeacherRef
from src.models.course import (
    ClassLevel,
    CourseCreateRequest,
    CourseListResponse,
    CourseMutationResponse,
    CourseResponse,
    CourseUpdateRequest,
)
from src.utils.pagination import normalize_page, total_pages

logger = logging.getLogger(__name__)

CLASS_LEVELS = frozenset(get_args(ClassLevel))


class CourseNotFoundError(NotFoundError):
    """Raised when no course matches the id."""

    default_message = "Course not found"


class CourseService:
    """Service for managing courses.

    Attributes:
        db: Request-scoped session used for single-record reads and writes.
        reader: Opens independent sessions for the concurrent list queries.
    """

    def __init__(self, db: AsyncSession, reader: ConcurrentReader) -> None:
        self.db = db
        self.reader = reader

    async def list_courses(
        self,
        search: str | None = None,
        class_level: str | None = None,
        subject: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> CourseListResponse:
        """List active courses, newest first.

        Args:
            search: Case-insensitive match on the course name.
            class_level: Exact class level, "1" to "12".
            subject: Exact subject (compared lower-cased).
            page: 1-based page number (floored at 1).
            limit: Page size (default 10, capped at 50).

        Returns:
            One page of courses with the assigned teacher resolved.

        Raises:
            ValidationError: If class_level is not a known level.
        """
        paging = normalize_page(page, limit)

        query = select(Course).where(Course.status == STATUS_ACTIVE)

        search = clean_search(search)
        if search:
            query = query.where(Course.course_name.ilike(contains_pattern(search)))

        class_level = clean_search(class_level)
        if class_level:
            if class_level not in CLASS_LEVELS:
                raise ValidationError("Invalid class level")
            query = query.where(Course.class_level == class_level)

        subject = clean_search(subject)
        if subject:
            query = query.where(Course.subject == subject.lower())

        page_query = (
            query.options(joinedload(Course.teacher))
            .order_by(Course.created_at.desc())
            .limit(paging.limit)
            .offset(paging.offset)
        )

        courses, total = await asyncio.gather(
            self.reader.all(page_query),
            self.reader.count(query),
        )

        return CourseListResponse(
            courses=[self._to_response(c, c.teacher) for c in courses],
            total=total,
            total_pages=total_pages(total, paging.limit),
            current_page=paging.page,
        )

    async def get_course(self, course_id: str) -> CourseResponse:
        """Get an active course by ID.

        Raises:
            ValidationError: If the id is malformed.
            CourseNotFoundError: If no active course has this id.
        """
        course = await self._get_active(parse_id(course_id, "course"))
        return self._to_response(course, course.teacher)

    async def create_course(
        self,
        request: CourseCreateRequest,
        thumbnail: str | None = None,
    ) -> CourseMutationResponse:
        """Create a course taught by an active teacher.

        Args:
            request: Validated course fields.
            thumbnail: Public path of an already stored image.

        Returns:
            The created course with its teacher resolved.

        Raises:
            ValidationError: If the teacher id is malformed, or the teacher
                does not exist or is inactive. Nothing is stored.
        """
        teacher = await self._get_active_teacher(request.teacher_assigned)

        course = Course(
            course_name=request.course_name,
            class_level=request.class_level,
            subject=request.subject,
            description=request.description,
            price=request.price,
            duration_in_weeks=request.duration_in_weeks,
            teacher_id=teacher.id,
            thumbnail=thumbnail,
            status=STATUS_ACTIVE,
        )

        self.db.add(course)
        await self.db.commit()
        await self.db.refresh(course)

        logger.info("Created course: %s (%s)", course.course_name, course.id)

        return CourseMutationResponse(
            message="Course created successfully",
            course=self._to_response(course, teacher),
        )

    async def update_course(
        self,
        course_id: str,
        request: CourseUpdateRequest,
        thumbnail: str | None = None,
    ) -> CourseMutationResponse:
        """Update an active course.

        Only the name, description, price, duration, status and thumbnail
        can change; the class level, subject and teacher stay as created.

        Raises:
            ValidationError: If the id is malformed.
            CourseNotFoundError: If no active course has this id.
        """
        course = await self._get_active(parse_id(course_id, "course"))

        for field in ("course_name", "description", "price", "duration_in_weeks", "status"):
            value = getattr(request, field)
            if value is not None:
                setattr(course, field, value)

        if thumbnail:
            course.thumbnail = thumbnail

        await self.db.commit()

        logger.info("Updated course: %s", course.id)

        return CourseMutationResponse(
            message="Course updated successfully",
            course=self._to_response(course, course.teacher),
        )

    async def archive_course(self, course_id: str) -> MessageResponse:
        """Soft delete a course. Classes linked to it are left untouched.

        Raises:
            ValidationError: If the id is malformed.
            CourseNotFoundError: If no course has this id.
        """
        course_id = parse_id(course_id, "course")
        result = await self.db.execute(select(Course).where(Course.id == course_id))
        course = result.scalar_one_or_none()
        if not course:
            raise CourseNotFoundError()

        course.status = STATUS_INACTIVE
        await self.db.commit()

        logger.info("Archived course: %s", course_id)

        return MessageResponse(message="Course archived successfully")

    async def _get_active(self, course_id: str) -> Course:
        result = await self.db.execute(
            select(Course)
            .options(joinedload(Course.teacher))
            .where(Course.id == course_id, Course.status == STATUS_ACTIVE)
        )
        course = result.scalar_one_or_none()
        if not course:
            raise CourseNotFoundError()
        return course

    async def _get_active_teacher(self, teacher_id: str) -> Teacher:
        teacher_id = parse_id(teacher_id, "teacher")
        result = await self.db.execute(
            select(Teacher).where(
                Teacher.id == teacher_id,
                Teacher.status == STATUS_ACTIVE,
            )
        )
        teacher = result.scalar_one_or_none()
        if not teacher:
            raise ValidationError("Teacher not found or inactive")
        return teacher

    def _to_response(self, course: Course, teacher: Teacher | None) -> CourseResponse:
        return CourseResponse(
            id=str(course.id),
            course_name=course.course_name,
            class_level=course.class_level,
            subject=course.subject,
            description=course.description,
            price=float(course.price or 0),
            duration_in_weeks=course.duration_in_weeks,
            teacher_assigned=TeacherRef.model_validate(teacher) if teacher else None,
            thumbnail=course.thumbnail,
            status=course.status,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )
