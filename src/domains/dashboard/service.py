# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard aggregates.

Every query runs on its own session and all of them run concurrently;
if any one fails the whole request fails.
"""

import asyncio
import logging

from sqlalchemy import select

from src.core.exceptions import ValidationError
from src.infrastructure.database.models import STATUS_ACTIVE, Class, Course, Parent, Student, Teacher
from src.infrastructure.database.reader import ConcurrentReader
from src.models.dashboard import (
    ActivityResponse,
    DashboardCounts,
    DashboardStatsResponse,
    RecentActivity,
    RecentClass,
    RecentCourse,
    RecentTeacher,
)

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5
DEFAULT_ACTIVITY_LIMIT = 10
MAX_ACTIVITY_LIMIT = 50

_ACTIVITY_SOURCES = {
    "teachers": (Teacher, RecentTeacher),
    "courses": (Course, RecentCourse),
    "classes": (Class, RecentClass),
}


def _active(model):
    return select(model).where(model.status == STATUS_ACTIVE)


def _newest(model, limit: int):
    return _active(model).order_by(model.created_at.desc()).limit(limit)


class DashboardService:
    """Computes the dashboard counts and recent activity feeds."""

    def __init__(self, reader: ConcurrentReader) -> None:
        self.reader = reader

    async def get_stats(self) -> DashboardStatsResponse:
        """Counts of each resource plus the five newest active records.

        Teachers, courses and classes are counted when active; students and
        parents are counted regardless of status.

        Returns:
            Stats and recent activity.
        """
        (
            teachers,
            courses,
            classes,
            students,
            parents,
            recent_teachers,
            recent_courses,
            recent_classes,
        ) = await asyncio.gather(
            self.reader.count(_active(Teacher)),
            self.reader.count(_active(Course)),
            self.reader.count(_active(Class)),
            self.reader.count(select(Student)),
            self.reader.count(select(Parent)),
            self.reader.all(_newest(Teacher, RECENT_LIMIT)),
            self.reader.all(_newest(Course, RECENT_LIMIT)),
            self.reader.all(_newest(Class, RECENT_LIMIT)),
        )

        return DashboardStatsResponse(
            stats=DashboardCounts(
                teachers=teachers,
                courses=courses,
                classes=classes,
                students=students,
                parents=parents,
            ),
            recent_activity=RecentActivity(
                teachers=[RecentTeacher.model_validate(t) for t in recent_teachers],
                courses=[RecentCourse.model_validate(c) for c in recent_courses],
                classes=[RecentClass.model_validate(c) for c in recent_classes],
            ),
        )

    async def get_activity(self, activity_type: str, limit: int | None = None) -> ActivityResponse:
        """Newest active records of one type.

        Args:
            activity_type: One of teachers, courses or classes.
            limit: Maximum records (default 10, capped at 50).

        Returns:
            The records with their count.

        Raises:
            ValidationError: If activity_type is not supported.
        """
        source = _ACTIVITY_SOURCES.get(activity_type)
        if source is None:
            raise ValidationError("Invalid activity type")

        model, schema = source
        limit = min(max(1, limit or DEFAULT_ACTIVITY_LIMIT), MAX_ACTIVITY_LIMIT)

        rows = await self.reader.all(_newest(model, limit))
        data = [schema.model_validate(row) for row in rows]

        return ActivityResponse(type=activity_type, count=len(data), data=data)
