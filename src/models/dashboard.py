# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard response schemas."""

from datetime import datetime
from typing import Literal

from src.models.common import CamelModel

ActivityType = Literal["teachers", "courses", "classes"]


class DashboardCounts(CamelModel):
    """Headline counts.

    Teachers, courses and classes count active records only; students and
    parents count every record.
    """

    teachers: int
    courses: int
    classes: int
    students: int
    parents: int


class RecentTeacher(CamelModel):
    id: str
    name: str
    email: str
    created_at: datetime | None = None


class RecentCourse(CamelModel):
    id: str
    course_name: str
    class_level: str
    created_at: datetime | None = None


class RecentClass(CamelModel):
    id: str
    class_name: str
    class_code: str
    created_at: datetime | None = None


class RecentActivity(CamelModel):
    teachers: list[RecentTeacher]
    courses: list[RecentCourse]
    classes: list[RecentClass]


class DashboardStatsResponse(CamelModel):
    """Counts plus the five newest teachers, courses and classes."""

    stats: DashboardCounts
    recent_activity: RecentActivity


class ActivityResponse(CamelModel):
    """Newest records of one type."""

    type: ActivityType
    count: int
    data: list[RecentTeacher] | list[RecentCourse] | list[RecentClass]
