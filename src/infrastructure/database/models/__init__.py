# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy ORM models.

Importing this package registers every table on ``Base.metadata``.
"""

from src.infrastructure.database.models.admin import Admin
from src.infrastructure.database.models.base import (
    STATUS_ACTIVE,
    STATUS_INACTIVE,
    STATUSES,
    Base,
)
from src.infrastructure.database.models.class_ import WEEKDAYS, Class
from src.infrastructure.database.models.course import CLASS_LEVELS, Course
from src.infrastructure.database.models.student import Parent, Student
from src.infrastructure.database.models.teacher import Teacher

__all__ = [
    "Base",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "STATUSES",
    "Admin",
    "Teacher",
    "Course",
    "CLASS_LEVELS",
    "Class",
    "WEEKDAYS",
    "Student",
    "Parent",
]
