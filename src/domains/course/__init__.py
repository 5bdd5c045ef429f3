# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain package: courses and their assigned teachers."""

from src.domains.course.service import CourseNotFoundError, CourseService

__all__ = [
    "CourseService",
    "CourseNotFoundError",
]
