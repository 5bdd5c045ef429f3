# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher domain package: teacher records and their lifecycle."""

from src.domains.teacher.service import TeacherNotFoundError, TeacherService

__all__ = [
    "TeacherService",
    "TeacherNotFoundError",
]
