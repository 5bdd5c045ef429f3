# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student domain package (read-only)."""

from src.domains.student.service import StudentNotFoundError, StudentService

__all__ = [
    "StudentService",
    "StudentNotFoundError",
]
