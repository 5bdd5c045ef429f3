# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class domain package.

This package provides class/section management: scheduled sections of a
course, each taught by one teacher.
"""

from src.domains.class_.service import ClassNotFoundError, ClassService

__all__ = [
    "ClassService",
    "ClassNotFoundError",
]
