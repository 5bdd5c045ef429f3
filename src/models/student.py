# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student and parent response schemas (read-only resources)."""

from datetime import datetime

from src.models.common import CamelModel, ClassRef, PageMeta


class ParentRef(CamelModel):
    """A parent as embedded in a student."""

    id: str
    name: str
    email: str
    phone: str


class StudentResponse(CamelModel):
    """Student with class and parent resolved."""

    id: str
    name: str
    email: str
    class_enrolled: ClassRef | None = None
    parent: ParentRef | None = None
    created_at: datetime | None = None


class StudentListResponse(PageMeta):
    """One page of students."""

    students: list[StudentResponse]


class ChildSummary(CamelModel):
    """An active student as listed under a parent."""

    id: str
    name: str
    email: str
    class_enrolled: ClassRef | None = None


class ParentResponse(CamelModel):
    """Parent with active students resolved."""

    id: str
    name: str
    email: str
    phone: str
    students: list[ChildSummary]
    created_at: datetime | None = None


class ParentListResponse(PageMeta):
    """One page of parents."""

    parents: list[ParentResponse]
