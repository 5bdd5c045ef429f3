# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class request and response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from src.models.common import CamelModel, CourseRef, PageMeta, TeacherRef

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday"]


class Schedule(CamelModel):
    """Weekly slot of a class."""

    day: Weekday
    time: str = Field(min_length=1, max_length=50)

    @field_validator("day", mode="before")
    @classmethod
    def lower_day(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v


class ClassCreateRequest(CamelModel):
    """Fields accepted when creating a class."""

    class_name: str = Field(min_length=1, max_length=255)
    class_code: str = Field(min_length=1, max_length=50)
    course_linked: str
    teacher_assigned: str
    schedule: Schedule
    max_students: int = Field(ge=1, le=100)

    @field_validator("class_code", mode="after")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.strip().upper()


class ClassUpdateRequest(CamelModel):
    """Fields an update may change. Anything else is ignored."""

    class_name: str | None = Field(default=None, min_length=1, max_length=255)
    schedule: Schedule | None = None
    max_students: int | None = Field(default=None, ge=1, le=100)
    teacher_assigned: str | None = None


class ClassResponse(CamelModel):
    """Class details with course and teacher resolved."""

    id: str
    class_name: str
    class_code: str
    course_linked: CourseRef | None = None
    teacher_assigned: TeacherRef | None = None
    schedule: Schedule
    max_students: int
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ClassListResponse(PageMeta):
    """One page of classes."""

    classes: list[ClassResponse]


class ClassMutationResponse(CamelModel):
    """Result of a create or update."""

    message: str
    class_: ClassResponse = Field(alias="class")
