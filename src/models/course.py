# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course request and response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from src.models.common import CamelModel, PageMeta, TeacherRef

ClassLevel = Literal["1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12"]


class CourseCreateRequest(CamelModel):
    """Fields accepted when creating a course."""

    course_name: str = Field(min_length=1, max_length=255)
    class_level: ClassLevel
    subject: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    price: float = Field(default=0, ge=0)
    duration_in_weeks: int = Field(ge=1)
    teacher_assigned: str

    @field_validator("class_level", mode="before")
    @classmethod
    def level_as_text(cls, v: object) -> object:
        if isinstance(v, int):
            return str(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("subject", mode="before")
    @classmethod
    def lower_subject(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v


class CourseUpdateRequest(CamelModel):
    """Fields an update may change. Anything else is ignored."""

    course_name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    duration_in_weeks: int | None = Field(default=None, ge=1)
    status: Literal["active", "inactive"] | None = None


class CourseResponse(CamelModel):
    """Course details with the assigned teacher resolved."""

    id: str
    course_name: str
    class_level: str
    subject: str
    description: str
    price: float
    duration_in_weeks: int
    teacher_assigned: TeacherRef | None = None
    thumbnail: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseListResponse(PageMeta):
    """One page of courses."""

    courses: list[CourseResponse]


class CourseMutationResponse(CamelModel):
    """Result of a create or update."""

    message: str
    course: CourseResponse
