# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared schema building blocks."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads snake_case and writes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement, also the shape of every error body."""

    message: str


class PageMeta(CamelModel):
    """Pagination fields appended to every list response."""

    total: int = Field(description="Number of matching records")
    total_pages: int = Field(description="ceil(total / limit)")
    current_page: int = Field(description="Page returned, 1-based")


class TeacherRef(CamelModel):
    """A teacher as embedded in other resources."""

    id: str
    name: str
    email: str


class CourseRef(CamelModel):
    """A course as embedded in a class."""

    id: str
    course_name: str
    class_level: str


class ClassRef(CamelModel):
    """A class as embedded in a student."""

    id: str
    class_name: str
    class_code: str
