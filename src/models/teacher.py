# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher request and response schemas."""

import json
from datetime import datetime
from typing import Annotated, Literal

from pydantic import EmailStr, Field, StringConstraints, field_validator

from src.models.common import CamelModel, PageMeta

PHONE_PATTERN = r"^\d{10}$"
SUBJECT_MAX_LENGTH = 100

Subject = Annotated[str, StringConstraints(max_length=SUBJECT_MAX_LENGTH)]


def normalize_subjects(value: object) -> list[str]:
    """Accept a list, a JSON array string or a single subject.

    Returns lower-cased, trimmed, non-empty subjects.
    """
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                value = json.loads(text)
            except json.JSONDecodeError:
                raise ValueError("subjects must be a list or a JSON array")
        else:
            value = [text]
    if not isinstance(value, list):
        raise ValueError("subjects must be a list or a JSON array")

    subjects: list[str] = []
    for item in value:
        if isinstance(item, str) and item.startswith("["):
            subjects.extend(normalize_subjects(item))
        elif str(item).strip():
            subjects.append(str(item).strip().lower())
    return subjects


class TeacherCreateRequest(CamelModel):
    """Fields accepted when creating a teacher."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone_number: str = Field(pattern=PHONE_PATTERN)
    subjects: list[Subject] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("subjects", mode="before")
    @classmethod
    def parse_subjects(cls, v: object) -> list[str]:
        return normalize_subjects(v)


class TeacherUpdateRequest(CamelModel):
    """Fields an update may change. Anything else is ignored."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    status: Literal["active", "inactive"] | None = None
    subjects: list[Subject] | None = None

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, v: str | None) -> str | None:
        return v.lower() if v else v

    @field_validator("subjects", mode="before")
    @classmethod
    def parse_subjects(cls, v: object) -> list[str] | None:
        if v is None:
            return None
        return normalize_subjects(v)


class TeacherResponse(CamelModel):
    """Teacher details."""

    id: str
    name: str
    email: str
    phone_number: str
    profile_image: str | None = None
    subjects: list[str]
    joining_date: datetime | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TeacherListResponse(PageMeta):
    """One page of teachers."""

    teachers: list[TeacherResponse]


class TeacherMutationResponse(CamelModel):
    """Result of a create or update."""

    message: str
    teacher: TeacherResponse
