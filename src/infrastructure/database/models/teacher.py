# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher model."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from src.utils.datetime import utc_now


class Teacher(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A teacher who can be assigned to courses and classes.

    Subjects are stored lower-cased.
    """

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    subjects: Mapped[list[str]] = mapped_column(ARRAY(String(100)), nullable=False, default=list)
    joining_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<Teacher {self.email}>"
