# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student and parent models.

Both are read-only through the API. A parent's students are the students
whose ``parent_id`` points at it.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from src.infrastructure.database.models.class_ import Class
from src.utils.datetime import utc_now


class Parent(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A parent or guardian of one or more students."""

    __tablename__ = "parents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)

    students: Mapped[list["Student"]] = relationship(back_populates="parent", lazy="raise")

    def __repr__(self) -> str:
        return f"<Parent {self.email}>"


class Student(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A student enrolled in a class."""

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    class_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("classes.id"), nullable=False, index=True
    )
    parent_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("parents.id"), nullable=False, index=True
    )
    enrollment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)

    class_enrolled: Mapped[Class] = relationship(lazy="raise")
    parent: Mapped[Parent] = relationship(back_populates="students", lazy="raise")

    def __repr__(self) -> str:
        return f"<Student {self.email}>"
