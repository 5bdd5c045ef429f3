# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course model."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from src.infrastructure.database.models.teacher import Teacher

CLASS_LEVELS = tuple(str(level) for level in range(1, 13))


class Course(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A course taught by one teacher at one class level."""

    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("status IN ('active', 'inactive')", name="valid_courses_status"),
        CheckConstraint("price >= 0", name="non_negative_course_price"),
        CheckConstraint("duration_in_weeks >= 1", name="positive_course_duration"),
    )

    course_name: Mapped[str] = mapped_column(String(255), nullable=False)
    class_level: Mapped[str] = mapped_column(String(2), nullable=False, index=True)
    subject: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    duration_in_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    teacher_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("teachers.id"), nullable=False, index=True
    )
    thumbnail: Mapped[str | None] = mapped_column(String(500), nullable=True)

    teacher: Mapped[Teacher] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<Course {self.course_name}>"
