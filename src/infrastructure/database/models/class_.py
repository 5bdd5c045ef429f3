# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class model: a scheduled section of a course."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)
from src.infrastructure.database.models.course import Course
from src.infrastructure.database.models.teacher import Teacher

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")


class Class(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A class linked to a course and taught by a teacher.

    The class code is unique and stored upper-cased. The schedule is a
    weekday plus a free-text time.
    """

    __tablename__ = "classes"
    __table_args__ = (
        CheckConstraint("status IN ('active', 'inactive')", name="valid_classes_status"),
        CheckConstraint(
            "schedule_day IN ('monday', 'tuesday', 'wednesday', 'thursday', 'friday')",
            name="valid_schedule_day",
        ),
        CheckConstraint("max_students BETWEEN 1 AND 100", name="valid_max_students"),
    )

    class_name: Mapped[str] = mapped_column(String(255), nullable=False)
    class_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    course_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("courses.id"), nullable=False, index=True
    )
    teacher_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("teachers.id"), nullable=False, index=True
    )
    schedule_day: Mapped[str] = mapped_column(String(10), nullable=False)
    schedule_time: Mapped[str] = mapped_column(String(50), nullable=False)
    max_students: Mapped[int] = mapped_column(Integer, nullable=False)

    course: Mapped[Course] = relationship(lazy="raise")
    teacher: Mapped[Teacher] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<Class {self.class_code}>"
