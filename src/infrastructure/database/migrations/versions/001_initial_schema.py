# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial LMS admin schema.

Revision ID: 001_initial
Revises: None
Create Date: 2025-01-15

Creates admins, teachers, courses, classes, parents and students.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

STATUS_CHECK = "status IN ('active', 'inactive')"


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=False),
        server_default=sa.text("gen_random_uuid()"),
        primary_key=True,
    )


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def _reference(column: str, table: str) -> sa.Column:
    return sa.Column(
        column,
        postgresql.UUID(as_uuid=False),
        sa.ForeignKey(f"{table}.id"),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    op.create_table(
        "admins",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="admin"),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_admins_status"),
    )

    op.create_table(
        "teachers",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column("phone_number", sa.String(10), unique=True, nullable=False),
        sa.Column("profile_image", sa.String(500), nullable=True),
        sa.Column(
            "subjects",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "joining_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_teachers_status"),
    )

    op.create_table(
        "courses",
        _id_column(),
        sa.Column("course_name", sa.String(255), nullable=False),
        sa.Column("class_level", sa.String(2), nullable=False),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("duration_in_weeks", sa.Integer, nullable=False),
        _reference("teacher_id", "teachers"),
        sa.Column("thumbnail", sa.String(500), nullable=True),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_courses_status"),
        sa.CheckConstraint("price >= 0", name="non_negative_course_price"),
        sa.CheckConstraint("duration_in_weeks >= 1", name="positive_course_duration"),
    )

    op.create_table(
        "classes",
        _id_column(),
        sa.Column("class_name", sa.String(255), nullable=False),
        sa.Column("class_code", sa.String(50), unique=True, nullable=False),
        _reference("course_id", "courses"),
        _reference("teacher_id", "teachers"),
        sa.Column("schedule_day", sa.String(10), nullable=False),
        sa.Column("schedule_time", sa.String(50), nullable=False),
        sa.Column("max_students", sa.Integer, nullable=False),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_classes_status"),
        sa.CheckConstraint(
            "schedule_day IN ('monday', 'tuesday', 'wednesday', 'thursday', 'friday')",
            name="valid_schedule_day",
        ),
        sa.CheckConstraint("max_students BETWEEN 1 AND 100", name="valid_max_students"),
    )

    op.create_table(
        "parents",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column("phone", sa.String(10), unique=True, nullable=False),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_parents_status"),
    )

    op.create_table(
        "students",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        _reference("class_id", "classes"),
        _reference("parent_id", "parents"),
        sa.Column(
            "enrollment_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        *_audit_columns(),
        sa.CheckConstraint(STATUS_CHECK, name="valid_students_status"),
    )

    for table in ("admins", "teachers", "courses", "classes", "parents", "students"):
        op.create_index(f"ix_{table}_status", table, ["status"])
        op.create_index(f"ix_{table}_created_at", table, ["created_at"])

    op.create_index("ix_courses_class_level", "courses", ["class_level"])
    op.create_index("ix_courses_subject", "courses", ["subject"])
    op.create_index("ix_courses_teacher_id", "courses", ["teacher_id"])
    op.create_index("ix_classes_course_id", "classes", ["course_id"])
    op.create_index("ix_classes_teacher_id", "classes", ["teacher_id"])
    op.create_index("ix_students_class_id", "students", ["class_id"])
    op.create_index("ix_students_parent_id", "students", ["parent_id"])


def downgrade() -> None:
    """Drop all tables."""
    for table in ("students", "parents", "classes", "courses", "teachers", "admins"):
        op.drop_table(table)
