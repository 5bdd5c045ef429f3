# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Declarative base and shared column mixins.

Identifiers are UUID strings and timestamps are timezone-aware UTC. Both
are generated in Python so a freshly added object is complete without a
refresh round trip.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import CheckConstraint, DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column

from src.utils.datetime import utc_now

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)


def new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class UUIDPrimaryKeyMixin:
    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True, default=new_id)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )


class SoftDeleteMixin:
    """Adds the active/inactive status column used for archiving."""

    status: Mapped[str] = mapped_column(String(20), nullable=False, default=STATUS_ACTIVE, index=True)

    @declared_attr.directive
    def __table_args__(cls) -> tuple:
        return (
            CheckConstraint(
                "status IN ('active', 'inactive')",
                name=f"valid_{cls.__tablename__}_status",
            ),
        )

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE
