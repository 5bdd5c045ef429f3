# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin account model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)


class Admin(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """Administrator that signs in to the panel.

    The email is stored trimmed and lower-cased. The password hash never
    leaves the service layer.
    """

    __tablename__ = "admins"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="admin")

    def __repr__(self) -> str:
        return f"<Admin {self.email}>"
