# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin authentication schemas.

Fields are optional at the schema level so the service can answer a
missing field with the same message the panel expects.
"""

from pydantic import Field

from src.models.common import CamelModel


class RegisterRequest(CamelModel):
    """Admin registration payload."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """Admin login payload."""

    email: str | None = None
    password: str | None = None


class AdminProfile(CamelModel):
    """Public view of an admin account."""

    id: str
    name: str
    email: str
    role: str


class LoginResponse(CamelModel):
    """Successful login."""

    token: str = Field(description="Bearer token for the Authorization header")
    admin: AdminProfile
