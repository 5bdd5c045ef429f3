# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication domain services.

Exports:
    PasswordHasher: Password hashing using bcrypt.
    JWTManager: Session token creation and validation.
    AuthService: Admin registration and login.
"""

from src.domains.auth.jwt import JWTManager
from src.domains.auth.password import PasswordHasher
from src.domains.auth.service import AuthService

__all__ = [
    "PasswordHasher",
    "JWTManager",
    "AuthService",
]
