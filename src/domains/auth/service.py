# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin authentication service.

Registration stores a bcrypt hash of the password; login returns a signed
session token. Unknown email and wrong password produce the same error.

Example:
    >>> auth_service = AuthService(db, jwt_manager, password_hasher)
    >>> result = await auth_service.login("admin@example.com", "password")
"""

import asyncio

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.domains.auth.jwt import JWTManager
from src.domains.auth.password import MAX_PASSWORD_BYTES, PasswordHasher
from src.domains.auth.roles import ROLE_ADMIN
from src.domains.common import parse_id
from src.infrastructure.database.models import STATUS_ACTIVE, Admin
from src.models.auth import AdminProfile, LoginResponse
from src.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8


class InvalidCredentialsError(AuthError):
    """Raised for an unknown email or a wrong password."""

    default_message = "Invalid credentials"


class AdminExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    default_message = "Admin already exists"


class AccountInactiveError(ForbiddenError):
    """Raised when an archived admin tries to log in."""

    default_message = "Admin account inactive"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Registration and login for panel administrators.

    Attributes:
        _db: Database session.
        _jwt_manager: Session token manager.
        _password_hasher: bcrypt hasher.
    """

    def __init__(
        self,
        db: AsyncSession,
        jwt_manager: JWTManager,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self._db = db
        self._jwt_manager = jwt_manager
        self._password_hasher = password_hasher or PasswordHasher()

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> AdminProfile:
        """Create a new admin account.

        Args:
            name: Display name.
            email: Login email; stored trimmed and lower-cased.
            password: Plain text password, at least 8 characters.

        Returns:
            Profile of the created admin.

        Raises:
            ValidationError: If a field is missing or invalid.
            AdminExistsError: If the email is already registered.
        """
        if not (name and name.strip()) or not (email and email.strip()) or not password:
            raise ValidationError("All fields required")

        email = normalize_email(email)
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            raise ValidationError("Invalid email address")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        result = await self._db.execute(select(Admin).where(Admin.email == email))
        if result.scalar_one_or_none():
            raise AdminExistsError()

        password_hash = await asyncio.to_thread(self._password_hasher.hash, password)

        admin = Admin(
            name=name.strip(),
            email=email,
            password_hash=password_hash,
            role=ROLE_ADMIN,
            status=STATUS_ACTIVE,
        )
        self._db.add(admin)
        await self._db.commit()
        await self._db.refresh(admin)

        logger.info("Registered admin", admin_id=admin.id)

        return AdminProfile.model_validate(admin)

    async def login(self, email: str | None, password: str | None) -> LoginResponse:
        """Authenticate an admin and issue a session token.

        The account status is checked before the password, so an archived
        account is refused with 403 whatever password is sent.

        Args:
            email: Login email (case-insensitive).
            password: Plain text password.

        Returns:
            Token and public profile.

        Raises:
            ConfigError: If no signing secret is configured.
            ValidationError: If email or password is missing.
            InvalidCredentialsError: If the email is unknown or the password wrong.
            AccountInactiveError: If the account has been archived.
        """
        self._jwt_manager.ensure_configured()

        if not (email and email.strip()) or not password:
            raise ValidationError("Email and password are required")

        email = normalize_email(email)
        result = await self._db.execute(select(Admin).where(Admin.email == email))
        admin = result.scalar_one_or_none()

        if not admin:
            await asyncio.to_thread(self._password_hasher.burn, password)
            logger.warning("Admin login failed", reason="unknown_email")
            raise InvalidCredentialsError()

        if admin.status != STATUS_ACTIVE:
            logger.warning("Admin login failed", reason="inactive", admin_id=admin.id)
            raise AccountInactiveError()

        verified = await asyncio.to_thread(self._password_hasher.verify, password, admin.password_hash)
        if not verified:
            logger.warning("Admin login failed", reason="wrong_password", admin_id=admin.id)
            raise InvalidCredentialsError()

        token = self._jwt_manager.create_access_token(admin_id=admin.id, role=admin.role)

        logger.info("Admin logged in", admin_id=admin.id)

        return LoginResponse(token=token, admin=AdminProfile.model_validate(admin))

    async def get_profile(self, admin_id: str) -> AdminProfile:
        """Profile of the signed-in admin.

        Raises:
            ValidationError: If the id is malformed.
            NotFoundError: If the admin no longer exists or is inactive.
        """
        admin_id = parse_id(admin_id, "admin")
        result = await self._db.execute(
            select(Admin).where(Admin.id == admin_id, Admin.status == STATUS_ACTIVE)
        )
        admin = result.scalar_one_or_none()
        if not admin:
            raise NotFoundError("Admin not found")
        return AdminProfile.model_validate(admin)
