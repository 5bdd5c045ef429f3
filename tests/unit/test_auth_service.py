# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the admin authentication service."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from pydantic import SecretStr

from src.core.exceptions import ConfigError, NotFoundError, ValidationError
from src.domains.auth.jwt import JWTManager
from src.domains.auth.password import PasswordHasher
from src.domains.auth.service import (
    AccountInactiveError,
    AdminExistsError,
    AuthService,
    InvalidCredentialsError,
)
from src.infrastructure.database.models import STATUS_INACTIVE, Admin


@pytest.fixture
def jwt_manager() -> JWTManager:
    """JWT manager with a test secret."""
    settings = MagicMock()
    settings.secret_key = SecretStr("auth-service-secret")
    settings.algorithm = "HS256"
    settings.access_token_expire_minutes = 60
    return JWTManager(settings)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def auth_service(refreshing_db, jwt_manager: JWTManager, hasher: PasswordHasher) -> AuthService:
    """Auth service over a mocked session."""
    return AuthService(refreshing_db, jwt_manager, hasher)


class TestRegister:
    """Tests for admin registration."""

    @pytest.mark.asyncio
    async def test_register_success(self, auth_service, refreshing_db, scalar_result, hasher) -> None:
        """Test that a new admin is stored with a hashed password."""
        refreshing_db.execute.return_value = scalar_result(None)

        profile = await auth_service.register("Ada", "  Ada@Example.com ", "supersecret")

        stored = refreshing_db.add.call_args.args[0]
        assert isinstance(stored, Admin)
        assert stored.email == "ada@example.com"
        assert stored.role == "admin"
        assert stored.password_hash != "supersecret"
        assert hasher.verify("supersecret", stored.password_hash)
        assert profile.email == "ada@example.com"
        refreshing_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_register_missing_field(self, auth_service, refreshing_db) -> None:
        """Test that all three fields are required."""
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("Ada", None, "supersecret")

        assert exc_info.value.message == "All fields required"
        refreshing_db.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, auth_service) -> None:
        """Test that a malformed email is refused."""
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("Ada", "not-an-email", "supersecret")

        assert exc_info.value.message == "Invalid email address"

    @pytest.mark.asyncio
    async def test_register_short_password(self, auth_service) -> None:
        """Test the minimum password length."""
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("Ada", "ada@example.com", "short")

        assert exc_info.value.message == "Password must be at least 8 characters"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(
        self, auth_service, refreshing_db, scalar_result, make_admin
    ) -> None:
        """Test that an existing email is a 400 conflict."""
        refreshing_db.execute.return_value = scalar_result(make_admin(email="ada@example.com"))

        with pytest.raises(AdminExistsError) as exc_info:
            await auth_service.register("Ada", "ada@example.com", "supersecret")

        assert exc_info.value.message == "Admin already exists"
        assert exc_info.value.status_code == 400
        refreshing_db.add.assert_not_called()


class TestLogin:
    """Tests for admin login."""

    @pytest.mark.asyncio
    async def test_login_success(
        self, auth_service, refreshing_db, scalar_result, make_admin, hasher, jwt_manager
    ) -> None:
        """Test that valid credentials return a token and profile."""
        admin = make_admin(password_hash=hasher.hash("supersecret"))
        refreshing_db.execute.return_value = scalar_result(admin)

        result = await auth_service.login("ADMIN@example.com", "supersecret")

        assert result.admin.id == admin.id
        assert result.admin.role == "admin"
        assert jwt_manager.decode_token(result.token).sub == admin.id

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, auth_service, refreshing_db, scalar_result) -> None:
        """Test that an unknown email gives the generic error."""
        refreshing_db.execute.return_value = scalar_result(None)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth_service.login("nobody@example.com", "supersecret")

        assert exc_info.value.message == "Invalid credentials"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_login_wrong_password(
        self, auth_service, refreshing_db, scalar_result, make_admin, hasher
    ) -> None:
        """Test that a wrong password gives the same generic error."""
        refreshing_db.execute.return_value = scalar_result(
            make_admin(password_hash=hasher.hash("supersecret"))
        )

        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("admin@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_login_inactive_account(
        self, auth_service, refreshing_db, scalar_result, make_admin, hasher
    ) -> None:
        """Test that an archived admin with the right password is refused."""
        refreshing_db.execute.return_value = scalar_result(
            make_admin(password_hash=hasher.hash("supersecret"), status=STATUS_INACTIVE)
        )

        with pytest.raises(AccountInactiveError) as exc_info:
            await auth_service.login("admin@example.com", "supersecret")

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_login_inactive_account_wrong_password(
        self, auth_service, refreshing_db, scalar_result, make_admin, hasher
    ) -> None:
        """Test that the account status is checked before the password."""
        refreshing_db.execute.return_value = scalar_result(
            make_admin(password_hash=hasher.hash("supersecret"), status=STATUS_INACTIVE)
        )

        with pytest.raises(AccountInactiveError) as exc_info:
            await auth_service.login("admin@example.com", "wrong-password")

        assert exc_info.value.message == "Admin account inactive"

    @pytest.mark.asyncio
    async def test_login_missing_fields(self, auth_service) -> None:
        """Test that both fields are required."""
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.login("admin@example.com", "")

        assert exc_info.value.message == "Email and password are required"

    @pytest.mark.asyncio
    async def test_login_without_secret(self, refreshing_db, hasher) -> None:
        """Test that login fails as a server error when no secret is set."""
        settings = MagicMock()
        settings.secret_key = None
        service = AuthService(refreshing_db, JWTManager(settings), hasher)

        with pytest.raises(ConfigError):
            await service.login("admin@example.com", "supersecret")

        refreshing_db.execute.assert_not_awaited()


class TestProfile:
    """Tests for the signed-in admin profile."""

    @pytest.mark.asyncio
    async def test_get_profile(self, auth_service, refreshing_db, scalar_result, make_admin) -> None:
        """Test that the profile omits the password hash."""
        admin = make_admin()
        refreshing_db.execute.return_value = scalar_result(admin)

        profile = await auth_service.get_profile(admin.id)

        assert profile.model_dump(by_alias=True) == {
            "id": admin.id,
            "name": admin.name,
            "email": admin.email,
            "role": "admin",
        }

    @pytest.mark.asyncio
    async def test_get_profile_missing(self, auth_service, refreshing_db, scalar_result) -> None:
        """Test that a deleted admin is a 404."""
        refreshing_db.execute.return_value = scalar_result(None)

        with pytest.raises(NotFoundError):
            await auth_service.get_profile(str(uuid4()))
