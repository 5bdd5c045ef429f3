# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for Authentication API endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from src.core.exceptions import ConfigError
from src.domains.auth.service import AdminExistsError, InvalidCredentialsError
from src.models.auth import AdminProfile, LoginResponse


def profile(admin_id: str | None = None) -> AdminProfile:
    return AdminProfile(
        id=admin_id or str(uuid4()),
        name="Ada Admin",
        email="admin@example.com",
        role="admin",
    )


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_success(self, client: TestClient, services) -> None:
        """Test that registration answers 201 without a token."""
        services["auth"].register.return_value = profile()

        response = client.post(
            "/api/auth/register",
            json={"name": "Ada Admin", "email": "admin@example.com", "password": "supersecret"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Admin created successfully"}
        services["auth"].register.assert_awaited_once_with(
            "Ada Admin", "admin@example.com", "supersecret"
        )

    def test_register_empty_body(self, client: TestClient, services) -> None:
        """Test that a missing body reaches the service as missing fields."""
        services["auth"].register.return_value = profile()

        client.post("/api/auth/register")

        services["auth"].register.assert_awaited_once_with(None, None, None)

    def test_register_duplicate(self, client: TestClient, services) -> None:
        """Test that an existing email is a 400."""
        services["auth"].register.side_effect = AdminExistsError()

        response = client.post(
            "/api/auth/register",
            json={"name": "Ada", "email": "admin@example.com", "password": "supersecret"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Admin already exists"}


class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(self, client: TestClient, services, admin_token: str) -> None:
        """Test that login returns the token and profile in camelCase."""
        admin = profile()
        services["auth"].login.return_value = LoginResponse(token=admin_token, admin=admin)

        response = client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "supersecret"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"] == admin_token
        assert body["admin"] == {
            "id": admin.id,
            "name": "Ada Admin",
            "email": "admin@example.com",
            "role": "admin",
        }

    def test_login_bad_credentials(self, client: TestClient, services) -> None:
        """Test that bad credentials are a 401 with the generic message."""
        services["auth"].login.side_effect = InvalidCredentialsError()

        response = client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    def test_login_without_secret(self, client: TestClient, services) -> None:
        """Test that a missing signing secret is a 500."""
        services["auth"].login.side_effect = ConfigError()

        response = client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "supersecret"},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Server configuration error"}


class TestMe:
    """Tests for GET /api/auth/me."""

    def test_me_requires_token(self, client: TestClient) -> None:
        """Test that the profile is not public."""
        assert client.get("/api/auth/me").status_code == 401

    def test_me_returns_profile(self, client: TestClient, services, auth_headers, jwt_manager) -> None:
        """Test that the profile of the token's subject is returned."""
        admin_id = jwt_manager.decode_token(auth_headers["Authorization"].split()[1]).sub
        services["auth"].get_profile.return_value = profile(admin_id)

        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == admin_id
        services["auth"].get_profile.assert_awaited_once_with(admin_id)
