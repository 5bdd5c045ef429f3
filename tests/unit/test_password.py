# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for password hashing utilities."""

import pytest

from src.domains.auth.password import MAX_PASSWORD_BYTES, PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    """Cheap hasher for tests."""
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    """Tests for PasswordHasher class."""

    def test_hash_password_returns_bcrypt_hash(self, hasher: PasswordHasher) -> None:
        """Test that hashing returns a bcrypt hash string."""
        hashed = hasher.hash("test_password_123")

        assert hashed.startswith("$2b$")
        assert len(hashed) == 60

    def test_default_cost_factor_is_ten(self) -> None:
        """Test that the default hasher uses cost factor 10."""
        hashed = PasswordHasher().hash("test_password_123")

        assert hashed.startswith("$2b$10$")

    def test_hash_produces_different_hashes_for_same_password(self, hasher: PasswordHasher) -> None:
        """Test that hashing the same password twice gives different salts."""
        assert hasher.hash("same") != hasher.hash("same")

    def test_verify_correct_password(self, hasher: PasswordHasher) -> None:
        """Test that the original password verifies."""
        hashed = hasher.hash("correct horse")

        assert hasher.verify("correct horse", hashed) is True

    def test_verify_wrong_password(self, hasher: PasswordHasher) -> None:
        """Test that another password does not verify."""
        hashed = hasher.hash("correct horse")

        assert hasher.verify("battery staple", hashed) is False

    def test_verify_against_malformed_hash(self, hasher: PasswordHasher) -> None:
        """Test that a corrupt stored hash fails closed."""
        assert hasher.verify("anything", "not-a-bcrypt-hash") is False

    def test_verify_empty_inputs(self, hasher: PasswordHasher) -> None:
        """Test that empty password or hash never verifies."""
        hashed = hasher.hash("secret")

        assert hasher.verify("", hashed) is False
        assert hasher.verify("secret", "") is False

    def test_hash_empty_password_raises(self, hasher: PasswordHasher) -> None:
        """Test that an empty password cannot be hashed."""
        with pytest.raises(ValueError):
            hasher.hash("")

    def test_hash_overlong_password_raises(self, hasher: PasswordHasher) -> None:
        """Test that passwords beyond bcrypt's input limit are refused."""
        with pytest.raises(ValueError):
            hasher.hash("a" * (MAX_PASSWORD_BYTES + 1))

    def test_burn_does_not_raise(self, hasher: PasswordHasher) -> None:
        """Test that the timing equalizer accepts any input."""
        hasher.burn("whatever")
        hasher.burn("")
