# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Password hashing utilities using bcrypt.

Example:
    >>> hasher = PasswordHasher()
    >>> hashed = hasher.hash("my_password")
    >>> hasher.verify("my_password", hashed)
    True
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Password hashing with bcrypt and an embedded salt.

    Attributes:
        _rounds: bcrypt cost factor.
    """

    def __init__(self, rounds: int = 10) -> None:
        """Initialize the password hasher.

        Args:
            rounds: bcrypt cost factor.
        """
        self._rounds = rounds
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password to hash.

        Returns:
            Bcrypt hash string with salt embedded.

        Raises:
            ValueError: If password is empty or longer than 72 bytes.
        """
        if not password:
            raise ValueError("Password cannot be empty")
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError("Password cannot be longer than 72 bytes")

        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password to verify.
            password_hash: Bcrypt hash to verify against.

        Returns:
            True if password matches the hash, False otherwise.
        """
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning("Password verification failed: %s", e)
            return False

    def burn(self, password: str) -> None:
        """Spend one verification's worth of time without a real hash.

        Used when the account does not exist so the response time does not
        reveal that.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("not-a-real-password")
        self.verify(password or "x", self._dummy_hash)
