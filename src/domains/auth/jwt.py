# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JWT session token management using python-jose.

Example:
    >>> from src.core.config import get_settings
    >>> jwt_manager = JWTManager(get_settings().jwt)
    >>> token = jwt_manager.create_access_token(admin_id="admin-123", role="admin")
    >>> claims = jwt_manager.decode_token(token)
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import ExpiredSignatureError, JWTError as JoseJWTError, jwt
from pydantic import BaseModel

from src.core.config.settings import JWTSettings
from src.core.exceptions import AuthError, ConfigError

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    """Decoded session token claims.

    Attributes:
        sub: Subject (admin ID).
        role: Role of the subject.
        exp: Expiration timestamp.
        iat: Issued at timestamp.
        jti: JWT ID.
    """

    sub: str
    role: str | None = None
    exp: int
    iat: int | None = None
    jti: str | None = None


class JWTError(AuthError):
    """Base exception for token verification failures."""

    default_message = "Invalid token"


class TokenExpiredError(JWTError):
    """Raised when a token's signature has expired."""

    default_message = "Token expired"


class InvalidTokenError(JWTError):
    """Raised when a token is malformed, tampered with or incomplete."""

    default_message = "Invalid token"


class JWTManager:
    """Creates and validates signed session tokens.

    Attributes:
        _settings: JWT configuration settings.
    """

    def __init__(self, settings: JWTSettings) -> None:
        self._settings = settings

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self._settings.access_token_expire_minutes * 60

    def ensure_configured(self) -> None:
        """Raise ConfigError if no signing secret is configured."""
        self._secret()

    def _secret(self) -> str:
        secret = self._settings.secret_key
        if secret is None or not secret.get_secret_value():
            raise ConfigError()
        return secret.get_secret_value()

    def create_access_token(self, admin_id: str | UUID, role: str) -> str:
        """Create a signed session token.

        Args:
            admin_id: Identifier of the authenticated admin.
            role: Role claim embedded in the token.

        Returns:
            JWT string valid for the configured lifetime.

        Raises:
            ConfigError: If no signing secret is configured.
        """
        now = datetime.now(timezone.utc)
        exp = now + timedelta(seconds=self.expires_in)

        payload = {
            "sub": str(admin_id),
            "role": role,
            "exp": int(exp.timestamp()),
            "iat": int(now.timestamp()),
            "jti": secrets.token_urlsafe(16),
        }

        return jwt.encode(payload, self._secret(), algorithm=self._settings.algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate a session token.

        Only token problems are translated; anything else propagates so the
        caller can report it as a server error.

        Args:
            token: JWT token string.

        Returns:
            TokenPayload with decoded claims.

        Raises:
            ConfigError: If no signing secret is configured.
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or has no subject.
        """
        secret = self._secret()
        try:
            payload = jwt.decode(token, secret, algorithms=[self._settings.algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except JoseJWTError as e:
            logger.debug("Token decode failed: %s", e)
            raise InvalidTokenError()

        if not payload.get("sub"):
            raise InvalidTokenError("Invalid token payload")

        return TokenPayload(
            sub=str(payload["sub"]),
            role=payload.get("role"),
            exp=payload["exp"],
            iat=payload.get("iat"),
            jti=payload.get("jti"),
        )
