# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for the LMS
admin API. Settings are loaded from environment variables (and an optional
``.env`` file) with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from src.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Relational store configuration.

    Attributes:
        url: Async SQLAlchemy connection URL (``postgresql+asyncpg://...``).
        pool_size: Connection pool size.
        max_overflow: Maximum overflow connections.
        connect_timeout: Seconds to wait when opening a connection.
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    url: str | None = Field(default=None, validation_alias="DATABASE_URL")
    pool_size: int = 10
    max_overflow: int = 20
    connect_timeout: float = 5.0


class JWTSettings(BaseSettings):
    """JWT authentication configuration.

    Attributes:
        secret_key: Secret key for signing tokens. Required at startup.
        algorithm: JWT signing algorithm.
        access_token_expire_minutes: Session token lifetime (7 days).
    """

    model_config = SettingsConfigDict(
        env_prefix="JWT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: SecretStr | None = None
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 7 * 24 * 60


class RateLimitSettings(BaseSettings):
    """Rate limiting configuration.

    Attributes:
        enabled: Whether API requests are rate limited.
        requests: Requests allowed per client within the window.
        window: Window length understood by slowapi (e.g. "15 minutes").
    """

    model_config = SettingsConfigDict(
        env_prefix="RATE_LIMIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = True
    requests: int = 100
    window: str = "15 minutes"

    @property
    def limit_string(self) -> str:
        """Limit in slowapi notation, e.g. ``100/15 minutes``."""
        return f"{self.requests}/{self.window}"


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        client_url: Origin of the admin frontend, used in production.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    client_url: str | None = Field(default=None, validation_alias="CLIENT_URL")
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]


class APISettings(BaseSettings):
    """API server configuration.

    Attributes:
        host: Host to bind to.
        port: Port to listen on.
        workers: Number of worker processes.
        reload: Whether to enable auto-reload.
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=5000, validation_alias=AliasChoices("PORT", "API_PORT"))
    workers: int = 1
    reload: bool = False


class UploadSettings(BaseSettings):
    """Local image upload configuration.

    Attributes:
        directory: Directory the uploaded files are written to.
        max_bytes: Largest accepted upload.
        allowed_types: Accepted MIME types.
    """

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    directory: str = Field(default="uploads", validation_alias=AliasChoices("UPLOAD_DIR", "UPLOAD_DIRECTORY"))
    max_bytes: int = 5 * 1024 * 1024
    allowed_types: list[str] = ["image/jpeg", "image/png"]


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment.
        debug: Enable debug mode (exposes API docs).
        log_level: Logging level.
        database: Database settings.
        jwt: JWT authentication settings.
        rate_limit: Rate limiting settings.
        cors: CORS settings.
        api: API server settings.
        uploads: Upload storage settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Subsettings - loaded with their own env prefixes
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    jwt: JWTSettings = Field(default_factory=JWTSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)
    uploads: UploadSettings = Field(default_factory=UploadSettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production without a frontend origin.
        """
        if self.environment == "production" and not self.cors.client_url:
            raise ValueError(
                "CLIENT_URL must be set in production so CORS can be restricted."
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins: the client URL in production, anything otherwise."""
        if self.is_production and self.cors.client_url:
            return [self.cors.client_url]
        return ["*"]

    def missing_required(self) -> list[str]:
        """Names of required environment variables that are not set."""
        missing = []
        if not self.database.url:
            missing.append("DATABASE_URL")
        if self.jwt.secret_key is None or not self.jwt.secret_key.get_secret_value():
            missing.append("JWT_SECRET_KEY")
        return missing


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or after changing the environment.
    """
    get_settings.cache_clear()
