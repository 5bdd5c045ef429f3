# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints.
Dependencies are used to:
- Get database sessions and concurrent readers
- Get authenticated users and check capabilities
- Get service instances

Example:
    @router.get("/teachers")
    async def list_teachers(
        service: TeacherService = Depends(get_teacher_service),
        user: CurrentUser = Depends(RequireCapability(TEACHERS_MANAGE)),
    ):
        ...
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.middleware.auth import CurrentUser, require_user
from src.core.config import get_settings
from src.core.exceptions import ConfigError, ForbiddenError
from src.domains.auth.jwt import JWTManager
from src.domains.auth.password import PasswordHasher
from src.domains.auth.service import AuthService
from src.domains.class_.service import ClassService
from src.domains.course.service import CourseService
from src.domains.dashboard.service import DashboardService
from src.domains.parent.service import ParentService
from src.domains.student.service import StudentService
from src.domains.teacher.service import TeacherService
from src.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_session,
    get_sessionmaker,
    init_database,
)
from src.infrastructure.database.reader import ConcurrentReader
from src.infrastructure.storage.uploads import UploadStorage

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Validate required configuration and open the database pool.

    Raises:
        ConfigError: If DATABASE_URL or JWT_SECRET_KEY is missing.
        DatabaseError: If the database cannot be reached.
    """
    settings = get_settings()

    missing = settings.missing_required()
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    await init_database(settings)

    if not await check_database_connection():
        await close_database()
        raise DatabaseError("Database is unreachable")


async def close_db() -> None:
    """Close the database pool."""
    await close_database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a request-scoped database session.

    Yields:
        AsyncSession committed on success, rolled back on error.
    """
    async with get_session() as session:
        yield session


def get_reader() -> ConcurrentReader:
    """Reader that gives each concurrent query its own session."""
    return ConcurrentReader(get_sessionmaker())


# =========================================================================
# Authentication Dependencies
# =========================================================================


def require_auth(request: Request) -> CurrentUser:
    """Require an authenticated user.

    Raises:
        AppError: 401 for token problems, 500 if verification failed.
    """
    return require_user(request)


class RequireCapability:
    """Dependency for requiring capabilities granted by the user's role.

    Example:
        @router.get("/teachers")
        async def list_teachers(
            user: CurrentUser = Depends(RequireCapability("teachers.manage")),
        ):
            ...
    """

    def __init__(self, *capabilities: str) -> None:
        """Initialize capability requirement.

        Args:
            capabilities: Capabilities that must all be granted.
        """
        self.capabilities = capabilities

    def __call__(self, request: Request) -> CurrentUser:
        """Check capabilities and return user.

        Raises:
            AppError: If not authenticated.
            ForbiddenError: If the role lacks a required capability.
        """
        user = require_auth(request)
        if not user.has_all_capabilities(*self.capabilities):
            logger.info(
                "Forbidden: role %s lacks %s",
                user.role,
                ", ".join(self.capabilities),
            )
            raise ForbiddenError()
        return user


# =========================================================================
# Service Dependencies
# =========================================================================


@lru_cache(maxsize=1)
def get_jwt_manager() -> JWTManager:
    return JWTManager(get_settings().jwt)


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def get_upload_storage() -> UploadStorage:
    return UploadStorage.from_settings(get_settings().uploads)


DbSession = Annotated[AsyncSession, Depends(get_db)]
Reader = Annotated[ConcurrentReader, Depends(get_reader)]


def get_auth_service(
    db: DbSession,
    jwt_manager: Annotated[JWTManager, Depends(get_jwt_manager)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> AuthService:
    return AuthService(db, jwt_manager, password_hasher)


def get_teacher_service(db: DbSession, reader: Reader) -> TeacherService:
    return TeacherService(db, reader)


def get_course_service(db: DbSession, reader: Reader) -> CourseService:
    return CourseService(db, reader)


def get_class_service(db: DbSession, reader: Reader) -> ClassService:
    return ClassService(db, reader)


def get_student_service(db: DbSession, reader: Reader) -> StudentService:
    return StudentService(db, reader)


def get_parent_service(db: DbSession, reader: Reader) -> ParentService:
    return ParentService(db, reader)


def get_dashboard_service(reader: Reader) -> DashboardService:
    return DashboardService(reader)


# Type aliases for cleaner endpoint signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(require_auth)]
Uploads = Annotated[UploadStorage, Depends(get_upload_storage)]
