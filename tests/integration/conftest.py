# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixtures for HTTP level tests.

The full application is built with ``create_app()``; services are replaced
through dependency overrides so no database is needed. Tokens are signed
with the configured secret and pass through the real auth middleware.
"""

from pathlib import Path
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.dependencies import (
    get_auth_service,
    get_class_service,
    get_course_service,
    get_dashboard_service,
    get_parent_service,
    get_student_service,
    get_teacher_service,
    get_upload_storage,
)
from src.core.config import get_settings
from src.domains.auth.jwt import JWTManager
from src.domains.auth.service import AuthService
from src.domains.class_.service import ClassService
from src.domains.course.service import CourseService
from src.domains.dashboard.service import DashboardService
from src.domains.parent.service import ParentService
from src.domains.student.service import StudentService
from src.domains.teacher.service import TeacherService
from src.infrastructure.storage.uploads import UploadStorage


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def services() -> dict[str, AsyncMock]:
    """Mocked services keyed by resource."""
    return {
        "auth": AsyncMock(spec=AuthService),
        "teachers": AsyncMock(spec=TeacherService),
        "courses": AsyncMock(spec=CourseService),
        "classes": AsyncMock(spec=ClassService),
        "students": AsyncMock(spec=StudentService),
        "parents": AsyncMock(spec=ParentService),
        "dashboard": AsyncMock(spec=DashboardService),
    }


@pytest.fixture
def app(services: dict[str, AsyncMock], upload_dir: Path) -> FastAPI:
    """Create the application with services overridden."""
    app = create_app()
    app.dependency_overrides.update(
        {
            get_auth_service: lambda: services["auth"],
            get_teacher_service: lambda: services["teachers"],
            get_course_service: lambda: services["courses"],
            get_class_service: lambda: services["classes"],
            get_student_service: lambda: services["students"],
            get_parent_service: lambda: services["parents"],
            get_dashboard_service: lambda: services["dashboard"],
            get_upload_storage: lambda: UploadStorage(upload_dir),
        }
    )
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client (lifespan is not run)."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def jwt_manager() -> JWTManager:
    return JWTManager(get_settings().jwt)


@pytest.fixture
def admin_token(jwt_manager: JWTManager) -> str:
    """Valid session token for an admin."""
    return jwt_manager.create_access_token(admin_id=str(uuid4()), role="admin")


@pytest.fixture
def auth_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}
