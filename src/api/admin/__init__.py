# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin panel API router.

All routes are mounted under ``/api``. Apart from login and register,
every route requires a token whose role grants the router's capability.
"""

from fastapi import APIRouter, Depends

from src.api.admin import auth, classes, courses, dashboard, parents, students, teachers
from src.api.dependencies import RequireCapability
from src.domains.auth.roles import (
    CLASSES_MANAGE,
    COURSES_MANAGE,
    DASHBOARD_VIEW,
    PARENTS_VIEW,
    STUDENTS_VIEW,
    TEACHERS_MANAGE,
)

router = APIRouter(prefix="/api")

router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(
    teachers.router,
    prefix="/teachers",
    tags=["Teachers"],
    dependencies=[Depends(RequireCapability(TEACHERS_MANAGE))],
)
router.include_router(
    courses.router,
    prefix="/courses",
    tags=["Courses"],
    dependencies=[Depends(RequireCapability(COURSES_MANAGE))],
)
router.include_router(
    classes.router,
    prefix="/classes",
    tags=["Classes"],
    dependencies=[Depends(RequireCapability(CLASSES_MANAGE))],
)
router.include_router(
    students.router,
    prefix="/students",
    tags=["Students"],
    dependencies=[Depends(RequireCapability(STUDENTS_VIEW))],
)
router.include_router(
    parents.router,
    prefix="/parents",
    tags=["Parents"],
    dependencies=[Depends(RequireCapability(PARENTS_VIEW))],
)
router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(RequireCapability(DASHBOARD_VIEW))],
)

__all__ = ["router"]
