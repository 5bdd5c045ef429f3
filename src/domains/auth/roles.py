# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Roles and the capabilities they grant.

Routes ask for a capability rather than a role name, so adding a role only
means adding an entry here.
"""

ROLE_ADMIN = "admin"

DASHBOARD_VIEW = "dashboard.view"
TEACHERS_MANAGE = "teachers.manage"
COURSES_MANAGE = "courses.manage"
CLASSES_MANAGE = "classes.manage"
STUDENTS_VIEW = "students.view"
PARENTS_VIEW = "parents.view"

ALL_CAPABILITIES = frozenset(
    {
        DASHBOARD_VIEW,
        TEACHERS_MANAGE,
        COURSES_MANAGE,
        CLASSES_MANAGE,
        STUDENTS_VIEW,
        PARENTS_VIEW,
    }
)

ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    ROLE_ADMIN: ALL_CAPABILITIES,
}


def capabilities_for(role: str | None) -> frozenset[str]:
    """Capabilities granted to ``role``; unknown roles get none."""
    if role is None:
        return frozenset()
    return ROLE_CAPABILITIES.get(role, frozenset())
