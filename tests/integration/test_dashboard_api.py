# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for Dashboard API endpoints."""

from datetime import datetime, timezone
from uuid import uuid4

from fastapi.testclient import TestClient

from src.core.exceptions import ValidationError
from src.models.dashboard import (
    ActivityResponse,
    DashboardCounts,
    DashboardStatsResponse,
    RecentActivity,
    RecentCourse,
    RecentTeacher,
)

NOW = datetime(2025, 1, 15, tzinfo=timezone.utc)


class TestDashboardStats:
    """Tests for GET /api/dashboard/stats."""

    def test_stats_shape(self, client: TestClient, services, auth_headers) -> None:
        """Test that counts and recent activity are returned in camelCase."""
        teacher = RecentTeacher(id=str(uuid4()), name="Jane", email="jane@example.com", created_at=NOW)
        services["dashboard"].get_stats.return_value = DashboardStatsResponse(
            stats=DashboardCounts(teachers=3, courses=2, classes=1, students=40, parents=30),
            recent_activity=RecentActivity(teachers=[teacher], courses=[], classes=[]),
        )

        response = client.get("/api/dashboard/stats", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["stats"] == {
            "teachers": 3,
            "courses": 2,
            "classes": 1,
            "students": 40,
            "parents": 30,
        }
        assert body["recentActivity"]["teachers"][0]["createdAt"].startswith("2025-01-15")
        assert body["recentActivity"]["courses"] == []

    def test_stats_requires_token(self, client: TestClient) -> None:
        """Test that the dashboard is not public."""
        response = client.get("/api/dashboard/stats")

        assert response.status_code == 401


class TestDashboardActivity:
    """Tests for GET /api/dashboard/activity/{activity_type}."""

    def test_activity_with_limit(self, client: TestClient, services, auth_headers) -> None:
        """Test that the type and limit reach the service."""
        course = RecentCourse(id=str(uuid4()), course_name="Algebra", class_level="8", created_at=NOW)
        services["dashboard"].get_activity.return_value = ActivityResponse(
            type="courses", count=1, data=[course]
        )

        response = client.get("/api/dashboard/activity/courses?limit=5", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "courses"
        assert body["count"] == 1
        assert body["data"][0]["courseName"] == "Algebra"
        services["dashboard"].get_activity.assert_awaited_once_with("courses", limit=5)

    def test_activity_default_limit(self, client: TestClient, services, auth_headers) -> None:
        """Test that the limit defaults to ten."""
        services["dashboard"].get_activity.return_value = ActivityResponse(
            type="teachers", count=0, data=[]
        )

        client.get("/api/dashboard/activity/teachers", headers=auth_headers)

        services["dashboard"].get_activity.assert_awaited_once_with("teachers", limit=10)

    def test_unknown_activity_type(self, client: TestClient, services, auth_headers) -> None:
        """Test that an unknown type is a 400."""
        services["dashboard"].get_activity.side_effect = ValidationError("Invalid activity type")

        response = client.get("/api/dashboard/activity/students", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid activity type"}
