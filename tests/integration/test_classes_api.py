# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for Classes API endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.core.exceptions import ValidationError
from src.domains.class_.service import ClassNotFoundError
from src.models.class_ import (
    ClassListResponse,
    ClassMutationResponse,
    ClassResponse,
    ClassUpdateRequest,
    Schedule,
)
from src.models.common import CourseRef, MessageResponse, TeacherRef

COURSE = CourseRef(id=str(uuid4()), course_name="Algebra Basics", class_level="8")
TEACHER = TeacherRef(id=str(uuid4()), name="Jane Doe", email="jane@example.com")


def class_response(**overrides) -> ClassResponse:
    values = {
        "id": str(uuid4()),
        "class_name": "Algebra A",
        "class_code": "ALG-A",
        "course_linked": COURSE,
        "teacher_assigned": TEACHER,
        "schedule": Schedule(day="monday", time="10:00"),
        "max_students": 30,
        "status": "active",
    }
    values.update(overrides)
    return ClassResponse(**values)


def class_body(**overrides) -> dict:
    body = {
        "className": "Algebra A",
        "classCode": "alg-a",
        "courseLinked": COURSE.id,
        "teacherAssigned": TEACHER.id,
        "schedule": {"day": "Monday", "time": "10:00"},
        "maxStudents": 30,
    }
    body.update(overrides)
    return body


class TestListClasses:
    """Tests for GET /api/classes."""

    def test_list_filters(self, client: TestClient, services, auth_headers) -> None:
        """Test that course and teacher filters reach the service."""
        services["classes"].list_classes.return_value = ClassListResponse(
            classes=[class_response()], total=1, total_pages=1, current_page=1
        )

        response = client.get(
            f"/api/classes?course={COURSE.id}&teacher={TEACHER.id}",
            headers=auth_headers,
        )

        assert response.status_code == 200
        item = response.json()["classes"][0]
        assert item["courseLinked"] == {
            "id": COURSE.id,
            "courseName": "Algebra Basics",
            "classLevel": "8",
        }
        assert item["schedule"] == {"day": "monday", "time": "10:00"}
        services["classes"].list_classes.assert_awaited_once_with(
            course_id=COURSE.id, teacher_id=TEACHER.id, page=1, limit=10
        )


class TestCreateClass:
    """Tests for POST /api/classes."""

    def test_create_answers_with_class_key(self, client: TestClient, services, auth_headers) -> None:
        """Test that the created class is returned under "class"."""
        services["classes"].create_class.return_value = ClassMutationResponse(
            message="Class created successfully", class_=class_response()
        )

        response = client.post("/api/classes", headers=auth_headers, json=class_body())

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Class created successfully"
        assert body["class"]["classCode"] == "ALG-A"

        request, = services["classes"].create_class.await_args.args
        assert request.class_code == "ALG-A"
        assert request.schedule.day == "monday"

    def test_create_missing_schedule(self, client: TestClient, services, auth_headers) -> None:
        """Test that a missing field is a 400."""
        body = class_body()
        del body["schedule"]

        response = client.post("/api/classes", headers=auth_headers, json=body)

        assert response.status_code == 400
        assert response.json() == {"message": "Missing required fields"}
        services["classes"].create_class.assert_not_awaited()

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"maxStudents": 0}, "Invalid maxStudents"),
            ({"maxStudents": 101}, "Invalid maxStudents"),
            ({"schedule": {"day": "sunday", "time": "10:00"}}, "Invalid day"),
        ],
    )
    def test_create_out_of_range(
        self, client: TestClient, services, auth_headers, overrides: dict, message: str
    ) -> None:
        """Test capacity bounds and weekday-only schedules."""
        response = client.post("/api/classes", headers=auth_headers, json=class_body(**overrides))

        assert response.status_code == 400
        assert response.json() == {"message": message}

    def test_create_inactive_course(self, client: TestClient, services, auth_headers) -> None:
        """Test that an inactive course is reported by the service."""
        services["classes"].create_class.side_effect = ValidationError("Course not found or inactive")

        response = client.post("/api/classes", headers=auth_headers, json=class_body())

        assert response.status_code == 400
        assert response.json() == {"message": "Course not found or inactive"}


class TestUpdateClass:
    """Tests for PUT /api/classes/{class_id}."""

    def test_update_ignores_immutable_fields(self, client: TestClient, services, auth_headers) -> None:
        """Test that classCode and courseLinked are not forwarded."""
        class_id = str(uuid4())
        services["classes"].update_class.return_value = ClassMutationResponse(
            message="Class updated successfully", class_=class_response(id=class_id)
        )

        response = client.put(
            f"/api/classes/{class_id}",
            headers=auth_headers,
            json={"maxStudents": 25, "classCode": "OTHER", "courseLinked": str(uuid4())},
        )

        assert response.status_code == 200
        assert response.json()["class"]["id"] == class_id
        called_id, request = services["classes"].update_class.await_args.args
        assert called_id == class_id
        assert isinstance(request, ClassUpdateRequest)
        assert request.model_dump(exclude_unset=True) == {"max_students": 25}

    def test_update_unknown_class(self, client: TestClient, services, auth_headers) -> None:
        """Test that an unknown class is a 404."""
        services["classes"].update_class.side_effect = ClassNotFoundError()

        response = client.put(f"/api/classes/{uuid4()}", headers=auth_headers, json={"className": "X"})

        assert response.status_code == 404
        assert response.json() == {"message": "Class not found"}


class TestArchiveClass:
    """Tests for DELETE /api/classes/{class_id}."""

    def test_archive(self, client: TestClient, services, auth_headers) -> None:
        """Test that archiving answers with the confirmation message."""
        services["classes"].archive_class.return_value = MessageResponse(
            message="Class archived successfully"
        )

        response = client.delete(f"/api/classes/{uuid4()}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Class archived successfully"}
