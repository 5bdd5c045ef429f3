# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the error hierarchy and validation messages."""

import pytest

from src.api.errors import validation_message
from src.core.exceptions import (
    AppError,
    AuthenticationFailure,
    AuthError,
    ConfigError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class TestAppErrors:
    """Tests for AppError subclasses."""

    @pytest.mark.parametrize(
        ("error_class", "status_code", "message"),
        [
            (ValidationError, 400, "Missing required fields"),
            (ConflictError, 400, "Duplicate field value"),
            (AuthError, 401, "Invalid credentials"),
            (ForbiddenError, 403, "Forbidden"),
            (NotFoundError, 404, "Not found"),
            (ConfigError, 500, "Server configuration error"),
            (AuthenticationFailure, 500, "Internal authentication error"),
        ],
    )
    def test_defaults(self, error_class: type[AppError], status_code: int, message: str) -> None:
        """Test each error's status and default message."""
        error = error_class()

        assert error.status_code == status_code
        assert error.message == message

    def test_custom_message_and_details(self) -> None:
        """Test that details appear in the string form only."""
        error = NotFoundError("Teacher not found", details={"id": "1"})

        assert error.message == "Teacher not found"
        assert str(error) == "Teacher not found ({'id': '1'})"


class TestValidationMessage:
    """Tests for summarizing pydantic errors."""

    def test_missing_field_is_generic(self) -> None:
        """Test that any missing field gives the generic message."""
        errors = [
            {"type": "string_pattern_mismatch", "loc": ("body", "phone_number")},
            {"type": "missing", "loc": ("body", "name")},
        ]

        assert validation_message(errors) == "Missing required fields"

    def test_invalid_field_named_in_camel_case(self) -> None:
        """Test that the first invalid field is named."""
        errors = [{"type": "string_pattern_mismatch", "loc": ("body", "phone_number")}]

        assert validation_message(errors) == "Invalid phoneNumber"

    def test_nested_field(self) -> None:
        """Test that nested locations name the innermost field."""
        errors = [{"type": "literal_error", "loc": ("body", "schedule", "day")}]

        assert validation_message(errors) == "Invalid day"

    def test_list_index_is_skipped(self) -> None:
        """Test that list positions are not field names."""
        errors = [{"type": "string_type", "loc": ("form", "subjects", 0)}]

        assert validation_message(errors) == "Invalid subjects"

    def test_no_location(self) -> None:
        """Test the fallback for a model level error."""
        assert validation_message([{"type": "value_error", "loc": ()}]) == "Invalid request"
