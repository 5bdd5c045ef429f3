# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for helpers shared by the services."""

from uuid import uuid4

import pytest

from src.core.exceptions import ValidationError
from src.domains.common import clean_search, contains_pattern, parse_id


class TestParseId:
    """Tests for parse_id."""

    def test_accepts_uuid_string(self) -> None:
        """Test that a canonical id passes through."""
        value = str(uuid4())

        assert parse_id(value, "teacher") == value

    def test_normalizes_case_and_whitespace(self) -> None:
        """Test that ids are canonicalized."""
        value = str(uuid4())

        assert parse_id(f"  {value.upper()} ", "teacher") == value

    @pytest.mark.parametrize("value", ["abc", "123", "", None])
    def test_rejects_malformed(self, value: str | None) -> None:
        """Test that malformed ids name the entity."""
        with pytest.raises(ValidationError) as exc_info:
            parse_id(value, "course")

        assert exc_info.value.message == "Invalid course id"
        assert exc_info.value.status_code == 400


class TestSearchHelpers:
    """Tests for search text helpers."""

    def test_contains_pattern_wraps_term(self) -> None:
        """Test substring matching."""
        assert contains_pattern("jane") == "%jane%"

    def test_contains_pattern_escapes_wildcards(self) -> None:
        """Test that user wildcards match literally."""
        assert contains_pattern("50%_off") == "%50\\%\\_off%"

    @pytest.mark.parametrize(("raw", "expected"), [(None, None), ("   ", None), (" math ", "math")])
    def test_clean_search(self, raw: str | None, expected: str | None) -> None:
        """Test that blank search text is ignored."""
        assert clean_search(raw) == expected
