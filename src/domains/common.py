# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Helpers shared by the resource services."""

from uuid import UUID

from src.core.exceptions import ValidationError


def parse_id(value: str | UUID | None, label: str) -> str:
    """Validate a client supplied identifier.

    Args:
        value: Raw identifier from the path, query or body.
        label: Entity name used in the error message.

    Returns:
        The canonical UUID string.

    Raises:
        ValidationError: ``Invalid <label> id`` if the value is not a UUID.
    """
    if isinstance(value, UUID):
        return str(value)
    try:
        return str(UUID(str(value).strip()))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"Invalid {label} id")


def contains_pattern(term: str) -> str:
    """ILIKE pattern for a case-insensitive substring match.

    LIKE wildcards in ``term`` are escaped with a backslash.
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def clean_search(search: str | None) -> str | None:
    """Trimmed search text, or None when there is nothing to search for."""
    if search is None:
        return None
    search = search.strip()
    return search or None
