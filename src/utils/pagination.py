# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Page/limit normalization shared by the list endpoints."""

import math
from typing import NamedTuple

DEFAULT_LIMIT = 10
MAX_LIMIT = 50


class PageRequest(NamedTuple):
    """A normalized page request."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def normalize_page(page: int | None = None, limit: int | None = None) -> PageRequest:
    """Clamp client supplied paging values.

    ``page`` is floored at 1. ``limit`` defaults to 10 and is kept within
    1..50.

    Args:
        page: Requested page number (1-based).
        limit: Requested page size.

    Returns:
        The clamped PageRequest.

    Example:
        >>> normalize_page(0, 500)
        PageRequest(page=1, limit=50)
    """
    page = max(1, page or 1)
    limit = min(max(1, limit or DEFAULT_LIMIT), MAX_LIMIT)
    return PageRequest(page=page, limit=limit)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items, ``limit`` per page."""
    return math.ceil(total / limit) if limit else 0
