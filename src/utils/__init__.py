# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for the LMS admin API.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations
- pagination: Page/limit normalization for list endpoints
"""

from src.utils.datetime import epoch_millis, utc_now
from src.utils.logging import bind_context, clear_context, get_logger, setup_logging
from src.utils.pagination import PageRequest, normalize_page, total_pages

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "epoch_millis",
    # Pagination
    "PageRequest",
    "normalize_page",
    "total_pages",
]
