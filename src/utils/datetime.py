# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Timezone-aware datetime helpers.

All timestamps stored or returned by the API are UTC.
"""

import time
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC datetime with timezone info."""
    return datetime.now(UTC)


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000

