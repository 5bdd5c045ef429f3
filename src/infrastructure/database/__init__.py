# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for PostgreSQL connections.

Example:
    from src.infrastructure.database import get_session

    async with get_session() as session:
        result = await session.execute(select(Teacher))
"""

from src.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)
from src.infrastructure.database.reader import ConcurrentReader

__all__ = [
    "DatabaseError",
    "check_database_connection",
    "close_database",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
    "ConcurrentReader",
]
