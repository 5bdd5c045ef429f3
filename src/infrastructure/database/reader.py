# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Independent read sessions for queries that run side by side.

An AsyncSession cannot run two statements at once, so list endpoints and
the dashboard give each concurrent query its own short-lived session.

Example:
    reader = ConcurrentReader(get_sessionmaker())
    rows, total = await asyncio.gather(
        reader.all(select(Teacher).limit(10)),
        reader.count(select(Teacher)),
    )
"""

from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class ConcurrentReader:
    """Runs read-only statements, each on a fresh session."""

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]) -> None:
        self._sessionmaker = sessionmaker

    async def all(self, stmt: Select) -> Sequence[Any]:
        """Execute ``stmt`` and return the unique scalar rows."""
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            return result.unique().scalars().all()

    async def count(self, stmt: Select) -> int:
        """Count the rows ``stmt`` would return."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        async with self._sessionmaker() as session:
            result = await session.execute(count_stmt)
            return result.scalar() or 0
