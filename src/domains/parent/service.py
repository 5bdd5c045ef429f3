# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Parent service: read-only access to parents and their children.

Only active students are listed under a parent. The single-parent view
also resolves each child's class.
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.core.exceptions import NotFoundError
from src.domains.common import clean_search, contains_pattern, parse_id
from src.infrastructure.database.models import STATUS_ACTIVE, Parent, Student
from src.infrastructure.database.reader import ConcurrentReader
from src.models.common import ClassRef
from src.models.student import ChildSummary, ParentListResponse, ParentResponse
from src.utils.pagination import normalize_page, total_pages

logger = logging.getLogger(__name__)


def _active_children():
    return Parent.students.and_(Student.status == STATUS_ACTIVE)


class ParentNotFoundError(NotFoundError):
    """Raised when no active parent matches the id."""

    default_message = "Parent not found"


class ParentService:
    """Lists and fetches parents with their active students."""

    def __init__(self, db: AsyncSession, reader: ConcurrentReader) -> None:
        self.db = db
        self.reader = reader

    async def list_parents(
        self,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ParentListResponse:
        """List active parents, newest first.

        Args:
            search: Case-insensitive match on name, email or phone.
            page: 1-based page number (floored at 1).
            limit: Page size (default 10, capped at 50).
        """
        paging = normalize_page(page, limit)

        query = select(Parent).where(Parent.status == STATUS_ACTIVE)

        search = clean_search(search)
        if search:
            pattern = contains_pattern(search)
            query = query.where(
                or_(
                    Parent.name.ilike(pattern),
                    Parent.email.ilike(pattern),
                    Parent.phone.ilike(pattern),
                )
            )

        page_query = (
            query.options(selectinload(_active_children()))
            .order_by(Parent.created_at.desc())
            .limit(paging.limit)
            .offset(paging.offset)
        )

        parents, total = await asyncio.gather(
            self.reader.all(page_query),
            self.reader.count(query),
        )

        return ParentListResponse(
            parents=[self._to_response(p, with_classes=False) for p in parents],
            total=total,
            total_pages=total_pages(total, paging.limit),
            current_page=paging.page,
        )

    async def get_parent(self, parent_id: str) -> ParentResponse:
        """Get an active parent by ID, children's classes included.

        Raises:
            ValidationError: If the id is malformed.
            ParentNotFoundError: If no active parent has this id.
        """
        parent_id = parse_id(parent_id, "parent")
        result = await self.db.execute(
            select(Parent)
            .options(selectinload(_active_children()).joinedload(Student.class_enrolled))
            .where(Parent.id == parent_id, Parent.status == STATUS_ACTIVE)
        )
        parent = result.scalar_one_or_none()
        if not parent:
            raise ParentNotFoundError()
        return self._to_response(parent, with_classes=True)

    def _to_response(self, parent: Parent, with_classes: bool) -> ParentResponse:
        children = []
        for student in parent.students:
            class_ref = None
            if with_classes and student.class_enrolled:
                class_ref = ClassRef.model_validate(student.class_enrolled)
            children.append(
                ChildSummary(
                    id=str(student.id),
                    name=student.name,
                    email=student.email,
                    class_enrolled=class_ref,
                )
            )

        return ParentResponse(
            id=str(parent.id),
            name=parent.name,
            email=parent.email,
            phone=parent.phone,
            students=children,
            created_at=parent.created_at,
        )
