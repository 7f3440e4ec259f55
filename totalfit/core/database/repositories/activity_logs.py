"""
Activity log repository.

Data access for logged workouts and sports activities.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.activity_logs import ActivityLog
from .base import AsyncBaseRepository, QueryBuilder


class ActivityLogRepository(AsyncBaseRepository[ActivityLog]):
    """Repository for activity log data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ActivityLog)

    async def list_for_athlete(
        self, athlete_id: str, limit: Optional[int] = 50, offset: Optional[int] = 0
    ) -> List[ActivityLog]:
        """List an athlete's activities, most recent date first."""
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.athlete_id == athlete_id)
            .order_by(ActivityLog.date.desc(), ActivityLog.created_at.desc())
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_since(self, athlete_id: str, start: date) -> List[ActivityLog]:
        """List an athlete's activities dated on or after ``start``, oldest first."""
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.athlete_id == athlete_id, ActivityLog.date >= start)
            .order_by(ActivityLog.date.asc(), ActivityLog.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_on_date(self, athlete_id: str, day: date) -> List[ActivityLog]:
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.athlete_id == athlete_id, ActivityLog.date == day)
            .order_by(ActivityLog.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
