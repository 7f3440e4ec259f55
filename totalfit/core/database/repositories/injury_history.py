"""
Injury history repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.injury_history import InjuryHistory
from .base import AsyncBaseRepository


class InjuryHistoryRepository(AsyncBaseRepository[InjuryHistory]):
    """Repository for injury history data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InjuryHistory)

    async def list_for_athlete(self, athlete_id: str) -> List[InjuryHistory]:
        stmt = (
            select(InjuryHistory)
            .where(InjuryHistory.athlete_id == athlete_id)
            .order_by(InjuryHistory.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def has_active_injury(self, athlete_id: str, body_part: str) -> bool:
        stmt = select(func.count()).select_from(InjuryHistory).where(
            InjuryHistory.athlete_id == athlete_id,
            InjuryHistory.body_part == body_part,
            InjuryHistory.status == "active",
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0
