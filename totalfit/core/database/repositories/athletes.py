"""
Athlete repository.

Data access for athletes, including the cascading delete of everything
recorded for an athlete.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.activity_logs import ActivityLog
from ..entities.athletes import Athlete
from ..entities.body_part_workloads import BodyPartWorkload
from ..entities.injury_history import InjuryHistory
from ..entities.injury_risk_snapshots import InjuryRiskSnapshot
from .base import AsyncBaseRepository

RELATED_ENTITIES = (ActivityLog, BodyPartWorkload, InjuryRiskSnapshot, InjuryHistory)


class AthleteRepository(AsyncBaseRepository[Athlete]):
    """Repository for athlete data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Athlete)

    async def list_for_user(self, user_id: str) -> List[Athlete]:
        """List a coach's athletes, newest first."""
        stmt = select(Athlete).where(Athlete.user_id == user_id).order_by(Athlete.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_with_related(self, athlete_id: str) -> bool:
        """Delete an athlete together with its activities, workloads, snapshots and injuries.

        Returns:
            True if the athlete existed
        """
        athlete = await self.get_by_id(athlete_id)
        if athlete is None:
            return False
        for entity in RELATED_ENTITIES:
            await self.session.execute(delete(entity).where(entity.athlete_id == athlete_id))
        await self.session.delete(athlete)
        await self.session.commit()
        return True
