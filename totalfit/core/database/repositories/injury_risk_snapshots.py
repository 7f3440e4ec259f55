"""
Injury-risk snapshot repository.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.injury_risk_snapshots import InjuryRiskSnapshot
from .base import AsyncBaseRepository, QueryBuilder


class InjuryRiskSnapshotRepository(AsyncBaseRepository[InjuryRiskSnapshot]):
    """Repository for injury-risk snapshot data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InjuryRiskSnapshot)

    async def get_for_date(self, athlete_id: str, day: date) -> Optional[InjuryRiskSnapshot]:
        stmt = select(InjuryRiskSnapshot).where(
            InjuryRiskSnapshot.athlete_id == athlete_id, InjuryRiskSnapshot.date == day
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_athlete(self, athlete_id: str, limit: Optional[int] = 30) -> List[InjuryRiskSnapshot]:
        """An athlete's snapshots, most recent date first."""
        stmt = (
            select(InjuryRiskSnapshot)
            .where(InjuryRiskSnapshot.athlete_id == athlete_id)
            .order_by(InjuryRiskSnapshot.date.desc())
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(self, athlete_id: str, day: date, values: Dict[str, Any]) -> InjuryRiskSnapshot:
        """Insert or overwrite the snapshot for ``(athlete_id, day)``."""
        snapshot = await self.get_for_date(athlete_id, day)
        if snapshot is None:
            snapshot = InjuryRiskSnapshot.model_validate({**values, "athlete_id": athlete_id, "date": day})
            return await self.create(snapshot)
        return await self.update_fields(snapshot, values)

    async def delete_for_date(self, athlete_id: str, day: date) -> None:
        await self.session.execute(
            delete(InjuryRiskSnapshot).where(
                InjuryRiskSnapshot.athlete_id == athlete_id, InjuryRiskSnapshot.date == day
            )
        )
        await self.session.commit()
