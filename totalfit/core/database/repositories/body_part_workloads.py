"""
Body-part workload repository.

Data access for the per-day workload rows, keyed by athlete, body part and date.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.body_part_workloads import BodyPartWorkload
from .base import AsyncBaseRepository, QueryBuilder


class BodyPartWorkloadRepository(AsyncBaseRepository[BodyPartWorkload]):
    """Repository for body-part workload data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BodyPartWorkload)

    async def get_for_day(self, athlete_id: str, body_part: str, day: date) -> Optional[BodyPartWorkload]:
        stmt = select(BodyPartWorkload).where(
            BodyPartWorkload.athlete_id == athlete_id,
            BodyPartWorkload.body_part == body_part,
            BodyPartWorkload.date == day,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def history_before(
        self, athlete_id: str, body_part: str, day: date, since: date
    ) -> List[BodyPartWorkload]:
        """Training rows (``activity_count > 0``) for one body part dated in ``[since, day)``, most recent first."""
        stmt = (
            select(BodyPartWorkload)
            .where(
                BodyPartWorkload.athlete_id == athlete_id,
                BodyPartWorkload.body_part == body_part,
                BodyPartWorkload.date >= since,
                BodyPartWorkload.date < day,
                BodyPartWorkload.activity_count > 0,
            )
            .order_by(BodyPartWorkload.date.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def latest_training_before(
        self, athlete_id: str, body_part: str, day: date
    ) -> Optional[BodyPartWorkload]:
        """The most recent training row for one body part dated before ``day``."""
        stmt = (
            select(BodyPartWorkload)
            .where(
                BodyPartWorkload.athlete_id == athlete_id,
                BodyPartWorkload.body_part == body_part,
                BodyPartWorkload.date < day,
                BodyPartWorkload.activity_count > 0,
            )
            .order_by(BodyPartWorkload.date.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_date(self, athlete_id: str, day: date) -> List[BodyPartWorkload]:
        stmt = (
            select(BodyPartWorkload)
            .where(BodyPartWorkload.athlete_id == athlete_id, BodyPartWorkload.date == day)
            .order_by(BodyPartWorkload.injury_risk_percentage.desc(), BodyPartWorkload.body_part)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_athlete(self, athlete_id: str, limit: Optional[int] = 100) -> List[BodyPartWorkload]:
        """An athlete's workload rows, most recent date first."""
        stmt = (
            select(BodyPartWorkload)
            .where(BodyPartWorkload.athlete_id == athlete_id)
            .order_by(BodyPartWorkload.date.desc(), BodyPartWorkload.body_part)
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def latest_per_body_part(self, athlete_id: str) -> List[BodyPartWorkload]:
        """The most recent row of each body part the athlete has a workload for."""
        rows = await self.list_for_athlete(athlete_id, limit=None)
        latest: Dict[str, BodyPartWorkload] = {}
        for row in rows:
            latest.setdefault(row.body_part, row)
        return list(latest.values())

    async def athlete_ids(self) -> List[str]:
        stmt = select(BodyPartWorkload.athlete_id).distinct()
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(self, athlete_id: str, body_part: str, day: date, values: Dict[str, Any]) -> BodyPartWorkload:
        """Insert or overwrite the row for ``(athlete_id, body_part, day)``."""
        row = await self.get_for_day(athlete_id, body_part, day)
        if row is None:
            row = BodyPartWorkload.model_validate(
                {**values, "athlete_id": athlete_id, "body_part": body_part, "date": day}
            )
            return await self.create(row)
        return await self.update_fields(row, values)

    async def delete_for_day(self, athlete_id: str, body_parts: Iterable[str], day: date) -> None:
        parts = list(body_parts)
        if not parts:
            return
        await self.session.execute(
            delete(BodyPartWorkload).where(
                BodyPartWorkload.athlete_id == athlete_id,
                BodyPartWorkload.body_part.in_(parts),
                BodyPartWorkload.date == day,
            )
        )
        await self.session.commit()
