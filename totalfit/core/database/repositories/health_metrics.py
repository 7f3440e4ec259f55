"""
Health metric repository.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.health_metrics import HealthMetric
from .base import AsyncBaseRepository


class HealthMetricRepository(AsyncBaseRepository[HealthMetric]):
    """Repository for health metric data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HealthMetric)

    async def list_since(self, user_id: str, start: date) -> List[HealthMetric]:
        """A user's metrics dated on or after ``start``, oldest first."""
        stmt = (
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id, HealthMetric.date >= start)
            .order_by(HealthMetric.date.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(self, user_id: str, day: date, values: Dict[str, Any]) -> HealthMetric:
        """Insert or overwrite the metrics for ``(user_id, day)``."""
        stmt = select(HealthMetric).where(HealthMetric.user_id == user_id, HealthMetric.date == day)
        result = await self.session.execute(stmt)
        metric = result.scalar_one_or_none()
        if metric is None:
            metric = HealthMetric.model_validate({**values, "user_id": user_id, "date": day})
            return await self.create(metric)
        return await self.update_fields(metric, values)
