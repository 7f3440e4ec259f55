"""
Daily recovery job.

Rested body parts shed load day by day. The job takes each body part's most
recent workload row, decays its loads and intensity, credits a day of
recovery and writes the result as today's row. Snapshots of the athletes it
touched are refreshed afterwards.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from totalfit.core import clock
from totalfit.core.database.entities.body_part_workloads import BodyPartWorkload
from totalfit.core.logging_config import get_logger

from .athlete_service import AthleteService
from .constants import (
    CUMULATIVE_7DAY_DECAY,
    CUMULATIVE_30DAY_DECAY,
    DAILY_RECOVERY_POINTS,
    INTENSITY_DECAY,
    WORKLOAD_DECAY,
)
from .injury_risk import calculate_injury_risk_percentage, get_risk_level

logger = get_logger(__name__)


async def apply_daily_recovery(session: AsyncSession, today: Optional[date] = None) -> List[BodyPartWorkload]:
    """Decay every athlete's body-part loads up to ``today``.

    Body parts whose latest row is already dated today are left alone.

    Args:
        session: Database session
        today: Day to write recovery rows for, today by default

    Returns:
        The recovery rows written
    """
    day = today or clock.utc_today()
    service = AthleteService(session)
    updates: List[BodyPartWorkload] = []

    for athlete_id in await service.workloads.athlete_ids():
        touched = False
        for last in await service.workloads.latest_per_body_part(athlete_id):
            days_elapsed = (day - last.date).days
            if days_elapsed <= 0:
                continue

            workload_score = round(max(last.workload_score * WORKLOAD_DECAY, 0), 1)
            cumulative_7day = round(last.cumulative_7day * CUMULATIVE_7DAY_DECAY, 1)
            cumulative_30day = round(last.cumulative_30day * CUMULATIVE_30DAY_DECAY, 1)
            recovery_rate = min(last.recovery_rate + DAILY_RECOVERY_POINTS, 100)
            has_active_injury = await service.injuries.has_active_injury(athlete_id, last.body_part)

            risk = calculate_injury_risk_percentage(
                current_workload=workload_score,
                cumulative_7day=cumulative_7day,
                cumulative_30day=cumulative_30day,
                recovery_rate=recovery_rate,
                activity_count=last.activity_count,
                has_active_injury=has_active_injury,
            )

            row = await service.workloads.upsert(
                athlete_id,
                last.body_part,
                day,
                {
                    "workload_score": workload_score,
                    "cumulative_7day": cumulative_7day,
                    "cumulative_30day": cumulative_30day,
                    "injury_risk_percentage": risk,
                    "risk_level": get_risk_level(risk),
                    "recovery_rate": recovery_rate,
                    "days_since_last_activity": last.days_since_last_activity + days_elapsed,
                    "activity_count": 0,
                    "total_duration": 0,
                    "avg_intensity": round(last.avg_intensity * INTENSITY_DECAY, 2),
                },
            )
            updates.append(row)
            touched = True

        if touched:
            await service.calculate_athlete_injury_risk(athlete_id, day)

    logger.info(f"Daily recovery wrote {len(updates)} body-part rows for {day}")
    return updates
