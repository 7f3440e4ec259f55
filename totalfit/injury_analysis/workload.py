"""Per-session workload model.

A session's workload for a body part starts from a base of 10 points and is
scaled by intensity, duration, recovery state, resistance volume and, for
sports, the kind of match.
"""

from __future__ import annotations

import math
from typing import Optional

from .constants import (
    DAILY_RECOVERY_POINTS,
    INTENSITY_MULTIPLIERS,
    MATCH_TYPE_MULTIPLIERS,
    RECOVERY_MODIFIERS,
)

BASE_WORKLOAD = 10.0


def calculate_body_part_workload(
    intensity: Optional[str] = "moderate",
    duration: float = 60,
    recovery_status: Optional[str] = "normal",
    sets: Optional[int] = 0,
    reps: Optional[int] = 0,
    weight: Optional[float] = 0,
    sport: Optional[str] = None,
    match_type: Optional[str] = None,
) -> float:
    """Workload points one session puts on a body part.

    Unknown intensities, recovery states and match types count as 1.0.
    Duration is capped at three hours.

    Returns:
        The workload rounded to one decimal place
    """
    workload = BASE_WORKLOAD
    workload *= INTENSITY_MULTIPLIERS.get(intensity or "moderate", 1.0)

    duration_factor = min((duration or 0) / 60, 3)
    workload *= 0.3 + duration_factor * 0.7

    workload *= RECOVERY_MODIFIERS.get(recovery_status or "normal", 1.0)

    if sets and reps and sets > 0 and reps > 0:
        workload += (sets * reps * math.sqrt(weight or 1)) / 10

    if sport and match_type:
        workload *= MATCH_TYPE_MULTIPLIERS.get(match_type, 1.0)

    return round(workload, 1)


def calculate_recovery_rate(days_since_last_activity: int, base_recovery_rate: float = DAILY_RECOVERY_POINTS) -> float:
    """Recovery percentage after ``days_since_last_activity`` rest days, capped at 100."""
    return min(days_since_last_activity * base_recovery_rate, 100)
