"""
Health scoring.

Scores a user's recent daily metrics on four axes and blends them into an
overall 0-100 health score:

- activity: the latest day's steps, active minutes and workouts
- sleep: the last week's average sleep and how regular it is
- recovery: rest days, resting heart rate and training load over the last week
- consistency: how even the last week's daily activity is

Metrics are expected oldest first.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from totalfit.core.database.entities.health_metrics import HealthMetric

WEEK = 7
STEP_TARGET = 10000
ACTIVE_MINUTES_TARGET = 60
REST_DAY_ACTIVE_MINUTES = 30
ACTIVE_DAY_MINUTES = 20


class HealthScore(BaseModel):
    """Component and overall health scores, each 0-100."""

    date: Optional[dt.date] = None
    overall_score: int = 0
    activity_level: int = 0
    sleep_quality: int = 0
    recovery_score: int = 0
    consistency: int = 0


class HealthScoreInterpretation(BaseModel):
    label: str
    description: str
    color: str = Field(description="Display colour name")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation, 0 for no values."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return math.sqrt(sum((value - mean) ** 2 for value in values) / len(values))


def calculate_activity_level(metrics: Sequence[HealthMetric]) -> int:
    if not metrics:
        return 0
    latest = metrics[-1]
    step_score = min(latest.steps / STEP_TARGET * 100, 100)
    active_score = min(latest.active_minutes / ACTIVE_MINUTES_TARGET * 100, 100)
    workout_bonus = min(latest.workout_sessions * 10, 20)
    return min(round_half_up((step_score * 0.5 + active_score * 0.5 + workout_bonus) * 0.9), 100)


def _sleep_duration_score(avg_sleep: float) -> float:
    if 7 <= avg_sleep <= 9:
        return 100
    if 6 <= avg_sleep < 7:
        return 70 + (avg_sleep - 6) * 30
    if 9 < avg_sleep <= 10:
        return 70 + (10 - avg_sleep) * 30
    if 5 <= avg_sleep < 6:
        return 40 + (avg_sleep - 5) * 30
    if 10 < avg_sleep <= 11:
        return 40 + (11 - avg_sleep) * 30
    return 20


def calculate_sleep_quality(metrics: Sequence[HealthMetric]) -> int:
    """Sleep duration score for the last week plus a bonus for regular sleep."""
    if not metrics:
        return 0
    sleep = [m.sleep_hours or 0 for m in metrics[-WEEK:]]
    avg_sleep = sum(sleep) / len(sleep)
    consistency_bonus = max(0, 20 - standard_deviation(sleep) * 10)
    return round_half_up(min(_sleep_duration_score(avg_sleep) + consistency_bonus, 100))


def calculate_recovery_score(metrics: Sequence[HealthMetric]) -> int:
    """Scores a week of rest days, heart rate and load; 50 until a full week is logged."""
    if len(metrics) < WEEK:
        return 50
    week = metrics[-WEEK:]

    rest_days = sum(1 for m in week if m.active_minutes < REST_DAY_ACTIVE_MINUTES)
    rest_day_score = min(rest_days / 2 * 100, 100)

    avg_heart_rate = sum(m.heart_rate or 0 for m in week) / WEEK
    if avg_heart_rate > 80:
        heart_rate_score = 50
    elif avg_heart_rate > 70:
        heart_rate_score = 75
    else:
        heart_rate_score = 100

    avg_load = sum(m.active_minutes for m in week) / WEEK
    if avg_load > 90:
        load_score = 60
    elif avg_load < 30:
        load_score = 70
    else:
        load_score = 100

    return round_half_up(rest_day_score * 0.4 + heart_rate_score * 0.3 + load_score * 0.3)


def calculate_consistency(metrics: Sequence[HealthMetric]) -> int:
    if len(metrics) < WEEK:
        return 50
    week = metrics[-WEEK:]
    daily_scores = [(min(m.steps / 100, 100) + min(m.active_minutes, 100)) / 2 for m in week]
    consistency_score = max(0, 100 - standard_deviation(daily_scores) * 2)
    active_days = sum(1 for m in week if m.active_minutes > ACTIVE_DAY_MINUTES)
    return round_half_up(min(consistency_score + active_days / WEEK * 20, 100))


def calculate_health_score(metrics: Sequence[HealthMetric]) -> HealthScore:
    """Blend the component scores (activity 30%, sleep 25%, recovery 30%, consistency 15%)."""
    if not metrics:
        return HealthScore()

    activity_level = calculate_activity_level(metrics)
    sleep_quality = calculate_sleep_quality(metrics)
    recovery_score = calculate_recovery_score(metrics)
    consistency = calculate_consistency(metrics)

    return HealthScore(
        date=metrics[-1].date,
        overall_score=round_half_up(
            activity_level * 0.30 + sleep_quality * 0.25 + recovery_score * 0.30 + consistency * 0.15
        ),
        activity_level=activity_level,
        sleep_quality=sleep_quality,
        recovery_score=recovery_score,
        consistency=consistency,
    )


def get_health_score_interpretation(score: int) -> HealthScoreInterpretation:
    if score >= 80:
        return HealthScoreInterpretation(
            label="Excellent", description="You're doing great! Keep up the excellent work.", color="green"
        )
    if score >= 65:
        return HealthScoreInterpretation(
            label="Good",
            description="You're on the right track. Small improvements can make a big difference.",
            color="blue",
        )
    if score >= 50:
        return HealthScoreInterpretation(
            label="Fair",
            description="There's room for improvement. Focus on consistency and recovery.",
            color="yellow",
        )
    return HealthScoreInterpretation(
        label="Needs Attention",
        description="Your health metrics need attention. Consider consulting a healthcare professional.",
        color="red",
    )
