"""
Health metric I/O models for API requests and responses.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from totalfit.health.scoring import HealthScore, HealthScoreInterpretation
from totalfit.health.wellness_risk import RiskForecast, WellnessRisk


class HealthMetricCreate(BaseModel):
    """Schema for logging a day's wellness metrics; a second post for the same day overwrites it."""

    date: Optional[dt.date] = Field(default=None, description="Defaults to today")
    steps: int = Field(default=0, ge=0)
    active_minutes: int = Field(default=0, ge=0)
    heart_rate: Optional[int] = Field(default=None, ge=0, description="Average resting heart rate (bpm)")
    sleep_hours: Optional[float] = Field(default=None, ge=0, le=24)
    calories_burned: int = Field(default=0, ge=0)
    workout_sessions: int = Field(default=0, ge=0)


class HealthMetricRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    date: dt.date
    steps: int
    active_minutes: int
    heart_rate: Optional[int] = None
    sleep_hours: Optional[float] = None
    calories_burned: int
    workout_sessions: int


class HealthScoreResponse(BaseModel):
    score: HealthScore
    interpretation: HealthScoreInterpretation


class WellnessRiskResponse(BaseModel):
    risk: WellnessRisk
    forecast: RiskForecast
