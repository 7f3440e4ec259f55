"""
Health metric entity model.

Manually logged daily wellness numbers for a user (steps, sleep, heart rate).
"""

import datetime as dt
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime


class HealthMetricBase(Base):
    """Base fields for health metric entity."""

    date: dt.date = Field(index=True)
    steps: int = Field(default=0, ge=0)
    active_minutes: int = Field(default=0, ge=0)
    heart_rate: Optional[int] = Field(default=None, ge=0, description="Average resting heart rate (bpm)")
    sleep_hours: Optional[float] = Field(default=None, ge=0)
    calories_burned: int = Field(default=0, ge=0)
    workout_sessions: int = Field(default=0, ge=0)


class HealthMetric(HealthMetricBase, table=True):
    """One day of wellness metrics for a user.

    Table: health_metrics
    """

    __tablename__ = "health_metrics"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_health_metrics_user_date"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, max_length=128)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )
