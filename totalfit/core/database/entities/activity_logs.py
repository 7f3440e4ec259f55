"""
Activity log entity model.

Each row is one workout session or sports appearance by an athlete. The
structured parts (exercise list, injuries, performance metrics) are stored
as JSON documents.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from sqlmodel import JSON, Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime, new_id

ACTIVITY_TYPES = ("workout", "sports")


class ActivityLogBase(Base):
    """Base fields for activity log entity."""

    activity_type: str = Field(max_length=16, description="'workout' or 'sports'")
    date: dt.date = Field(index=True)
    start_time: Optional[str] = Field(default=None, max_length=16)
    duration: int = Field(default=0, ge=0, description="Duration in minutes")

    # Workout details
    workout_type: Optional[str] = Field(default=None, max_length=64)
    exercises: List[Dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    equipment_used: List[str] = Field(default_factory=list, sa_type=JSON)

    # Sports details
    sport: Optional[str] = Field(default=None, max_length=64)
    position: Optional[str] = Field(default=None, max_length=64)
    match_type: Optional[str] = Field(default=None, max_length=32)
    location: Optional[str] = Field(default=None, max_length=256)
    opponent: Optional[str] = Field(default=None, max_length=256)
    result: Optional[str] = Field(default=None, max_length=64)
    minutes_played: Optional[int] = Field(default=None, ge=0)
    intensity_level: Optional[str] = Field(default=None, max_length=16)
    performance_metrics: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    # Injury and conditions
    injuries: List[Dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    medical_attention: Optional[str] = Field(default=None)
    surface_type: Optional[str] = Field(default=None, max_length=64)
    weather_conditions: Optional[str] = Field(default=None, max_length=64)

    # Physiology and recovery
    heart_rate_avg: Optional[int] = Field(default=None)
    heart_rate_max: Optional[int] = Field(default=None)
    calories_burned: Optional[int] = Field(default=None)
    affected_body_parts: List[str] = Field(default_factory=list, sa_type=JSON)
    recovery_status: str = Field(default="normal", max_length=32)
    fatigue_level: Optional[int] = Field(default=None, ge=0, le=10)
    notes: Optional[str] = Field(default=None)
    coach_feedback: Optional[str] = Field(default=None)


class ActivityLog(ActivityLogBase, table=True):
    """Logged workout or sports activity.

    Table: activity_logs
    """

    __tablename__ = "activity_logs"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    athlete_id: str = Field(index=True, max_length=64)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"ActivityLog(id={self.id}, athlete_id={self.athlete_id}, type={self.activity_type}, date={self.date})"
