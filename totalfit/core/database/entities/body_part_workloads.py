"""
Body-part workload entity model.

One row per athlete, body part and calendar day holding that day's workload
score, rolling 7/30-day loads and the derived injury risk.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime


class BodyPartWorkloadBase(Base):
    """Base fields for body-part workload entity."""

    body_part: str = Field(max_length=32, index=True)
    date: dt.date = Field(index=True)
    workload_score: float = Field(default=0.0)
    cumulative_7day: float = Field(default=0.0)
    cumulative_30day: float = Field(default=0.0)
    injury_risk_percentage: int = Field(default=0, ge=0, le=100)
    risk_level: str = Field(default="minimal", max_length=16)
    recovery_rate: float = Field(default=100.0)
    days_since_last_activity: int = Field(default=0)
    activity_count: int = Field(default=0)
    total_duration: int = Field(default=0)
    avg_intensity: float = Field(default=0.0)


class BodyPartWorkload(BodyPartWorkloadBase, table=True):
    """Daily workload and injury risk for one body part.

    Table: body_part_workload
    """

    __tablename__ = "body_part_workload"
    __table_args__ = (
        UniqueConstraint("athlete_id", "body_part", "date", name="uq_body_part_workload_athlete_part_date"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(index=True, max_length=64)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return (
            f"BodyPartWorkload(athlete_id={self.athlete_id}, body_part={self.body_part}, "
            f"date={self.date}, risk={self.injury_risk_percentage})"
        )
