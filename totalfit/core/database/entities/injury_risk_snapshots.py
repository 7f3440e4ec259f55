"""
Injury-risk snapshot entity model.

An athlete-level summary of the body-part risks for one day, including the
recommendations shown to the coach.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import JSON, Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime


class InjuryRiskSnapshotBase(Base):
    """Base fields for injury-risk snapshot entity."""

    date: dt.date = Field(index=True)
    overall_risk_score: int = Field(default=0, ge=0, le=100)
    risk_level: str = Field(default="minimal", max_length=16)
    training_load_score: float = Field(default=0.0)
    fatigue_index: float = Field(default=0.0)
    recovery_score: float = Field(default=100.0)
    high_risk_body_parts: List[str] = Field(default_factory=list, sa_type=JSON)
    medium_risk_body_parts: List[str] = Field(default_factory=list, sa_type=JSON)
    recommendations: List[Dict[str, Any]] = Field(default_factory=list, sa_type=JSON)


class InjuryRiskSnapshot(InjuryRiskSnapshotBase, table=True):
    """Daily athlete injury-risk summary.

    Table: injury_risk_snapshots
    """

    __tablename__ = "injury_risk_snapshots"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_injury_risk_snapshots_athlete_date"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(index=True, max_length=64)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"InjuryRiskSnapshot(athlete_id={self.athlete_id}, date={self.date}, score={self.overall_risk_score})"
