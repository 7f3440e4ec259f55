"""
Injury history entity model.

Records injuries per body part. An ``active`` injury raises the computed
risk for that body part until it is marked recovered.
"""

import datetime as dt
from typing import Optional

from sqlmodel import Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime, new_id

INJURY_STATUSES = ("active", "recovering", "recovered")


class InjuryHistoryBase(Base):
    """Base fields for injury history entity."""

    body_part: str = Field(max_length=32, index=True)
    injury_type: Optional[str] = Field(default=None, max_length=128)
    severity: Optional[str] = Field(default=None, max_length=32)
    mechanism: Optional[str] = Field(default=None, max_length=256)
    status: str = Field(default="active", max_length=16, description="active, recovering or recovered")
    date_occurred: Optional[dt.date] = Field(default=None)
    date_recovered: Optional[dt.date] = Field(default=None)
    activity_id: Optional[str] = Field(default=None, max_length=64, description="Activity during which it occurred")
    notes: Optional[str] = Field(default=None)


class InjuryHistory(InjuryHistoryBase, table=True):
    """Injury suffered by an athlete.

    Table: injury_history
    """

    __tablename__ = "injury_history"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    athlete_id: str = Field(index=True, max_length=64)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"InjuryHistory(athlete_id={self.athlete_id}, body_part={self.body_part}, status={self.status})"
