"""
Athlete entity model.

Athletes are managed by a coach (a ``User``) and are the subject of the
injury-analysis workload tracking.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime, new_id

ATHLETE_STATUSES = ("active", "recovering", "injured")


class AthleteBase(Base):
    """Base fields for athlete entity."""

    name: str = Field(max_length=256)
    email: Optional[str] = Field(default=None, max_length=320)
    age: Optional[int] = Field(default=None, ge=0)
    position: Optional[str] = Field(default=None, max_length=128, description="Playing position, e.g. 'Pitcher'")
    height: Optional[str] = Field(default=None, max_length=32)
    weight: Optional[str] = Field(default=None, max_length=32)
    primary_sport: Optional[str] = Field(default=None, max_length=128)
    team: Optional[str] = Field(default=None, max_length=256)
    status: str = Field(default="active", max_length=32, description="active, recovering or injured")


class Athlete(AthleteBase, table=True):
    """Athlete tracked by a coach.

    Table: athletes
    """

    __tablename__ = "athletes"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: Optional[str] = Field(default=None, index=True, max_length=128, description="Owning coach user ID")

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Athlete(id={self.id}, name={self.name}, status={self.status})"
