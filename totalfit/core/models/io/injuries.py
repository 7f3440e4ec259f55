"""
Injury-analysis I/O models for API requests and responses.

Covers the per-body-part workload rows, daily athlete risk snapshots, the
risk overview returned to coaches and the athlete's injury history.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Recommendation(BaseModel):
    """Coaching advice item."""

    model_config = ConfigDict(extra="allow")

    priority: str = Field(description="high, medium or low")
    title: str
    description: str


class BodyPartWorkloadRead(BaseModel):
    """Schema for reading one day's workload for a body part."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    athlete_id: str
    body_part: str
    date: dt.date
    workload_score: float
    cumulative_7day: float
    cumulative_30day: float
    injury_risk_percentage: int
    risk_level: str
    recovery_rate: float
    days_since_last_activity: int
    activity_count: int
    total_duration: int
    avg_intensity: float


class InjuryRiskSnapshotRead(BaseModel):
    """Schema for reading an athlete's daily risk snapshot."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    athlete_id: str
    date: dt.date
    overall_risk_score: int
    risk_level: str
    training_load_score: float
    fatigue_index: float
    recovery_score: float
    high_risk_body_parts: List[str] = Field(default_factory=list)
    medium_risk_body_parts: List[str] = Field(default_factory=list)
    recommendations: List[Dict[str, Any]] = Field(default_factory=list)


class BodyPartRisk(BaseModel):
    """Coach-facing risk summary for one body part."""

    part: str
    risk: str = Field(description="Risk level")
    percentage: int
    message: str
    recommendations: List[Recommendation] = Field(default_factory=list)


class InjuryRiskOverview(BaseModel):
    """Body-part risks, snapshot and raw workload rows for one day."""

    body_part_risks: List[BodyPartRisk]
    overall_risk: Optional[InjuryRiskSnapshotRead] = None
    workloads: List[BodyPartWorkloadRead]


class InjuryHistoryRead(BaseModel):
    """Schema for reading a recorded injury."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    athlete_id: str
    body_part: str
    injury_type: Optional[str] = None
    severity: Optional[str] = None
    mechanism: Optional[str] = None
    status: str
    date_occurred: Optional[dt.date] = None
    date_recovered: Optional[dt.date] = None
    activity_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime


class InjuryHistoryCreate(BaseModel):
    """Schema for recording an injury; active injuries raise the body part's risk."""

    body_part: str
    injury_type: Optional[str] = None
    severity: Optional[str] = None
    mechanism: Optional[str] = None
    status: str = Field(default="active", description="active, recovering or recovered")
    date_occurred: Optional[dt.date] = None
    date_recovered: Optional[dt.date] = None
    activity_id: Optional[str] = None
    notes: Optional[str] = None


class InjuryHistoryUpdate(BaseModel):
    """Schema for a partial injury update."""

    model_config = ConfigDict(extra="ignore")

    body_part: Optional[str] = None
    injury_type: Optional[str] = None
    severity: Optional[str] = None
    mechanism: Optional[str] = None
    status: Optional[str] = None
    date_occurred: Optional[dt.date] = None
    date_recovered: Optional[dt.date] = None
    notes: Optional[str] = None
