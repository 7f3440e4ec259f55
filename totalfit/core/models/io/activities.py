"""
Activity log I/O models for API requests and responses.

An activity is either a gym workout (a list of exercises) or a sports
session (sport, position, match type, minutes played).
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .injuries import BodyPartWorkloadRead, InjuryRiskSnapshotRead


class ExerciseEntry(BaseModel):
    """One exercise within a workout."""

    model_config = ConfigDict(extra="allow")

    exercise: str = Field(description="Exercise name, e.g. 'Bench Press'")
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0)
    intensity: Optional[str] = Field(default=None, description="Overrides the activity intensity for this exercise")


class ActivityFields(BaseModel):
    """Fields shared by activity create and update requests."""

    date: Optional[dt.date] = None
    start_time: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0, description="Duration in minutes")
    workout_type: Optional[str] = None
    exercises: Optional[List[ExerciseEntry]] = None
    equipment_used: Optional[List[str]] = None
    sport: Optional[str] = None
    position: Optional[str] = None
    match_type: Optional[str] = None
    location: Optional[str] = None
    opponent: Optional[str] = None
    result: Optional[str] = None
    minutes_played: Optional[int] = Field(default=None, ge=0)
    intensity_level: Optional[str] = None
    performance_metrics: Optional[Dict[str, Any]] = None
    injuries: Optional[List[Dict[str, Any]]] = None
    medical_attention: Optional[str] = None
    surface_type: Optional[str] = None
    weather_conditions: Optional[str] = None
    heart_rate_avg: Optional[int] = None
    heart_rate_max: Optional[int] = None
    calories_burned: Optional[int] = None
    affected_body_parts: Optional[List[str]] = Field(
        default=None, description="Detected from the activity when omitted"
    )
    recovery_status: Optional[str] = None
    fatigue_level: Optional[int] = Field(default=None, ge=0, le=10)
    notes: Optional[str] = None
    coach_feedback: Optional[str] = None


class ActivityLogCreate(ActivityFields):
    """Schema for logging an activity; ``athlete_id`` and ``activity_type`` are required."""

    athlete_id: Optional[str] = None
    activity_type: Optional[str] = Field(default=None, description="'workout' or 'sports'")


class ActivityLogUpdate(ActivityFields):
    """Schema for a partial activity update."""

    model_config = ConfigDict(extra="ignore")

    activity_type: Optional[str] = None


class ActivityLogRead(BaseModel):
    """Schema for reading an activity from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    athlete_id: str
    activity_type: str
    date: dt.date
    start_time: Optional[str] = None
    duration: int
    workout_type: Optional[str] = None
    exercises: List[Dict[str, Any]] = Field(default_factory=list)
    equipment_used: List[str] = Field(default_factory=list)
    sport: Optional[str] = None
    position: Optional[str] = None
    match_type: Optional[str] = None
    location: Optional[str] = None
    opponent: Optional[str] = None
    result: Optional[str] = None
    minutes_played: Optional[int] = None
    intensity_level: Optional[str] = None
    performance_metrics: Dict[str, Any] = Field(default_factory=dict)
    injuries: List[Dict[str, Any]] = Field(default_factory=list)
    medical_attention: Optional[str] = None
    surface_type: Optional[str] = None
    weather_conditions: Optional[str] = None
    heart_rate_avg: Optional[int] = None
    heart_rate_max: Optional[int] = None
    calories_burned: Optional[int] = None
    affected_body_parts: List[str] = Field(default_factory=list)
    recovery_status: str
    fatigue_level: Optional[int] = None
    notes: Optional[str] = None
    coach_feedback: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime


class ActivityLogResult(BaseModel):
    """Outcome of logging an activity."""

    activity: ActivityLogRead
    workload_updates: List[BodyPartWorkloadRead]
    injury_risk: Optional[InjuryRiskSnapshotRead] = None


class ActivityUpdateResult(BaseModel):
    """Outcome of editing an activity."""

    activity: ActivityLogRead
    injury_risk: Optional[InjuryRiskSnapshotRead] = None
