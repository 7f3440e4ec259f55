"""
Athlete I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AthleteRead(BaseModel):
    """Schema for reading an athlete from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = Field(default=None, description="Owning coach user ID")
    name: str
    email: Optional[str] = None
    age: Optional[int] = None
    position: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    primary_sport: Optional[str] = None
    team: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class AthleteCreate(BaseModel):
    """Schema for creating an athlete via the API."""

    user_id: Optional[str] = Field(default=None, description="Owning coach user ID")
    name: str = Field(min_length=1)
    email: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    position: Optional[str] = Field(default=None, description="Playing position, e.g. 'Pitcher'")
    height: Optional[str] = None
    weight: Optional[str] = None
    primary_sport: Optional[str] = None
    team: Optional[str] = None
    status: str = Field(default="active", description="active, recovering or injured")


class AthleteUpdate(BaseModel):
    """Schema for a partial athlete update; ownership and timestamps cannot be changed."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    position: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    primary_sport: Optional[str] = None
    team: Optional[str] = None
    status: Optional[str] = None
