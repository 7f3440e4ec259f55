"""
User I/O models for API requests and responses.

The sign-in flow posts Google profile data in camelCase, matching the web
client's payloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserUpsert(BaseModel):
    """Schema for creating or refreshing a user from a Google sign-in."""

    model_config = ConfigDict(populate_by_name=True)

    google_id: Optional[str] = Field(default=None, alias="googleId")
    email: Optional[str] = None
    name: Optional[str] = None
    picture_url: Optional[str] = Field(default=None, alias="pictureUrl")
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")


class UserRead(BaseModel):
    """Schema for reading a user; OAuth tokens are never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    google_id: str
    email: str
    name: Optional[str] = None
    picture_url: Optional[str] = None
    last_sync_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class UserUpsertResponse(BaseModel):
    success: bool = True
    user: UserRead
