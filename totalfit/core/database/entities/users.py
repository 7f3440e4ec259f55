"""
User entity model.

A user is a person who signed in with Google. The Google account ID doubles
as the primary key so repeat sign-ins update the same row.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from totalfit.core.clock import utc_now

from ..base import Base, UTCDateTime


class UserBase(Base):
    """Base fields for user entity."""

    google_id: str = Field(index=True, unique=True, max_length=128, description="Google account ID")
    email: str = Field(max_length=320, description="Primary Google account email")
    name: Optional[str] = Field(default=None, max_length=256)
    picture_url: Optional[str] = Field(default=None, description="Google profile picture URL")
    access_token: Optional[str] = Field(default=None, description="Latest Google OAuth2 access token")
    refresh_token: Optional[str] = Field(default=None, description="Google OAuth2 refresh token")
    last_sync_at: Optional[datetime] = Field(
        default=None, sa_type=UTCDateTime, description="Last sign-in or token refresh"
    )


class User(UserBase, table=True):
    """Signed-in TotalFit user.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=128)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=UTCDateTime, sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
