"""
Google sign-in I/O models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenExchangeRequest(BaseModel):
    code: Optional[str] = Field(default=None, description="Authorization code from the Google redirect")


class RefreshTokenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")


class RevokeTokenRequest(BaseModel):
    token: Optional[str] = None


class RefreshTokenResponse(BaseModel):
    """Fields of a refreshed Google access token."""

    access_token: str
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
