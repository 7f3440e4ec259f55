"""
Response envelope shared by the JSON API.

Successful responses wrap their payload as ``{"success": true, "data": ...}``;
errors are rendered by the exception handlers as
``{"success": false, "error": "..."}``.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Schema for a successful API response."""

    success: bool = True
    data: DataT
    message: Optional[str] = Field(default=None, description="Optional human-readable summary")


class ErrorResponse(BaseModel):
    """Schema for an error response."""

    success: bool = False
    error: str
