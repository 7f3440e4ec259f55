"""
Third-party proxy I/O models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClarifaiRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base64_image: Optional[str] = Field(default=None, alias="base64Image", description="Base64-encoded image bytes")


class FoodConcept(BaseModel):
    """A food label recognised in an image."""

    name: str
    value: float = Field(description="Model confidence, 0-1")
