"""
Camp API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CampNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    location: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)


class CampUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    location: str | None = Field(default=None, min_length=1, max_length=100)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    country: str | None = Field(default=None, min_length=1, max_length=100)
