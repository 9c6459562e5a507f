"""
Family API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.sql import PG_INT_MAX


class FamilyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    camp_id: int = Field(..., ge=1, le=PG_INT_MAX)
    # person id of the head of family; 0 until one is assigned
    head: int = Field(default=0, ge=0, le=PG_INT_MAX)


class FamilyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    camp_id: int | None = Field(default=None, ge=1, le=PG_INT_MAX)
    head: int | None = Field(default=None, ge=0, le=PG_INT_MAX)
