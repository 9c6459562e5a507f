"""
People API schemas.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PersonNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    dob: date
    sex: str = Field(..., min_length=1, max_length=10)
    nid: str | None = Field(default=None, max_length=50)


class PersonUpdate(BaseModel):
    """
    Only fields present in the body are written. `nid` may be sent as null
    to clear it; the other fields cannot be null.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(default=None, min_length=1, max_length=50)
    last_name: str | None = Field(default=None, min_length=1, max_length=50)
    dob: date | None = None
    sex: str | None = Field(default=None, min_length=1, max_length=10)
    nid: str | None = Field(default=None, max_length=50)

    @field_validator("first_name", "last_name", "dob", "sex")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value
