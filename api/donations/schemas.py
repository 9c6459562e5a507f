"""
Donation API schemas.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.sql import PG_INT_MAX


def _check_date_order(start_date: date | None, end_date: date | None) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValueError("end_date must not be before start_date")


class DonationNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_date: date
    end_date: date
    target: int = Field(..., ge=0, le=PG_INT_MAX)
    description: str = Field(..., min_length=1, max_length=500)

    @model_validator(mode="after")
    def _check_dates(self) -> "DonationNew":
        _check_date_order(self.start_date, self.end_date)
        return self


class DonationUpdate(BaseModel):
    """
    A single date is checked against the stored row by the database.
    """

    model_config = ConfigDict(extra="forbid")

    start_date: date | None = None
    end_date: date | None = None
    target: int | None = Field(default=None, ge=0, le=PG_INT_MAX)
    description: str | None = Field(default=None, min_length=1, max_length=500)

    @model_validator(mode="after")
    def _check_dates(self) -> "DonationUpdate":
        _check_date_order(self.start_date, self.end_date)
        return self
