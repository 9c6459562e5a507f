"""
Date rendering for API responses.

Dates go out as `D-M-YYYY` with no zero padding (`2000-01-01` -> `1-1-2000`).
"""

from __future__ import annotations

from datetime import date
from typing import Any


def format_date(value: date | None) -> str | None:
    if value is None:
        return None
    return f"{value.day}-{value.month}-{value.year}"


def format_dates(row: dict[str, Any], *fields: str) -> dict[str, Any]:
    """
    Return a copy of `row` with the given date fields formatted.
    Fields missing from the row are left alone.
    """
    out = dict(row)
    for field in fields:
        if field in out:
            out[field] = format_date(out[field])
    return out
