"""
Donation campaign persistence (raw SQL).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int, sql_for_partial_update

logger = logging.getLogger(__name__)

DONATION_COLUMNS = "id, start_date, end_date, target, description"


async def create(data: dict[str, Any]) -> dict[str, Any]:
    """
    Create a campaign from { start_date, end_date, target, description }.

    A campaign with the same dates and description counts as a duplicate.
    """
    duplicate = await db.fetch_one(
        """
        SELECT id
        FROM donations
        WHERE start_date = $1 AND end_date = $2 AND description = $3
        """,
        data["start_date"],
        data["end_date"],
        data["description"],
    )
    if duplicate is not None:
        raise BadRequestError("Duplicate donation.")

    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO donations (start_date, end_date, target, description)
            VALUES ($1, $2, $3, $4)
            RETURNING {DONATION_COLUMNS}
            """,
            data["start_date"],
            data["end_date"],
            data["target"],
            data["description"],
        )
    except asyncpg.CheckViolationError as exc:
        raise BadRequestError("end_date must not be before start_date") from exc

    if row is None:
        raise RuntimeError("Failed to create donation.")
    logger.info("donation_created id=%s", row["id"])
    return row


async def find_all() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {DONATION_COLUMNS}
        FROM donations
        ORDER BY id
        """
    )


async def get(donation_id: int) -> dict[str, Any]:
    """
    Returns the campaign plus `family`: [{id, receive}, ...] for every
    family enrolled in it.
    """
    if not is_pg_int(donation_id):
        raise NotFoundError(f"No donation with ID {donation_id}")

    donation = await db.fetch_one(
        f"""
        SELECT {DONATION_COLUMNS}
        FROM donations
        WHERE id = $1
        """,
        donation_id,
    )
    if donation is None:
        raise NotFoundError(f"No donation with ID {donation_id}")

    rows = await db.fetch_all(
        """
        SELECT family_id, receive
        FROM distributions
        WHERE donation_id = $1
        ORDER BY family_id
        """,
        donation_id,
    )
    donation["family"] = [{"id": int(r["family_id"]), "receive": bool(r["receive"])} for r in rows]
    return donation


async def update(donation_id: int, data: dict[str, Any]) -> dict[str, Any]:
    set_cols, values = sql_for_partial_update(data)
    if not is_pg_int(donation_id):
        raise NotFoundError(f"No donation with ID {donation_id}")

    id_idx = f"${len(values) + 1}"

    try:
        row = await db.fetch_one(
            f"""
            UPDATE donations
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {DONATION_COLUMNS}
            """,
            *values,
            donation_id,
        )
    except asyncpg.CheckViolationError as exc:
        raise BadRequestError("end_date must not be before start_date") from exc

    if row is None:
        raise NotFoundError(f"No donation with ID {donation_id}")
    return row


async def remove(donation_id: int) -> None:
    if not is_pg_int(donation_id):
        raise NotFoundError(f"No donation with ID {donation_id}")

    row = await db.fetch_one(
        """
        DELETE FROM donations
        WHERE id = $1
        RETURNING id
        """,
        donation_id,
    )
    if row is None:
        raise NotFoundError(f"No donation with ID {donation_id}")
    logger.info("donation_removed id=%s", donation_id)
