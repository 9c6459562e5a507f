"""
Camp persistence (raw SQL).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int, sql_for_partial_update

logger = logging.getLogger(__name__)


async def create(data: dict[str, Any]) -> dict[str, Any]:
    """
    Create a camp from { location, city, country }.

    Returns { id, location, city, country }.
    Raises BadRequestError when the same location/city/country already exists.
    """
    duplicate = await db.fetch_one(
        """
        SELECT id
        FROM camps
        WHERE location = $1 AND city = $2 AND country = $3
        """,
        data["location"],
        data["city"],
        data["country"],
    )
    if duplicate is not None:
        raise BadRequestError("Duplicate camp.")

    try:
        row = await db.fetch_one(
            """
            INSERT INTO camps (location, city, country)
            VALUES ($1, $2, $3)
            RETURNING id, location, city, country
            """,
            data["location"],
            data["city"],
            data["country"],
        )
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError("Duplicate camp.") from exc

    if row is None:
        raise RuntimeError("Failed to create camp.")
    logger.info("camp_created id=%s", row["id"])
    return row


async def find_all() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, location, city, country
        FROM camps
        ORDER BY id
        """
    )


async def get(camp_id: int) -> dict[str, Any]:
    """
    Returns { id, location, city, country, families } where families is
    the list of family ids housed at the camp.
    """
    if not is_pg_int(camp_id):
        raise NotFoundError(f"No camp with ID {camp_id}")

    camp = await db.fetch_one(
        """
        SELECT id, location, city, country
        FROM camps
        WHERE id = $1
        """,
        camp_id,
    )
    if camp is None:
        raise NotFoundError(f"No camp with ID {camp_id}")

    rows = await db.fetch_all(
        """
        SELECT id
        FROM families
        WHERE camp_id = $1
        ORDER BY id
        """,
        camp_id,
    )
    camp["families"] = [int(r["id"]) for r in rows]
    return camp


async def update(camp_id: int, data: dict[str, Any]) -> dict[str, Any]:
    set_cols, values = sql_for_partial_update(data)
    if not is_pg_int(camp_id):
        raise NotFoundError(f"No camp with ID {camp_id}")

    id_idx = f"${len(values) + 1}"

    try:
        row = await db.fetch_one(
            f"""
            UPDATE camps
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING id, location, city, country
            """,
            *values,
            camp_id,
        )
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError("Duplicate camp.") from exc

    if row is None:
        raise NotFoundError(f"No camp with ID {camp_id}")
    return row


async def remove(camp_id: int) -> None:
    if not is_pg_int(camp_id):
        raise NotFoundError(f"No camp with ID {camp_id}")

    try:
        row = await db.fetch_one(
            """
            DELETE FROM camps
            WHERE id = $1
            RETURNING id
            """,
            camp_id,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise BadRequestError(f"Camp {camp_id} still has families.") from exc

    if row is None:
        raise NotFoundError(f"No camp with ID {camp_id}")
    logger.info("camp_removed id=%s", camp_id)
