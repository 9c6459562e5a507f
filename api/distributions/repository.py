"""
Distribution persistence (raw SQL).

A distribution row enrolls one family in one donation campaign and records
whether the family has received its share.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int

logger = logging.getLogger(__name__)


async def create(*, donation_id: int, family_id: int) -> dict[str, Any]:
    """
    Returns { donation_id, family_id, receive } with receive = false.

    Raises BadRequestError when the pair already exists or either id is
    unknown.
    """
    if not (is_pg_int(donation_id) and is_pg_int(family_id)):
        raise BadRequestError("Duplicate/Not Present")

    try:
        row = await db.fetch_one(
            """
            INSERT INTO distributions (donation_id, family_id)
            VALUES ($1, $2)
            RETURNING donation_id, family_id, receive
            """,
            donation_id,
            family_id,
        )
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise BadRequestError("Duplicate/Not Present") from exc

    if row is None:
        raise RuntimeError("Failed to create distribution.")
    logger.info("distribution_created donation_id=%s family_id=%s", donation_id, family_id)
    return row


async def update(*, donation_id: int, family_id: int) -> dict[str, Any]:
    """
    Mark the family's share of the campaign as received.
    """
    if not (is_pg_int(donation_id) and is_pg_int(family_id)):
        raise NotFoundError(
            f"No distribution with donation ID {donation_id} and family ID {family_id}"
        )

    row = await db.fetch_one(
        """
        UPDATE distributions
        SET receive = true
        WHERE donation_id = $1 AND family_id = $2
        RETURNING donation_id, family_id, receive
        """,
        donation_id,
        family_id,
    )
    if row is None:
        raise NotFoundError(
            f"No distribution with donation ID {donation_id} and family ID {family_id}"
        )
    return row


async def remove(*, family_id: int, donation_id: int) -> None:
    if not (is_pg_int(donation_id) and is_pg_int(family_id)):
        raise NotFoundError(
            f"No distribution with family ID {family_id} and donation ID {donation_id}"
        )

    row = await db.fetch_one(
        """
        DELETE FROM distributions
        WHERE donation_id = $1 AND family_id = $2
        RETURNING donation_id, family_id
        """,
        donation_id,
        family_id,
    )
    if row is None:
        raise NotFoundError(
            f"No distribution with family ID {family_id} and donation ID {donation_id}"
        )
    logger.info("distribution_removed donation_id=%s family_id=%s", donation_id, family_id)
