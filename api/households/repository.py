"""
Household membership persistence (raw SQL).

A household row links one person to one family. A person belongs to at most
one family; `create` checks this inside a transaction and the schema backs it
with a unique index on `household.person_id`.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int

logger = logging.getLogger(__name__)


async def create(family_id: int, person_id: int) -> dict[str, Any]:
    """
    Add a person to a family.

    Returns { family_id, person_id }.
    Raises BadRequestError when the person already has a family or when
    either id does not exist.
    """
    if not (is_pg_int(family_id) and is_pg_int(person_id)):
        raise BadRequestError("Duplicate/Not Present")

    async with db.transaction() as conn:
        existing = await db.fetch_one(
            """
            SELECT family_id
            FROM household
            WHERE person_id = $1
            """,
            person_id,
            conn=conn,
        )
        if existing is not None:
            raise BadRequestError("Already in household.")

        try:
            row = await db.fetch_one(
                """
                INSERT INTO household (family_id, person_id)
                VALUES ($1, $2)
                RETURNING family_id, person_id
                """,
                family_id,
                person_id,
                conn=conn,
            )
        except asyncpg.IntegrityConstraintViolationError as exc:
            raise BadRequestError("Duplicate/Not Present") from exc

    if row is None:
        raise RuntimeError("Failed to create household.")
    logger.info("household_created family_id=%s person_id=%s", family_id, person_id)
    return row


async def all_unassigned() -> list[dict[str, Any]]:
    """
    People who are not in any household yet.
    """
    return await db.fetch_all(
        """
        SELECT p.id, p.first_name, p.last_name, p.dob, p.sex, p.nid
        FROM people p
        WHERE NOT EXISTS (SELECT 1 FROM household h WHERE h.person_id = p.id)
        ORDER BY p.id
        """
    )


async def get(family_id: int) -> list[dict[str, Any]]:
    """
    Household rows for a family: [{ family_id, person_id }, ...].

    Raises NotFoundError when the family does not exist; a family with no
    members yields an empty list.
    """
    if not is_pg_int(family_id):
        raise NotFoundError(f"No family with ID {family_id}")

    family = await db.fetch_one(
        """
        SELECT id
        FROM families
        WHERE id = $1
        """,
        family_id,
    )
    if family is None:
        raise NotFoundError(f"No family with ID {family_id}")

    return await db.fetch_all(
        """
        SELECT family_id, person_id
        FROM household
        WHERE family_id = $1
        ORDER BY person_id
        """,
        family_id,
    )
