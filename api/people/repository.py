"""
People persistence (raw SQL).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int, sql_for_partial_update

logger = logging.getLogger(__name__)

PERSON_COLUMNS = "id, first_name, last_name, dob, sex, nid"


async def create(data: dict[str, Any]) -> dict[str, Any]:
    """
    Create a person from { first_name, last_name, dob, sex, nid }.

    Raises BadRequestError when someone with the same first name, last name
    and date of birth is already registered.
    """
    duplicate = await db.fetch_one(
        """
        SELECT id
        FROM people
        WHERE first_name = $1 AND last_name = $2 AND dob = $3
        """,
        data["first_name"],
        data["last_name"],
        data["dob"],
    )
    if duplicate is not None:
        raise BadRequestError("Duplicate person.")

    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO people (first_name, last_name, dob, sex, nid)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {PERSON_COLUMNS}
            """,
            data["first_name"],
            data["last_name"],
            data["dob"],
            data["sex"],
            data.get("nid"),
        )
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError("Duplicate person.") from exc

    if row is None:
        raise RuntimeError("Failed to create person.")
    logger.info("person_created id=%s", row["id"])
    return row


async def find_all() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {PERSON_COLUMNS}
        FROM people
        ORDER BY id
        """
    )


async def get(person_id: int) -> dict[str, Any]:
    """
    Returns the person plus `family_member`: ids of the other people in the
    same family (empty when the person has no family yet).
    """
    if not is_pg_int(person_id):
        raise NotFoundError(f"No person with ID {person_id}")

    person = await db.fetch_one(
        f"""
        SELECT {PERSON_COLUMNS}
        FROM people
        WHERE id = $1
        """,
        person_id,
    )
    if person is None:
        raise NotFoundError(f"No person with ID {person_id}")

    rows = await db.fetch_all(
        """
        SELECT person_id
        FROM household
        WHERE family_id = (SELECT family_id FROM household WHERE person_id = $1)
          AND person_id <> $1
        ORDER BY person_id
        """,
        person_id,
    )
    person["family_member"] = [int(r["person_id"]) for r in rows]
    return person


async def update(person_id: int, data: dict[str, Any]) -> dict[str, Any]:
    set_cols, values = sql_for_partial_update(data)
    if not is_pg_int(person_id):
        raise NotFoundError(f"No person with ID {person_id}")

    id_idx = f"${len(values) + 1}"

    try:
        row = await db.fetch_one(
            f"""
            UPDATE people
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {PERSON_COLUMNS}
            """,
            *values,
            person_id,
        )
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError("Duplicate person.") from exc

    if row is None:
        raise NotFoundError(f"No person with ID {person_id}")
    return row


async def remove(person_id: int) -> None:
    if not is_pg_int(person_id):
        raise NotFoundError(f"No person with ID {person_id}")

    row = await db.fetch_one(
        """
        DELETE FROM people
        WHERE id = $1
        RETURNING id
        """,
        person_id,
    )
    if row is None:
        raise NotFoundError(f"No person with ID {person_id}")
    logger.info("person_removed id=%s", person_id)
