"""
Family persistence (raw SQL).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.dates import format_dates
from core.errors import BadRequestError, NotFoundError
from core.sql import is_pg_int, sql_for_partial_update

logger = logging.getLogger(__name__)


async def create(data: dict[str, Any]) -> dict[str, Any]:
    """
    Create a family from { camp_id, head }.

    `head` is a person id, 0 while the family has no head yet.
    Raises BadRequestError when camp_id does not exist.
    """
    try:
        row = await db.fetch_one(
            """
            INSERT INTO families (camp_id, head)
            VALUES ($1, $2)
            RETURNING id, camp_id, head
            """,
            data["camp_id"],
            data.get("head", 0),
        )
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise BadRequestError(f"No camp with ID {data['camp_id']}") from exc

    if row is None:
        raise RuntimeError("Failed to create family.")
    logger.info("family_created id=%s camp_id=%s", row["id"], row["camp_id"])
    return row


async def find_all() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, camp_id, head
        FROM families
        ORDER BY id
        """
    )


async def get(family_id: int) -> dict[str, Any]:
    """
    Returns { id, camp, members, donations }:

    - camp: { location, city, country }
    - members: people in the family, each with `head` ("True"/"False") and
      `dob` rendered as D-M-YYYY
    - donations: [{ id, receive }, ...] for every campaign the family is
      enrolled in

    All reads share one read-only snapshot.
    """
    if not is_pg_int(family_id):
        raise NotFoundError(f"No family with ID {family_id}")

    async with db.transaction(isolation="repeatable_read", readonly=True) as conn:
        family = await db.fetch_one(
            """
            SELECT id, camp_id, head
            FROM families
            WHERE id = $1
            """,
            family_id,
            conn=conn,
        )
        if family is None:
            raise NotFoundError(f"No family with ID {family_id}")

        camp = await db.fetch_one(
            """
            SELECT location, city, country
            FROM camps
            WHERE id = $1
            """,
            family["camp_id"],
            conn=conn,
        )

        people = await db.fetch_all(
            """
            SELECT p.id, p.first_name, p.last_name, p.dob, p.sex, p.nid
            FROM household h
            JOIN people p ON h.person_id = p.id
            WHERE h.family_id = $1
            ORDER BY p.id
            """,
            family_id,
            conn=conn,
        )

        enrolled = await db.fetch_all(
            """
            SELECT donation_id, receive
            FROM distributions
            WHERE family_id = $1
            ORDER BY donation_id
            """,
            family_id,
            conn=conn,
        )

    members = []
    for person in people:
        member = format_dates(person, "dob")
        member["head"] = "True" if person["id"] == family["head"] else "False"
        members.append(member)

    donations = [{"id": int(r["donation_id"]), "receive": bool(r["receive"])} for r in enrolled]

    return {"id": family["id"], "camp": camp, "members": members, "donations": donations}


async def update(family_id: int, data: dict[str, Any]) -> dict[str, Any]:
    set_cols, values = sql_for_partial_update(data)
    if not is_pg_int(family_id):
        raise NotFoundError(f"No family with ID {family_id}")

    id_idx = f"${len(values) + 1}"

    try:
        row = await db.fetch_one(
            f"""
            UPDATE families
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING id, camp_id, head
            """,
            *values,
            family_id,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise BadRequestError(f"No camp with ID {data.get('camp_id')}") from exc

    if row is None:
        raise NotFoundError(f"No family with ID {family_id}")
    return row


async def remove(family_id: int) -> None:
    if not is_pg_int(family_id):
        raise NotFoundError(f"No family with ID {family_id}")

    row = await db.fetch_one(
        """
        DELETE FROM families
        WHERE id = $1
        RETURNING id
        """,
        family_id,
    )
    if row is None:
        raise NotFoundError(f"No family with ID {family_id}")
    logger.info("family_removed id=%s", family_id)


async def get_all_new_donations(family_id: int) -> list[dict[str, Any]]:
    """
    Campaigns the family is not enrolled in yet.
    """
    if not is_pg_int(family_id):
        raise NotFoundError(f"No family with ID {family_id}")

    return await db.fetch_all(
        """
        SELECT d.id, d.start_date, d.end_date, d.target, d.description
        FROM donations d
        WHERE NOT EXISTS (
            SELECT 1
            FROM distributions x
            WHERE x.donation_id = d.id
              AND x.family_id = $1
        )
        ORDER BY d.id
        """,
        family_id,
    )
