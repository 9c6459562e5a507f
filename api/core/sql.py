"""
SQL building helpers shared by the feature repositories.
"""

from __future__ import annotations

from typing import Any

from core.errors import BadRequestError

# Row keys and integer columns are Postgres INTEGER (int4).
PG_INT_MAX = 2_147_483_647


def is_pg_int(value: int) -> bool:
    """
    True when `value` fits an INTEGER column; asyncpg refuses anything wider.
    """
    return -PG_INT_MAX - 1 <= value <= PG_INT_MAX


def sql_for_partial_update(
    data: dict[str, Any],
    column_names: dict[str, str] | None = None,
) -> tuple[str, list[Any]]:
    """
    Turn a sparse field map into the SET part of an UPDATE.

    `column_names` maps logical field names to column names where they differ.

        sql_for_partial_update({"first_name": "Aliya", "age": 32}, {})
        -> ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Placeholders follow the insertion order of `data`, so the caller binds
    the row key as `$len(values) + 1`.
    """
    if not data:
        raise BadRequestError("No data")

    mapping = column_names or {}
    cols = [f'"{mapping.get(name, name)}"=${idx}' for idx, name in enumerate(data, start=1)]
    return ", ".join(cols), list(data.values())
