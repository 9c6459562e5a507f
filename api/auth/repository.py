"""
Auth persistence helpers.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import BadRequestError


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


async def create_user(*, username: str, password_hash: str, is_admin: bool = False) -> dict:
    try:
        row = await db.fetch_one(
            """
            INSERT INTO users (username, password_hash, is_admin)
            VALUES ($1, $2, $3)
            RETURNING id, username, is_admin, created_at
            """,
            normalize_username(username),
            password_hash,
            is_admin,
        )
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError(f"Duplicate username: {username}") from exc

    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password_hash, is_admin, created_at
        FROM users
        WHERE username = $1
        """,
        normalize_username(username),
    )


async def get_user_by_id(user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password_hash, is_admin, created_at
        FROM users
        WHERE id = $1
        """,
        user_id,
    )
