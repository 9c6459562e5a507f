"""
Auth business logic.

New accounts are regular users unless their username is listed in
`ADMIN_USERNAMES`, which is how a fresh deployment gets its first admin.
"""

from __future__ import annotations

import logging

from core.errors import BadRequestError, UnauthorizedError
from core.sql import is_pg_int

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        username=str(user_row["username"]),
        is_admin=bool(user_row["is_admin"]),
    )


def _issue_token(user_row: dict) -> schemas.TokenResponse:
    token = security.build_access_token(
        user_id=int(user_row["id"]),
        username=str(user_row["username"]),
        is_admin=bool(user_row.get("is_admin", False)),
    )
    return schemas.TokenResponse(token=token)


async def register(payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    existing = await repository.get_user_by_username(payload.username)
    if existing is not None:
        raise BadRequestError(f"Duplicate username: {payload.username}")

    username = repository.normalize_username(payload.username)
    is_admin = username in security.admin_usernames()
    password_hash = security.hash_password(payload.password)
    user_row = await repository.create_user(
        username=username,
        password_hash=password_hash,
        is_admin=is_admin,
    )
    logger.info("user_registered id=%s is_admin=%s", user_row["id"], is_admin)
    return _issue_token(user_row)


async def authenticate(payload: schemas.TokenRequest) -> schemas.TokenResponse:
    user_row = await repository.get_user_by_username(payload.username)
    password_hash = str((user_row or {}).get("password_hash") or "")
    if user_row is None or not security.verify_password(payload.password, password_hash):
        raise UnauthorizedError("Invalid username/password.")
    return _issue_token(user_row)


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise UnauthorizedError(str(exc)) from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject.isdigit() or not is_pg_int(int(subject)):
        raise UnauthorizedError("Invalid access token subject.")

    user_row = await repository.get_user_by_id(int(subject))
    if user_row is None:
        raise UnauthorizedError("User not found.")
    return user_row


async def me(access_token: str) -> schemas.UserResponse:
    user_row = await get_user_from_access_token(access_token)
    return _to_user_response(user_row)
