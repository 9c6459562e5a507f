"""
Auth dependencies for protected FastAPI routes.

Routers gate on `ensure_admin`; the one read open to any logged-in user
(`GET /people/{id}`) uses `get_current_user`.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.errors import ForbiddenError, UnauthorizedError

from . import service


def bearer_token_from_header(authorization: str | None) -> str:
    scheme, _, token = (authorization or "").strip().partition(" ")
    if not scheme:
        raise UnauthorizedError("Missing Authorization header.")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Authorization must be: Bearer <token>.")
    return token.strip()


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return bearer_token_from_header(authorization)


async def get_current_user(access_token: str = Depends(get_bearer_token)) -> dict:
    return await service.get_user_from_access_token(access_token)


async def ensure_admin(current_user: dict = Depends(get_current_user)) -> dict:
    # Admin flag is read from the users row, not the token claim.
    if not bool(current_user.get("is_admin", False)):
        raise ForbiddenError("Admin privileges required.")
    return current_user
