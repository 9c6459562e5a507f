"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import dependencies, schemas, service

router = APIRouter(prefix="/auth")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    return await service.register(payload)


@router.post("/token")
async def token(payload: schemas.TokenRequest) -> schemas.TokenResponse:
    return await service.authenticate(payload)


@router.get("/me")
async def me(access_token: str = Depends(dependencies.get_bearer_token)) -> dict:
    user = await service.me(access_token)
    return {"user": user}
