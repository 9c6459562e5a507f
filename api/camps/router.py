"""
Camp API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import repository, schemas

router = APIRouter(prefix="/camps", dependencies=[Depends(auth_dependencies.ensure_admin)])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_camp(payload: schemas.CampNew) -> dict:
    camp = await repository.create(payload.model_dump())
    return {"camp": camp}


@router.get("")
async def list_camps() -> dict:
    camps = await repository.find_all()
    return {"camps": camps}


@router.get("/{camp_id}")
async def get_camp(camp_id: int) -> dict:
    camp = await repository.get(camp_id)
    return {"camp": camp}


@router.patch("/{camp_id}")
async def update_camp(camp_id: int, payload: schemas.CampUpdate) -> dict:
    camp = await repository.update(camp_id, payload.model_dump(exclude_none=True))
    return {"camp": camp}


@router.delete("/{camp_id}")
async def delete_camp(camp_id: int) -> dict:
    await repository.remove(camp_id)
    return {"deleted": camp_id}
