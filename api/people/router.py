"""
People API endpoints.

`dob` is rendered as D-M-YYYY in every response.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.dates import format_dates

from . import repository, schemas

router = APIRouter(prefix="/people")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_person(
    payload: schemas.PersonNew,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    person = await repository.create(payload.model_dump())
    return {"person": format_dates(person, "dob")}


@router.get("")
async def list_people(_: dict = Depends(auth_dependencies.ensure_admin)) -> dict:
    people = await repository.find_all()
    return {"people": [format_dates(p, "dob") for p in people]}


@router.get("/{person_id}")
async def get_person(
    person_id: int,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    person = await repository.get(person_id)
    return {"person": format_dates(person, "dob")}


@router.patch("/{person_id}")
async def update_person(
    person_id: int,
    payload: schemas.PersonUpdate,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    person = await repository.update(person_id, payload.model_dump(exclude_unset=True))
    return {"person": format_dates(person, "dob")}


@router.delete("/{person_id}")
async def delete_person(
    person_id: int,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    await repository.remove(person_id)
    return {"deleted": person_id}
