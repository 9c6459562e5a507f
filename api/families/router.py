"""
Family API endpoints.

Also hosts the household (family membership) and distribution (campaign
enrollment) endpoints, which are addressed through a family.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.dates import format_dates
from distributions import repository as distribution_repository
from households import repository as household_repository

from . import repository, schemas

router = APIRouter(prefix="/families", dependencies=[Depends(auth_dependencies.ensure_admin)])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_family(payload: schemas.FamilyNew) -> dict:
    family = await repository.create(payload.model_dump())
    return {"family": family}


@router.get("")
async def list_families() -> dict:
    families = await repository.find_all()
    return {"families": families}


# Declared before /{family_id} so "household" is not parsed as an id.
@router.get("/household")
async def list_unassigned_people() -> dict:
    """
    People who do not belong to any family yet.
    """
    people = await household_repository.all_unassigned()
    return {"people": [format_dates(p, "dob") for p in people]}


@router.get("/{family_id}")
async def get_family(family_id: int) -> dict:
    family = await repository.get(family_id)
    return {"family": family}


@router.patch("/{family_id}")
async def update_family(family_id: int, payload: schemas.FamilyUpdate) -> dict:
    family = await repository.update(family_id, payload.model_dump(exclude_none=True))
    return {"family": family}


@router.delete("/{family_id}")
async def delete_family(family_id: int) -> dict:
    await repository.remove(family_id)
    return {"deleted": family_id}


@router.get("/{family_id}/people")
async def get_household(family_id: int) -> dict:
    household = await household_repository.get(family_id)
    return {"household": household}


@router.post("/{family_id}/people/{person_id}", status_code=status.HTTP_201_CREATED)
async def add_person_to_family(family_id: int, person_id: int) -> dict:
    household = await household_repository.create(family_id, person_id)
    return {"household": household}


@router.get("/{family_id}/donations")
async def list_new_donations(family_id: int) -> dict:
    """
    Campaigns the family can still be enrolled in.
    """
    donations = await repository.get_all_new_donations(family_id)
    return {"donations": [format_dates(d, "start_date", "end_date") for d in donations]}


@router.post("/{family_id}/donations/{donation_id}", status_code=status.HTTP_201_CREATED)
async def enroll_family(family_id: int, donation_id: int) -> dict:
    distribution = await distribution_repository.create(donation_id=donation_id, family_id=family_id)
    return {"distribution": distribution}


@router.patch("/{family_id}/donations/{donation_id}")
async def mark_received(family_id: int, donation_id: int) -> dict:
    distribution = await distribution_repository.update(donation_id=donation_id, family_id=family_id)
    return {"distribution": distribution}


@router.delete("/{family_id}/donations/{donation_id}")
async def unenroll_family(family_id: int, donation_id: int) -> dict:
    await distribution_repository.remove(family_id=family_id, donation_id=donation_id)
    return {"deleted": {"family_id": family_id, "donation_id": donation_id}}
