"""
Donation API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.dates import format_dates

from . import repository, schemas

router = APIRouter(prefix="/donations", dependencies=[Depends(auth_dependencies.ensure_admin)])

DATE_FIELDS = ("start_date", "end_date")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_donation(payload: schemas.DonationNew) -> dict:
    donation = await repository.create(payload.model_dump())
    return {"donation": format_dates(donation, *DATE_FIELDS)}


@router.get("")
async def list_donations() -> dict:
    donations = await repository.find_all()
    return {"donations": [format_dates(d, *DATE_FIELDS) for d in donations]}


@router.get("/{donation_id}")
async def get_donation(donation_id: int) -> dict:
    donation = await repository.get(donation_id)
    return {"donation": format_dates(donation, *DATE_FIELDS)}


@router.patch("/{donation_id}")
async def update_donation(donation_id: int, payload: schemas.DonationUpdate) -> dict:
    donation = await repository.update(donation_id, payload.model_dump(exclude_none=True))
    return {"donation": format_dates(donation, *DATE_FIELDS)}


@router.delete("/{donation_id}")
async def delete_donation(donation_id: int) -> dict:
    await repository.remove(donation_id)
    return {"deleted": donation_id}
