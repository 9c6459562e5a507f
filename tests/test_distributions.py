import asyncpg
import pytest

from core.errors import BadRequestError, NotFoundError
from distributions import repository


def test_enroll_family_defaults_receive_false(client, fake_db):
    fake_db.queue({"donation_id": 1, "family_id": 1, "receive": False})

    resp = client.post("/families/1/donations/1")

    assert resp.status_code == 201
    assert resp.json() == {"distribution": {"donation_id": 1, "family_id": 1, "receive": False}}


def test_enroll_twice_is_400(client, fake_db):
    fake_db.queue(asyncpg.UniqueViolationError("distributions_pkey"))

    resp = client.post("/families/1/donations/1")

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Duplicate/Not Present"


def test_mark_received(client, fake_db):
    fake_db.queue({"donation_id": 3, "family_id": 1, "receive": True})

    resp = client.patch("/families/1/donations/3")

    assert resp.status_code == 200
    assert resp.json()["distribution"]["receive"] is True
    assert fake_db.calls[0][1] == (3, 1)


def test_unenroll(client, fake_db):
    fake_db.queue({"donation_id": 3, "family_id": 1})

    resp = client.delete("/families/1/donations/3")

    assert resp.status_code == 200
    assert resp.json() == {"deleted": {"family_id": 1, "donation_id": 3}}
    assert fake_db.calls[0][1] == (3, 1)


@pytest.mark.anyio
async def test_create_with_unknown_donation_is_bad_request(fake_db):
    fake_db.queue(asyncpg.ForeignKeyViolationError("distributions_donation_id_fkey"))

    with pytest.raises(BadRequestError):
        await repository.create(donation_id=9, family_id=1)


@pytest.mark.anyio
async def test_update_missing_pair_raises_not_found(fake_db):
    fake_db.queue(None)

    with pytest.raises(NotFoundError):
        await repository.update(donation_id=1, family_id=2)


@pytest.mark.anyio
async def test_remove_missing_pair_raises_not_found(fake_db):
    fake_db.queue(None)

    with pytest.raises(NotFoundError):
        await repository.remove(family_id=2, donation_id=1)


def test_ids_wider_than_int4(client, fake_db):
    assert client.post("/families/3000000000/donations/1").status_code == 400
    assert client.patch("/families/1/donations/3000000000").status_code == 404
    assert client.delete("/families/3000000000/donations/1").status_code == 404
    assert fake_db.calls == []
