from datetime import date

import asyncpg
import pytest

from core.errors import BadRequestError, NotFoundError
from donations import repository

RELIEF = {"start_date": "2023-02-06", "end_date": "2023-03-31", "target": 100, "description": "Relief"}
RELIEF_ROW = {
    "id": 1,
    "start_date": date(2023, 2, 6),
    "end_date": date(2023, 3, 31),
    "target": 100,
    "description": "Relief",
}


def test_create_donation(client, fake_db):
    fake_db.queue(None, dict(RELIEF_ROW))

    resp = client.post("/donations", json=RELIEF)

    assert resp.status_code == 201
    assert resp.json()["donation"] == {**RELIEF_ROW, "start_date": "6-2-2023", "end_date": "31-3-2023"}


def test_create_duplicate_donation_is_400(client, fake_db):
    fake_db.queue({"id": 1})

    resp = client.post("/donations", json=RELIEF)

    assert resp.status_code == 400


def test_create_donation_rejects_end_before_start(client, fake_db):
    resp = client.post("/donations", json={**RELIEF, "end_date": "2023-01-01"})

    assert resp.status_code == 400
    assert fake_db.calls == []


def test_create_donation_rejects_negative_target(client, fake_db):
    resp = client.post("/donations", json={**RELIEF, "target": -1})

    assert resp.status_code == 400
    assert any(m.startswith("target:") for m in resp.json()["error"]["message"])


def test_get_donation_lists_enrolled_families(client, fake_db):
    fake_db.queue(dict(RELIEF_ROW), [{"family_id": 1, "receive": True}, {"family_id": 2, "receive": False}])

    resp = client.get("/donations/1")

    assert resp.status_code == 200
    assert resp.json()["donation"]["family"] == [{"id": 1, "receive": True}, {"id": 2, "receive": False}]


def test_list_donations_formats_dates(client, fake_db):
    fake_db.queue([dict(RELIEF_ROW)])

    resp = client.get("/donations")

    assert resp.json()["donations"][0]["start_date"] == "6-2-2023"


def test_patch_donation(client, fake_db):
    fake_db.queue({**RELIEF_ROW, "target": 250})

    resp = client.patch("/donations/1", json={"target": 250})

    assert resp.status_code == 200
    assert resp.json()["donation"]["target"] == 250
    assert fake_db.calls[0][1] == (250, 1)


def test_delete_missing_donation_is_404(client, fake_db):
    fake_db.queue(None)

    resp = client.delete("/donations/8")

    assert resp.status_code == 404


@pytest.mark.anyio
async def test_get_unknown_donation_raises_not_found(fake_db):
    fake_db.queue(None)

    with pytest.raises(NotFoundError):
        await repository.get(3)


def test_create_donation_rejects_target_wider_than_int4(client, fake_db):
    resp = client.post("/donations", json={**RELIEF, "target": 3_000_000_000})

    assert resp.status_code == 400
    assert any(m.startswith("target:") for m in resp.json()["error"]["message"])
    assert fake_db.calls == []


def test_patch_donation_rejects_end_before_start(client, fake_db):
    resp = client.patch("/donations/1", json={"start_date": "2024-02-01", "end_date": "2024-01-01"})

    assert resp.status_code == 400
    assert fake_db.calls == []


@pytest.mark.anyio
async def test_update_single_date_past_stored_end_is_bad_request(fake_db):
    fake_db.queue(asyncpg.CheckViolationError("donations_check"))

    with pytest.raises(BadRequestError):
        await repository.update(1, {"start_date": date(2030, 1, 1)})


def test_get_donation_id_wider_than_int4_is_404(client, fake_db):
    resp = client.get("/donations/3000000000")

    assert resp.status_code == 404
    assert fake_db.calls == []
