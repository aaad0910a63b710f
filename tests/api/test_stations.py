from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_station_crud(app_client):
    res = await app_client.post("/api/stations", json={"name": "Station 7", "phone": "(555) 700-0007"})
    assert res.status_code == 201
    station = res.json()
    assert station["name"] == "Station 7"
    assert station["phone"] == "(555) 700-0007"

    res = await app_client.put(f"/api/stations/{station['id']}", json={"address": "7 Ladder Ln"})
    assert res.status_code == 200
    assert res.json()["address"] == "7 Ladder Ln"
    assert res.json()["name"] == "Station 7"

    res = await app_client.get("/api/stations")
    assert [s["id"] for s in res.json()] == [station["id"]]

    res = await app_client.delete(f"/api/stations/{station['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Station deleted successfully"}

    res = await app_client.get(f"/api/stations/{station['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "not_found"


@pytest.mark.asyncio
async def test_station_rejects_bad_phone(app_client):
    res = await app_client.post("/api/stations", json={"name": "Station 8", "phone": "12345"})
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "unprocessable_entity"


@pytest.mark.asyncio
async def test_station_name_cannot_be_cleared(app_client, station):
    res = await app_client.put(f"/api/stations/{station['id']}", json={"name": None})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "validation_failed"


@pytest.mark.asyncio
async def test_station_delete_cascades(app_client, station, make_equipment):
    scba = await make_equipment()
    other = (await app_client.post("/api/stations", json={"name": "Station 2"})).json()

    res = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2030-01-01"}
    )
    inspection_id = res.json()["id"]
    scoped = await app_client.post(
        "/api/category-inspections",
        json={"category": "breathing", "station_id": station["id"], "due_date": "2030-01-01"},
    )
    everywhere = await app_client.post(
        "/api/category-inspections", json={"category": "breathing", "due_date": "2030-01-01"}
    )
    elsewhere = await app_client.post(
        "/api/category-inspections",
        json={"category": "breathing", "station_id": other["id"], "due_date": "2030-01-01"},
    )

    res = await app_client.delete(f"/api/stations/{station['id']}")
    assert res.status_code == 200

    assert (await app_client.get(f"/api/equipment/{scba['id']}")).status_code == 404
    assert (await app_client.get(f"/api/inspections/{inspection_id}")).status_code == 404
    rules = (await app_client.get("/api/category-inspections")).json()
    remaining = {r["id"] for r in rules}
    assert scoped.json()["id"] not in remaining
    assert {everywhere.json()["id"], elsewhere.json()["id"]} <= remaining
