from __future__ import annotations

from datetime import timedelta

import pytest

from firegear.utils.datetime import utc_today


@pytest.mark.asyncio
async def test_create_records_history_and_actor(app_client, station):
    res = await app_client.post(
        "/api/equipment",
        json={
            "name": "Thermal Camera",
            "serialNumber": " TIC-001 ",
            "category": "detection",
            "stationId": station["id"],
        },
        headers={"X-Actor": "capt.lee"},
    )
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["serial_number"] == "TIC-001"
    assert body["status"] == "in-service"
    assert body["inspection_status"] is None
    assert len(body["history"]) == 1
    assert body["history"][0]["type"] == "created"
    assert body["history"][0]["user"] == "capt.lee"


@pytest.mark.asyncio
async def test_duplicate_serial_number_conflicts(app_client, make_equipment):
    first = await make_equipment(serial_number="DUP-1")
    res = await app_client.post(
        "/api/equipment",
        json={
            "name": "Copy",
            "serial_number": "DUP-1",
            "category": "breathing",
            "station_id": first["station_id"],
        },
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "conflict"

    second = await make_equipment(serial_number="DUP-2")
    res = await app_client.put(f"/api/equipment/{second['id']}", json={"serial_number": "DUP-1"})
    assert res.status_code == 409


@pytest.mark.asyncio
async def test_business_rule_violations(app_client, station):
    base = {"name": "Pack", "serial_number": "P-1", "category": "breathing", "station_id": station["id"]}

    res = await app_client.post("/api/equipment", json={**base, "status": "out-of-service"})
    assert res.status_code == 400
    assert res.json()["error"]["detail"] == {"field": "notes"}

    res = await app_client.post("/api/equipment", json={**base, "category": "boats"})
    assert res.status_code == 400

    res = await app_client.post("/api/equipment", json={**base, "serial_number": "P#1"})
    assert res.status_code == 400

    res = await app_client.post("/api/equipment", json={**base, "station_id": 9999})
    assert res.status_code == 400
    assert res.json()["error"]["detail"] == {"field": "station_id"}


@pytest.mark.asyncio
async def test_update_status_requires_note(app_client, make_equipment):
    item = await make_equipment()

    res = await app_client.put(f"/api/equipment/{item['id']}", json={"status": "out-for-repair"})
    assert res.status_code == 400

    res = await app_client.put(
        f"/api/equipment/{item['id']}",
        json={"status": "out-for-repair", "notes": "regulator leak"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "out-for-repair"
    assert body["history"][-1]["type"] == "status-changed"
    assert body["history"][-1]["notes"] == "regulator leak"

    # back in service needs no note
    res = await app_client.put(f"/api/equipment/{item['id']}", json={"status": "in-service"})
    assert res.status_code == 200


@pytest.mark.asyncio
async def test_status_change_endpoint_appends_note(app_client, make_equipment):
    item = await make_equipment(notes="Issued to Engine 1")
    res = await app_client.post(
        f"/api/equipment/{item['id']}/status",
        json={"status": "cannot-locate", "note": "missing after fire on Elm"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "cannot-locate"
    assert body["notes"].startswith("Issued to Engine 1\n\n[")
    assert "Status changed to Cannot Locate: missing after fire on Elm" in body["notes"]

    res = await app_client.get(f"/api/equipment/{item['id']}/history")
    assert [e["type"] for e in res.json()] == ["created", "status-changed"]

    res = await app_client.post(
        f"/api/equipment/{item['id']}/status", json={"status": "cannot-locate", "note": "again"}
    )
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_list_filters_and_inspection_status(app_client, station, make_equipment):
    scba = await make_equipment(name="SCBA Alpha")
    await make_equipment(name="Hose 1", category="hose", serial_number="HOSE-1")
    due = utc_today() + timedelta(days=5)
    await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": due.isoformat()}
    )

    res = await app_client.get("/api/equipment", params={"category": "breathing"})
    items = res.json()
    assert [i["id"] for i in items] == [scba["id"]]
    assert items[0]["inspection_status"]["status"] == "warning"
    assert items[0]["inspection_status"]["days"] == 5

    res = await app_client.get("/api/equipment", params={"q": "hose"})
    assert [i["serial_number"] for i in res.json()] == ["HOSE-1"]

    res = await app_client.get(f"/api/equipment/{scba['id']}/inspection-status")
    assert res.json()["inspection_kind"] == "individual"
    assert res.json()["due_date"] == due.isoformat()


@pytest.mark.asyncio
async def test_delete_equipment_cascades_inspections(app_client, make_equipment):
    item = await make_equipment()
    res = await app_client.post(
        "/api/inspections", json={"equipment_id": item["id"], "due_date": "2031-03-01"}
    )
    assert res.status_code == 201
    rule = await app_client.post(
        "/api/category-inspections", json={"category": "breathing", "due_date": "2031-03-01"}
    )
    assert rule.status_code == 201

    res = await app_client.delete(f"/api/equipment/{item['id']}")
    assert res.json() == {"message": "Equipment deleted successfully"}

    res = await app_client.get("/api/inspections", params={"equipment_id": item["id"]})
    assert res.json() == []
    assert (await app_client.get(f"/api/equipment/{item['id']}")).status_code == 404

    # category rules are not owned by any one item
    rules = await app_client.get("/api/category-inspections")
    assert [r["id"] for r in rules.json()] == [rule.json()["id"]]
