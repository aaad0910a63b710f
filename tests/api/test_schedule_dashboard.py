from __future__ import annotations

from datetime import timedelta

import pytest

from firegear.utils.datetime import utc_today


@pytest.mark.asyncio
async def test_schedule_orders_and_filters(app_client, make_equipment):
    today = utc_today()
    scba = await make_equipment()
    await app_client.post(
        "/api/inspections",
        json={"equipment_id": scba["id"], "due_date": (today + timedelta(days=60)).isoformat()},
    )
    await app_client.post(
        "/api/inspections",
        json={"equipment_id": scba["id"], "due_date": (today - timedelta(days=1)).isoformat()},
    )
    await app_client.post(
        "/api/category-inspections",
        json={"category": "hose", "due_date": (today + timedelta(days=10)).isoformat()},
    )

    items = (await app_client.get("/api/schedule")).json()["items"]
    assert [(i["kind"], i["status"]) for i in items] == [
        ("individual", "past-due"),
        ("category", "attention"),
        ("individual", "upcoming"),
    ]
    assert [i["completable"] for i in items] == [True, True, False]
    assert items[0]["days"] == 1
    assert items[1]["category"] == "hose"

    items = (await app_client.get("/api/schedule", params={"within_days": 30})).json()["items"]
    assert len(items) == 2


@pytest.mark.asyncio
async def test_dashboard_counts(app_client, make_equipment):
    today = utc_today()
    ok = await make_equipment()
    late = await make_equipment()
    await make_equipment(status="out-of-service", notes="bad valve")

    await app_client.post(
        "/api/inspections",
        json={"equipment_id": late["id"], "due_date": (today - timedelta(days=4)).isoformat()},
    )
    await app_client.post(
        "/api/inspections",
        json={"equipment_id": ok["id"], "due_date": (today + timedelta(days=2)).isoformat()},
    )

    res = await app_client.get("/api/dashboard")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 3
    assert body["in_service"] == 2
    assert body["out_of_service"] == 1
    assert body["critical_inspections"] == 2
    assert body["by_inspection_status"]["past-due"] == 1
    assert body["by_inspection_status"]["critical"] == 1
    assert body["by_inspection_status"]["none"] == 1


@pytest.mark.asyncio
async def test_dashboard_out_of_service_counts_only_that_status(app_client, make_equipment):
    await make_equipment()
    await make_equipment(status="in-training", notes="recruit academy")
    await make_equipment(status="cannot-locate", notes="last seen on Engine 2")
    await make_equipment(status="out-for-repair", notes="sent to vendor")

    body = (await app_client.get("/api/dashboard")).json()
    assert body["total"] == 4
    assert body["in_service"] == 1
    assert body["out_of_service"] == 0
