from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_template_defaults_and_scheduled_history(app_client, make_equipment):
    scba = await make_equipment()
    res = await app_client.post(
        "/api/inspections",
        json={"equipmentId": scba["id"], "templateId": "scba-annual-flow", "dueDate": "2024-01-15"},
        headers={"X-Actor": "eng.diaz"},
    )
    assert res.status_code == 201, res.text
    inspection = res.json()
    assert inspection["name"] == "SCBA Annual Flow Test (NFPA 1852)"
    assert inspection["external_vendor"] is True
    assert inspection["status"] == "scheduled"

    history = (await app_client.get(f"/api/equipment/{scba['id']}/history")).json()
    assert history[-1]["type"] == "inspection-scheduled"
    assert history[-1]["inspection_id"] == inspection["id"]
    assert history[-1]["user"] == "eng.diaz"


@pytest.mark.asyncio
async def test_custom_inspection_name_default(app_client, make_equipment):
    scba = await make_equipment()
    res = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2030-05-01"}
    )
    assert res.json()["name"] == "Custom Inspection"
    assert res.json()["external_vendor"] is False


@pytest.mark.asyncio
async def test_template_must_fit_equipment_category(app_client, make_equipment):
    scba = await make_equipment()
    res = await app_client.post(
        "/api/inspections",
        json={"equipment_id": scba["id"], "template_id": "hose-annual", "due_date": "2030-05-01"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["detail"] == {"field": "template_id"}

    res = await app_client.post(
        "/api/inspections", json={"equipment_id": 4242, "due_date": "2030-05-01"}
    )
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_complete_advances_by_template_interval(app_client, make_equipment):
    hose = await make_equipment(category="hose", serial_number="HOSE-200")
    created = await app_client.post(
        "/api/inspections",
        json={"equipment_id": hose["id"], "template_id": "hose-annual", "due_date": "2024-01-15"},
    )
    inspection_id = created.json()["id"]

    res = await app_client.post(
        f"/api/inspections/{inspection_id}/complete", json={"notes": "passed at 300 psi"}
    )
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["recurring"] is True
    assert body["next_due_date"] == "2025-01-15"
    assert body["equipment_ids"] == [hose["id"]]
    assert body["inspection"]["due_date"] == "2025-01-15"
    assert body["inspection"]["status"] == "scheduled"
    assert body["inspection"]["last_completed"] is not None

    history = (await app_client.get(f"/api/equipment/{hose['id']}/history")).json()
    assert history[-1]["type"] == "inspection-completed"
    assert history[-1]["notes"] == "passed at 300 psi"
    assert history[-1]["next_due_date"] == "2025-01-15"


@pytest.mark.asyncio
async def test_complete_without_body(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections",
        json={"equipment_id": scba["id"], "template_id": "scba-monthly", "due_date": "2024-01-31"},
    )
    res = await app_client.post(f"/api/inspections/{created.json()['id']}/complete")
    assert res.status_code == 200
    assert res.json()["next_due_date"] == "2024-02-29"


@pytest.mark.asyncio
async def test_one_off_inspection_closes_and_cannot_complete_twice(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2024-03-01"}
    )
    inspection_id = created.json()["id"]

    res = await app_client.post(f"/api/inspections/{inspection_id}/complete", json={})
    body = res.json()
    assert body["recurring"] is False
    assert body["next_due_date"] is None
    assert body["inspection"]["status"] == "completed"
    assert body["inspection"]["due_date"] == "2024-03-01"

    # a closed one-off no longer drives the equipment status
    status = await app_client.get(f"/api/equipment/{scba['id']}/inspection-status")
    assert status.json() is None

    res = await app_client.post(f"/api/inspections/{inspection_id}/complete", json={})
    assert res.status_code == 409


@pytest.mark.asyncio
async def test_custom_inspection_with_next_due_date_recurs(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2024-03-01"}
    )
    inspection_id = created.json()["id"]

    res = await app_client.post(
        f"/api/inspections/{inspection_id}/complete", json={"next_due_date": "2024-02-01"}
    )
    assert res.status_code == 400

    res = await app_client.post(
        f"/api/inspections/{inspection_id}/complete", json={"nextDueDate": "2024-09-01"}
    )
    assert res.json()["recurring"] is True
    assert res.json()["inspection"]["due_date"] == "2024-09-01"


@pytest.mark.asyncio
async def test_update_and_delete_inspection(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2030-01-01"}
    )
    inspection_id = created.json()["id"]

    res = await app_client.put(
        f"/api/inspections/{inspection_id}",
        json={"due_date": "2030-02-01", "vendor_contact": "Acme Air"},
    )
    assert res.status_code == 200
    assert res.json()["due_date"] == "2030-02-01"
    assert res.json()["vendor_contact"] == "Acme Air"

    res = await app_client.delete(f"/api/inspections/{inspection_id}")
    assert res.json() == {"message": "Inspection deleted successfully"}
    history = (await app_client.get(f"/api/equipment/{scba['id']}/history")).json()
    assert history[-1]["type"] == "inspection-removed"

    assert (await app_client.post(f"/api/inspections/{inspection_id}/complete")).status_code == 404


@pytest.mark.asyncio
async def test_recurring_inspection_cannot_be_closed_by_update(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections",
        json={"equipment_id": scba["id"], "template_id": "scba-annual-flow", "due_date": "2024-01-15"},
    )
    inspection_id = created.json()["id"]

    res = await app_client.put(f"/api/inspections/{inspection_id}", json={"status": "completed"})
    assert res.status_code == 400
    assert res.json()["error"]["detail"] == {"field": "status"}

    res = await app_client.post(f"/api/inspections/{inspection_id}/complete")
    assert res.status_code == 200
    assert res.json()["inspection"]["due_date"] == "2025-01-15"


@pytest.mark.asyncio
async def test_one_off_inspection_may_be_closed_by_update(app_client, make_equipment):
    scba = await make_equipment()
    created = await app_client.post(
        "/api/inspections", json={"equipment_id": scba["id"], "due_date": "2024-01-15"}
    )
    res = await app_client.put(
        f"/api/inspections/{created.json()['id']}", json={"status": "completed"}
    )
    assert res.status_code == 200
    assert res.json()["status"] == "completed"
