from __future__ import annotations

from types import SimpleNamespace

import pytest

from firegear.core.exceptions import ConflictError, NotFoundError, ValidationError
from firegear.schemas import EquipmentCreate, StatusChangeRequest
from firegear.services.equipment import EquipmentService


class StubUnitOfWork:
    def __init__(self, *, stations, equipment):
        self.stations = stations
        self.equipment = equipment
        self.inspections = FakeEmptyRepository()
        self.category_inspections = FakeEmptyRepository()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeEmptyRepository:
    async def list(self, **_):
        return []


class FakeStationRepository:
    def __init__(self, ids):
        self._ids = set(ids)

    async def get(self, station_id):
        return SimpleNamespace(id=station_id) if station_id in self._ids else None


class FakeEquipmentRepository:
    def __init__(self, rows=()):
        self.rows = {row.id: row for row in rows}
        self.added: list[dict] = []

    async def get(self, equipment_id):
        return self.rows.get(equipment_id)

    async def get_by_serial(self, serial_number):
        return next((r for r in self.rows.values() if r.serial_number == serial_number), None)

    async def add(self, **fields):  # noqa: D401
        self.added.append(fields)
        row = SimpleNamespace(id=len(self.rows) + 1, created_at=None, updated_at=None, **fields)
        self.rows[row.id] = row
        return row

    async def update(self, row, **fields):
        for key, value in fields.items():
            setattr(row, key, value)
        return row


def _row(**overrides):
    fields = dict(
        id=1,
        name="SCBA 1",
        serial_number="SCBA-1",
        manufacturer=None,
        model=None,
        category="breathing",
        subcategory=None,
        station_id=1,
        status="in-service",
        notes=None,
        history=[],
        created_at=None,
        updated_at=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _service(equipment_repo, station_ids=(1,)):
    stations = FakeStationRepository(station_ids)
    return EquipmentService(lambda: StubUnitOfWork(stations=stations, equipment=equipment_repo))


def _payload(**overrides):
    body = dict(name="SCBA 2", serial_number="SCBA-2", category="breathing", station_id=1)
    body.update(overrides)
    return EquipmentCreate(**body)


@pytest.mark.asyncio
async def test_create_normalizes_serial_and_writes_history():
    repo = FakeEquipmentRepository()
    out = await _service(repo).create(_payload(serial_number="  SCBA-2 "), actor="lt.ray")

    assert out.serial_number == "SCBA-2"
    assert repo.added[0]["history"][0]["type"] == "created"
    assert repo.added[0]["history"][0]["user"] == "lt.ray"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_serial():
    repo = FakeEquipmentRepository([_row(serial_number="SCBA-2")])
    with pytest.raises(ConflictError):
        await _service(repo).create(_payload(), actor="system")
    assert repo.added == []


@pytest.mark.asyncio
async def test_create_requires_existing_station():
    with pytest.raises(ValidationError) as exc:
        await _service(FakeEquipmentRepository(), station_ids=()).create(_payload(), actor="system")
    assert exc.value.field == "station_id"


@pytest.mark.asyncio
async def test_status_change_appends_stamped_note():
    row = _row(notes="Assigned to Engine 4")
    service = _service(FakeEquipmentRepository([row]))

    out = await service.change_status(
        1, StatusChangeRequest(status="out-of-service", note="cracked facepiece"), actor="system"
    )

    assert out.status == "out-of-service"
    assert out.notes.endswith("Status changed to Out of Service: cracked facepiece")
    assert out.history[-1].type == "status-changed"


@pytest.mark.asyncio
async def test_missing_equipment_is_not_found():
    with pytest.raises(NotFoundError):
        await _service(FakeEquipmentRepository()).get(42)
