"""Equipment use cases, including the status-change note rule and audit history."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

import structlog
from sqlalchemy.exc import IntegrityError

from firegear.catalog import status_label
from firegear.core.exceptions import ConflictError, NotFoundError, ValidationError
from firegear.infra.unit_of_work import UnitOfWork
from firegear.models import Equipment
from firegear.schemas import (
    EquipmentCreate,
    EquipmentOut,
    EquipmentUpdate,
    HistoryEntryOut,
    InspectionStatusOut,
    StatusChangeRequest,
)
from firegear.services import history
from firegear.services.inspection_status import InspectionStatus, resolve_status
from firegear.services.mappers import (
    map_equipment,
    map_status,
    to_equipment_ref,
    to_individual,
    to_rule,
)
from firegear.services.validation import (
    changes_from,
    normalize_serial_number,
    require_category,
    require_note_for_status,
    require_status,
)
from firegear.utils.datetime import utc_today, utcnow

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = structlog.get_logger(__name__)


async def resolve_statuses(
    uow: UnitOfWork, items: Sequence[Equipment], *, today: date
) -> dict[int, InspectionStatus | None]:
    """Inspection status for each equipment row, keyed by equipment id."""
    if not items:
        return {}
    ids = [int(item.id) for item in items]
    inspections = [to_individual(row) for row in await uow.inspections.list(equipment_ids=ids)]
    categories = {item.category for item in items}
    rules = [
        to_rule(row)
        for row in await uow.category_inspections.list()
        if row.category in categories
    ]
    return {
        int(item.id): resolve_status(to_equipment_ref(item), inspections, rules, today=today)
        for item in items
    }


class EquipmentService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(
        self,
        *,
        station_id: int | None = None,
        category: str | None = None,
        status: str | None = None,
        q: str | None = None,
    ) -> list[EquipmentOut]:
        async with self._uow_factory() as uow:
            items = await uow.equipment.list(
                station_id=station_id, category=category, status=status, q=q
            )
            statuses = await resolve_statuses(uow, items, today=utc_today())
            return [map_equipment(item, statuses.get(int(item.id))) for item in items]

    async def get(self, equipment_id: int) -> EquipmentOut:
        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            statuses = await resolve_statuses(uow, [item], today=utc_today())
            return map_equipment(item, statuses.get(int(item.id)))

    async def create(self, payload: EquipmentCreate, *, actor: str) -> EquipmentOut:
        serial_number = normalize_serial_number(payload.serial_number)
        require_category(payload.category)
        require_status(payload.status)
        require_note_for_status(payload.status, payload.notes)

        async with self._uow_factory() as uow:
            await self._require_station(uow, payload.station_id)
            if await uow.equipment.get_by_serial(serial_number) is not None:
                raise ConflictError("Serial number already exists")

            fields = payload.model_dump()
            fields["serial_number"] = serial_number
            fields["history"] = [
                history.equipment_created(status=payload.status, notes=payload.notes, actor=actor)
            ]
            try:
                item = await uow.equipment.add(**fields)
            except IntegrityError as exc:
                raise ConflictError("Serial number already exists") from exc

            logger.info("equipment_created", equipment_id=item.id, category=item.category)
            # a new item has no inspections of its own but may match category rules
            statuses = await resolve_statuses(uow, [item], today=utc_today())
            return map_equipment(item, statuses.get(int(item.id)))

    async def update(
        self, equipment_id: int, payload: EquipmentUpdate, *, actor: str
    ) -> EquipmentOut:
        changes = changes_from(
            payload, required=("name", "serial_number", "category", "station_id", "status")
        )
        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            previous_status = item.status

            if "serial_number" in changes:
                changes["serial_number"] = normalize_serial_number(changes["serial_number"])
                clash = await uow.equipment.get_by_serial(changes["serial_number"])
                if clash is not None and int(clash.id) != int(item.id):
                    raise ConflictError("Serial number already exists")
            if "category" in changes:
                require_category(changes["category"])
            if "station_id" in changes and changes["station_id"] != item.station_id:
                await self._require_station(uow, changes["station_id"])

            new_status = changes.get("status", previous_status)
            require_status(new_status)
            if new_status != previous_status:
                require_note_for_status(new_status, changes.get("notes"))

            changes["history"] = history.append(
                item.history,
                history.equipment_updated(
                    previous_status=previous_status,
                    new_status=new_status,
                    notes=changes.get("notes"),
                    actor=actor,
                ),
            )
            try:
                item = await uow.equipment.update(item, **changes)
            except IntegrityError as exc:
                raise ConflictError("Serial number already exists") from exc

            statuses = await resolve_statuses(uow, [item], today=utc_today())
            return map_equipment(item, statuses.get(int(item.id)))

    async def change_status(
        self, equipment_id: int, payload: StatusChangeRequest, *, actor: str
    ) -> EquipmentOut:
        """Move equipment to another status, stamping the reason into notes and history."""
        require_status(payload.status)
        note = payload.note.strip()
        if not note:
            raise ValidationError("A note is required to change status", field="note")

        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            previous_status = item.status
            if payload.status == previous_status:
                raise ValidationError(
                    f"Equipment is already {status_label(previous_status)}", field="status"
                )

            stamp = f"[{utcnow().strftime('%Y-%m-%d %H:%M')}] Status changed to {status_label(payload.status)}: {note}"
            notes = f"{item.notes}\n\n{stamp}" if item.notes else stamp
            item = await uow.equipment.update(
                item,
                status=payload.status,
                notes=notes,
                history=history.append(
                    item.history,
                    history.status_changed(
                        previous_status=previous_status,
                        new_status=payload.status,
                        notes=note,
                        actor=actor,
                    ),
                ),
            )
            logger.info(
                "equipment_status_changed",
                equipment_id=equipment_id,
                previous_status=previous_status,
                new_status=payload.status,
            )
            statuses = await resolve_statuses(uow, [item], today=utc_today())
            return map_equipment(item, statuses.get(int(item.id)))

    async def history(self, equipment_id: int) -> list[HistoryEntryOut]:
        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            return [HistoryEntryOut.model_validate(entry) for entry in item.history or []]

    async def inspection_status(self, equipment_id: int) -> InspectionStatusOut | None:
        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            statuses = await resolve_statuses(uow, [item], today=utc_today())
            return map_status(statuses.get(int(item.id)))

    async def delete(self, equipment_id: int) -> None:
        async with self._uow_factory() as uow:
            item = await self._require(uow, equipment_id)
            removed = await uow.inspections.delete_for_equipment([int(item.id)])
            await uow.equipment.delete(item)
            logger.info("equipment_deleted", equipment_id=equipment_id, inspections=removed)

    @staticmethod
    async def _require(uow: UnitOfWork, equipment_id: int) -> Equipment:
        item = await uow.equipment.get(equipment_id)
        if item is None:
            raise NotFoundError("Equipment not found")
        return item

    @staticmethod
    async def _require_station(uow: UnitOfWork, station_id: int) -> None:
        if await uow.stations.get(station_id) is None:
            raise ValidationError(f"station {station_id} does not exist", field="station_id")
