"""Station use cases."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from firegear.core.exceptions import NotFoundError
from firegear.infra.unit_of_work import UnitOfWork
from firegear.schemas import StationCreate, StationOut, StationUpdate
from firegear.services.mappers import map_station
from firegear.services.validation import changes_from

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = structlog.get_logger(__name__)


class StationService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(self) -> list[StationOut]:
        async with self._uow_factory() as uow:
            return [map_station(s) for s in await uow.stations.list()]

    async def get(self, station_id: int) -> StationOut:
        async with self._uow_factory() as uow:
            station = await uow.stations.get(station_id)
            if station is None:
                raise NotFoundError("Station not found")
            return map_station(station)

    async def create(self, payload: StationCreate) -> StationOut:
        async with self._uow_factory() as uow:
            station = await uow.stations.add(**payload.model_dump())
            logger.info("station_created", station_id=station.id)
            return map_station(station)

    async def update(self, station_id: int, payload: StationUpdate) -> StationOut:
        async with self._uow_factory() as uow:
            station = await uow.stations.get(station_id)
            if station is None:
                raise NotFoundError("Station not found")
            changes = changes_from(payload, required=("name",))
            station = await uow.stations.update(station, **changes)
            return map_station(station)

    async def delete(self, station_id: int) -> None:
        """Delete a station with its equipment, their inspections and station-scoped rules."""
        async with self._uow_factory() as uow:
            station = await uow.stations.get(station_id)
            if station is None:
                raise NotFoundError("Station not found")

            equipment = await uow.equipment.list(station_id=station_id)
            equipment_ids = [int(item.id) for item in equipment]
            removed_inspections = await uow.inspections.delete_for_equipment(equipment_ids)
            for item in equipment:
                await uow.equipment.delete(item)
            removed_rules = await uow.category_inspections.delete_for_station(station_id)
            await uow.stations.delete(station)

            logger.info(
                "station_deleted",
                station_id=station_id,
                equipment=len(equipment_ids),
                inspections=removed_inspections,
                category_inspections=removed_rules,
            )
