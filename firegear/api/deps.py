"""API dependency helpers and service providers."""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from firegear import db
from firegear.core.config import get_settings
from firegear.infra.unit_of_work import SqlAlchemyUnitOfWork
from firegear.services.equipment import EquipmentService
from firegear.services.health import HealthService
from firegear.services.inspections import CategoryInspectionService, InspectionService
from firegear.services.schedule import ScheduleService
from firegear.services.stations import StationService
from firegear.services.vendors import VendorService

__all__ = [
    "get_actor",
    "get_station_service",
    "get_equipment_service",
    "get_inspection_service",
    "get_category_inspection_service",
    "get_vendor_service",
    "get_schedule_service",
    "get_health_service",
]


def get_actor(x_actor: str | None = Header(default=None)) -> str:
    """Who to credit in equipment history; the X-Actor header or the configured default."""
    actor = (x_actor or "").strip()
    return actor or get_settings().default_actor


# --- Service providers for DI ---


def _uow_factory() -> SqlAlchemyUnitOfWork:
    # looked up per call so tests can point db at another engine
    return SqlAlchemyUnitOfWork(db.SessionLocal)


def get_station_service() -> StationService:
    return StationService(_uow_factory)


def get_equipment_service() -> EquipmentService:
    return EquipmentService(_uow_factory)


def get_inspection_service() -> InspectionService:
    return InspectionService(_uow_factory)


def get_category_inspection_service() -> CategoryInspectionService:
    return CategoryInspectionService(_uow_factory)


def get_vendor_service() -> VendorService:
    return VendorService(_uow_factory)


def get_schedule_service() -> ScheduleService:
    return ScheduleService(_uow_factory)


def get_health_service(
    session: AsyncSession = Depends(db.get_async_session),
) -> HealthService:
    return HealthService(session)
