"""SQLAlchemy implementations of the inspection repositories."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select

from firegear.models import CategoryInspection, Inspection
from firegear.repositories.interfaces import (
    CategoryInspectionRepository,
    InspectionRepository,
)
from firegear.repositories.sqlalchemy.base import SqlAlchemyCrudRepository


class SqlAlchemyInspectionRepository(SqlAlchemyCrudRepository[Inspection], InspectionRepository):
    model = Inspection

    async def list(self, *, equipment_ids: Sequence[int] | None = None) -> list[Inspection]:
        stmt = select(Inspection)
        if equipment_ids is not None:
            if not equipment_ids:
                return []
            stmt = stmt.where(Inspection.equipment_id.in_(list(equipment_ids)))
        stmt = stmt.order_by(Inspection.due_date.asc(), Inspection.id.asc())
        return list((await self._session.scalars(stmt)).all())

    async def delete_for_equipment(self, equipment_ids: Sequence[int]) -> int:
        if not equipment_ids:
            return 0
        result = await self._session.execute(
            delete(Inspection).where(Inspection.equipment_id.in_(list(equipment_ids)))
        )
        return int(result.rowcount or 0)


class SqlAlchemyCategoryInspectionRepository(
    SqlAlchemyCrudRepository[CategoryInspection], CategoryInspectionRepository
):
    model = CategoryInspection

    async def list(
        self, *, category: str | None = None, station_id: int | None = None
    ) -> list[CategoryInspection]:
        stmt = select(CategoryInspection)
        if category:
            stmt = stmt.where(CategoryInspection.category == category)
        if station_id is not None:
            stmt = stmt.where(CategoryInspection.station_id == station_id)
        stmt = stmt.order_by(CategoryInspection.due_date.asc(), CategoryInspection.id.asc())
        return list((await self._session.scalars(stmt)).all())

    async def delete_for_station(self, station_id: int) -> int:
        result = await self._session.execute(
            delete(CategoryInspection).where(CategoryInspection.station_id == station_id)
        )
        return int(result.rowcount or 0)
