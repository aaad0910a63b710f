"""SQLAlchemy implementation of the equipment repository."""

from __future__ import annotations

from sqlalchemy import or_, select

from firegear.models import Equipment
from firegear.repositories.interfaces import EquipmentRepository
from firegear.repositories.sqlalchemy.base import SqlAlchemyCrudRepository


class SqlAlchemyEquipmentRepository(SqlAlchemyCrudRepository[Equipment], EquipmentRepository):
    model = Equipment

    async def list(
        self,
        *,
        station_id: int | None = None,
        category: str | None = None,
        status: str | None = None,
        q: str | None = None,
    ) -> list[Equipment]:
        stmt = select(Equipment)
        if station_id is not None:
            stmt = stmt.where(Equipment.station_id == station_id)
        if category:
            stmt = stmt.where(Equipment.category == category)
        if status:
            stmt = stmt.where(Equipment.status == status)
        if q:
            ilike = f"%{q}%"
            stmt = stmt.where(
                or_(Equipment.name.ilike(ilike), Equipment.serial_number.ilike(ilike))
            )
        stmt = stmt.order_by(Equipment.created_at.desc(), Equipment.id.desc())
        return list((await self._session.scalars(stmt)).all())

    async def get_by_serial(self, serial_number: str) -> Equipment | None:
        return await self._session.scalar(
            select(Equipment).where(Equipment.serial_number == serial_number)
        )

    async def list_matching(self, *, category: str, station_id: int | None) -> list[Equipment]:
        stmt = select(Equipment).where(Equipment.category == category)
        if station_id is not None:
            stmt = stmt.where(Equipment.station_id == station_id)
        stmt = stmt.order_by(Equipment.id.asc())
        return list((await self._session.scalars(stmt)).all())
