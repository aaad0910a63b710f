"""SQLAlchemy implementation of the station repository."""

from __future__ import annotations

from sqlalchemy import select

from firegear.models import Station
from firegear.repositories.interfaces import StationRepository
from firegear.repositories.sqlalchemy.base import SqlAlchemyCrudRepository


class SqlAlchemyStationRepository(SqlAlchemyCrudRepository[Station], StationRepository):
    model = Station

    async def list(self) -> list[Station]:
        stmt = select(Station).order_by(Station.name.asc(), Station.id.asc())
        return list((await self._session.scalars(stmt)).all())
