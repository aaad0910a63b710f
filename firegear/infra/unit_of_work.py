"""Unit of Work: one session and one transaction per use case."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from firegear.core.exceptions import InfrastructureError
from firegear.repositories.interfaces import (
    CategoryInspectionRepository,
    EquipmentRepository,
    InspectionRepository,
    StationRepository,
    VendorRepository,
)
from firegear.repositories.sqlalchemy import (
    SqlAlchemyCategoryInspectionRepository,
    SqlAlchemyEquipmentRepository,
    SqlAlchemyInspectionRepository,
    SqlAlchemyStationRepository,
    SqlAlchemyVendorRepository,
)


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    """Repository boundary exposed to services.

    Leaving the context commits; an exception rolls everything back, so a
    category-inspection completion and its history fan-out land together.
    """

    stations: StationRepository
    equipment: EquipmentRepository
    inspections: InspectionRepository
    category_inspections: CategoryInspectionRepository
    vendors: VendorRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        session = self._session_factory()
        self._session = session
        self.stations = SqlAlchemyStationRepository(session)
        self.equipment = SqlAlchemyEquipmentRepository(session)
        self.inspections = SqlAlchemyInspectionRepository(session)
        self.category_inspections = SqlAlchemyCategoryInspectionRepository(session)
        self.vendors = SqlAlchemyVendorRepository(session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is None:
            return
        try:
            if exc_type:
                await self._session.rollback()
            else:
                await self._session.commit()
        except SQLAlchemyError as db_exc:
            raise InfrastructureError("database unavailable") from db_exc
        finally:
            await self._session.close()
            self._session = None
        if isinstance(exc, SQLAlchemyError):
            raise InfrastructureError("database unavailable") from exc

    async def commit(self) -> None:
        if self._session is not None:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork session is not initialized. Use within context manager.")
        return self._session
