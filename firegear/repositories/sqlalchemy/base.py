"""Shared CRUD plumbing for the SQLAlchemy repositories."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from firegear.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyCrudRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, obj_id: int) -> ModelT | None:
        return await self._session.get(self.model, obj_id)

    async def add(self, **fields: Any) -> ModelT:
        obj = self.model(**fields)
        self._session.add(obj)
        await self._flush(obj)
        return obj

    async def update(self, obj: ModelT, **fields: Any) -> ModelT:
        for key, value in fields.items():
            setattr(obj, key, value)
        await self._flush(obj)
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self._session.delete(obj)
        await self._session.flush()

    async def _flush(self, obj: ModelT) -> None:
        # reload server-side defaults (created_at/updated_at) while still in the session
        await self._session.flush()
        await self._session.refresh(obj)
