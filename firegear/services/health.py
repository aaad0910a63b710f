from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


class HealthService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def database(self) -> dict:
        """Round-trip a trivial query and report which backend answered."""
        await self._session.execute(text("SELECT 1"))
        return {"status": "ok", "database": self._session.get_bind().dialect.name}
