"""SQLAlchemy implementation of the vendor repository."""

from __future__ import annotations

from sqlalchemy import or_, select

from firegear.models import Vendor
from firegear.repositories.interfaces import VendorRepository
from firegear.repositories.sqlalchemy.base import SqlAlchemyCrudRepository


class SqlAlchemyVendorRepository(SqlAlchemyCrudRepository[Vendor], VendorRepository):
    model = Vendor

    async def list(self, *, q: str | None = None) -> list[Vendor]:
        stmt = select(Vendor)
        if q:
            ilike = f"%{q}%"
            stmt = stmt.where(
                or_(
                    Vendor.name.ilike(ilike),
                    Vendor.contact_person.ilike(ilike),
                    Vendor.services.ilike(ilike),
                )
            )
        stmt = stmt.order_by(Vendor.name.asc(), Vendor.id.asc())
        return list((await self._session.scalars(stmt)).all())
