"""Vendor directory use cases."""

from __future__ import annotations

from collections.abc import Callable

from firegear.core.exceptions import NotFoundError
from firegear.infra.unit_of_work import UnitOfWork
from firegear.models import Vendor
from firegear.schemas import VendorCreate, VendorOut, VendorUpdate
from firegear.services.mappers import map_vendor
from firegear.services.validation import changes_from

UnitOfWorkFactory = Callable[[], UnitOfWork]


class VendorService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(self, *, q: str | None = None) -> list[VendorOut]:
        async with self._uow_factory() as uow:
            return [map_vendor(v) for v in await uow.vendors.list(q=(q or "").strip() or None)]

    async def get(self, vendor_id: int) -> VendorOut:
        async with self._uow_factory() as uow:
            return map_vendor(await self._require(uow, vendor_id))

    async def create(self, payload: VendorCreate) -> VendorOut:
        async with self._uow_factory() as uow:
            # json mode turns EmailStr/HttpUrl into plain strings for the columns
            vendor = await uow.vendors.add(**payload.model_dump(mode="json"))
            return map_vendor(vendor)

    async def update(self, vendor_id: int, payload: VendorUpdate) -> VendorOut:
        changes = changes_from(payload, required=("name",), mode="json")
        async with self._uow_factory() as uow:
            vendor = await self._require(uow, vendor_id)
            vendor = await uow.vendors.update(vendor, **changes)
            return map_vendor(vendor)

    async def delete(self, vendor_id: int) -> None:
        async with self._uow_factory() as uow:
            await uow.vendors.delete(await self._require(uow, vendor_id))

    @staticmethod
    async def _require(uow: UnitOfWork, vendor_id: int) -> Vendor:
        vendor = await uow.vendors.get(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor not found")
        return vendor
