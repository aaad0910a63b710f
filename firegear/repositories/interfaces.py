"""Repository abstractions for the service layer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from firegear.models import CategoryInspection, Equipment, Inspection, Station, Vendor


class StationRepository(Protocol):
    async def list(self) -> list[Station]: ...

    async def get(self, station_id: int) -> Station | None: ...

    async def add(self, **fields: Any) -> Station: ...

    async def update(self, station: Station, **fields: Any) -> Station: ...

    async def delete(self, station: Station) -> None: ...


class EquipmentRepository(Protocol):
    async def list(
        self,
        *,
        station_id: int | None = None,
        category: str | None = None,
        status: str | None = None,
        q: str | None = None,
    ) -> list[Equipment]: ...

    async def get(self, equipment_id: int) -> Equipment | None: ...

    async def get_by_serial(self, serial_number: str) -> Equipment | None: ...

    async def list_matching(self, *, category: str, station_id: int | None) -> list[Equipment]:
        """Equipment of a category, optionally restricted to one station."""
        ...

    async def add(self, **fields: Any) -> Equipment: ...

    async def update(self, equipment: Equipment, **fields: Any) -> Equipment: ...

    async def delete(self, equipment: Equipment) -> None: ...


class InspectionRepository(Protocol):
    async def list(self, *, equipment_ids: Sequence[int] | None = None) -> list[Inspection]: ...

    async def get(self, inspection_id: int) -> Inspection | None: ...

    async def add(self, **fields: Any) -> Inspection: ...

    async def update(self, inspection: Inspection, **fields: Any) -> Inspection: ...

    async def delete(self, inspection: Inspection) -> None: ...

    async def delete_for_equipment(self, equipment_ids: Sequence[int]) -> int: ...


class CategoryInspectionRepository(Protocol):
    async def list(
        self, *, category: str | None = None, station_id: int | None = None
    ) -> list[CategoryInspection]: ...

    async def get(self, inspection_id: int) -> CategoryInspection | None: ...

    async def add(self, **fields: Any) -> CategoryInspection: ...

    async def update(self, inspection: CategoryInspection, **fields: Any) -> CategoryInspection: ...

    async def delete(self, inspection: CategoryInspection) -> None: ...

    async def delete_for_station(self, station_id: int) -> int: ...


class VendorRepository(Protocol):
    async def list(self, *, q: str | None = None) -> list[Vendor]: ...

    async def get(self, vendor_id: int) -> Vendor | None: ...

    async def add(self, **fields: Any) -> Vendor: ...

    async def update(self, vendor: Vendor, **fields: Any) -> Vendor: ...

    async def delete(self, vendor: Vendor) -> None: ...
