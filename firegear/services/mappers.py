"""Map ORM rows into engine value objects and API schemas."""

from __future__ import annotations

from firegear.models import CategoryInspection, Equipment, Inspection, Station, Vendor
from firegear.schemas import (
    CategoryInspectionOut,
    EquipmentOut,
    HistoryEntryOut,
    InspectionOut,
    InspectionStatusOut,
    StationOut,
    VendorOut,
)
from firegear.services.inspection_status import (
    CategoryRule,
    EquipmentRef,
    IndividualInspection,
    InspectionStatus,
    StationScope,
)
from firegear.utils.datetime import as_utc


def to_equipment_ref(item: Equipment) -> EquipmentRef:
    return EquipmentRef(id=int(item.id), category=item.category, station_id=item.station_id)


def to_individual(row: Inspection) -> IndividualInspection:
    return IndividualInspection(
        id=int(row.id),
        equipment_id=int(row.equipment_id),
        name=row.name,
        due_date=row.due_date,
        template_id=row.template_id,
        status=row.status,
    )


def to_rule(row: CategoryInspection) -> CategoryRule:
    scope = StationScope.all() if row.station_id is None else StationScope.only(row.station_id)
    return CategoryRule(
        id=int(row.id),
        category=row.category,
        scope=scope,
        name=row.name,
        due_date=row.due_date,
        template_id=row.template_id,
        status=row.status,
    )


def map_status(result: InspectionStatus | None) -> InspectionStatusOut | None:
    if result is None:
        return None
    return InspectionStatusOut(
        status=result.status.value,
        days=result.days,
        due_date=result.due_date,
        inspection_id=result.source.id,
        inspection_kind=result.source.kind,
        inspection_name=result.source.name,
    )


def map_station(row: Station) -> StationOut:
    out = StationOut.model_validate(row)
    return out.model_copy(
        update={"created_at": as_utc(row.created_at), "updated_at": as_utc(row.updated_at)}
    )


def map_equipment(row: Equipment, status: InspectionStatus | None = None) -> EquipmentOut:
    return EquipmentOut(
        id=int(row.id),
        name=row.name,
        serial_number=row.serial_number,
        manufacturer=row.manufacturer,
        model=row.model,
        category=row.category,
        subcategory=row.subcategory,
        station_id=int(row.station_id),
        status=row.status,
        notes=row.notes,
        history=[HistoryEntryOut.model_validate(e) for e in (row.history or [])],
        inspection_status=map_status(status),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def map_inspection(row: Inspection) -> InspectionOut:
    out = InspectionOut.model_validate(row)
    return out.model_copy(
        update={
            "last_completed": as_utc(row.last_completed),
            "created_at": as_utc(row.created_at),
            "updated_at": as_utc(row.updated_at),
        }
    )


def map_category_inspection(row: CategoryInspection) -> CategoryInspectionOut:
    return CategoryInspectionOut(
        id=int(row.id),
        category=row.category,
        station_id=row.station_id,
        all_stations=row.station_id is None,
        name=row.name,
        template_id=row.template_id,
        due_date=row.due_date,
        last_completed=as_utc(row.last_completed),
        status=row.status,
        notes=row.notes,
        external_vendor=bool(row.external_vendor),
        vendor_contact=row.vendor_contact,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def map_vendor(row: Vendor) -> VendorOut:
    return VendorOut.model_validate(row)
