from fastapi import APIRouter, Depends, Path, Query, status

from firegear.api.deps import get_actor, get_equipment_service
from firegear.schemas import (
    EquipmentCreate,
    EquipmentOut,
    EquipmentUpdate,
    ErrorResponse,
    HistoryEntryOut,
    InspectionStatusOut,
    MessageResponse,
    StatusChangeRequest,
)
from firegear.services.equipment import EquipmentService

router = APIRouter(prefix="/api/equipment", tags=["equipment"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "equipment not found"}}
_WRITE_ERRORS = {
    400: {"model": ErrorResponse, "description": "business rule violated"},
    409: {"model": ErrorResponse, "description": "serial number already exists"},
}


@router.get(
    "",
    response_model=list[EquipmentOut],
    summary="List equipment",
    description="Each item carries its computed `inspection_status` (null when nothing is scheduled).",
)
async def list_equipment(
    station_id: int | None = Query(None, ge=1),
    category: str | None = Query(None),
    status_: str | None = Query(None, alias="status"),
    q: str | None = Query(None, max_length=100, description="name or serial number substring"),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.list(station_id=station_id, category=category, status=status_, q=q)


@router.post(
    "",
    response_model=EquipmentOut,
    status_code=status.HTTP_201_CREATED,
    responses=_WRITE_ERRORS,
)
async def create_equipment(
    payload: EquipmentCreate,
    actor: str = Depends(get_actor),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.create(payload, actor=actor)


@router.get("/{equipment_id}", response_model=EquipmentOut, responses=_NOT_FOUND)
async def get_equipment(
    equipment_id: int = Path(..., ge=1),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.get(equipment_id)


@router.put(
    "/{equipment_id}",
    response_model=EquipmentOut,
    responses={**_NOT_FOUND, **_WRITE_ERRORS},
)
async def update_equipment(
    payload: EquipmentUpdate,
    equipment_id: int = Path(..., ge=1),
    actor: str = Depends(get_actor),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.update(equipment_id, payload, actor=actor)


@router.delete("/{equipment_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_equipment(
    equipment_id: int = Path(..., ge=1),
    svc: EquipmentService = Depends(get_equipment_service),
):
    await svc.delete(equipment_id)
    return {"message": "Equipment deleted successfully"}


@router.post(
    "/{equipment_id}/status",
    response_model=EquipmentOut,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse}},
    summary="Change equipment status",
    description="A note is mandatory; it is appended to the equipment notes with a timestamp.",
)
async def change_status(
    payload: StatusChangeRequest,
    equipment_id: int = Path(..., ge=1),
    actor: str = Depends(get_actor),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.change_status(equipment_id, payload, actor=actor)


@router.get(
    "/{equipment_id}/history",
    response_model=list[HistoryEntryOut],
    responses=_NOT_FOUND,
    summary="Equipment audit trail",
)
async def equipment_history(
    equipment_id: int = Path(..., ge=1),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.history(equipment_id)


@router.get(
    "/{equipment_id}/inspection-status",
    response_model=InspectionStatusOut | None,
    responses=_NOT_FOUND,
    summary="Most urgent open inspection",
)
async def equipment_inspection_status(
    equipment_id: int = Path(..., ge=1),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.inspection_status(equipment_id)
