from fastapi import APIRouter, Body, Depends, Path, Query, status

from firegear.api.deps import get_actor, get_category_inspection_service
from firegear.schemas import (
    CategoryInspectionCompletionOut,
    CategoryInspectionCreate,
    CategoryInspectionOut,
    CategoryInspectionUpdate,
    CompleteInspectionRequest,
    EquipmentOut,
    ErrorResponse,
    MessageResponse,
)
from firegear.services.inspections import CategoryInspectionService

router = APIRouter(prefix="/api/category-inspections", tags=["category-inspections"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "category inspection not found"}}


@router.get("", response_model=list[CategoryInspectionOut], summary="List category inspections")
async def list_category_inspections(
    category: str | None = Query(None),
    station_id: int | None = Query(None, ge=1),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.list(category=category, station_id=station_id)


@router.post(
    "",
    response_model=CategoryInspectionOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    description="Omit `station_id` to apply the rule at every station.",
)
async def create_category_inspection(
    payload: CategoryInspectionCreate,
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.create(payload)


@router.get("/{inspection_id}", response_model=CategoryInspectionOut, responses=_NOT_FOUND)
async def get_category_inspection(
    inspection_id: int = Path(..., ge=1),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.get(inspection_id)


@router.put("/{inspection_id}", response_model=CategoryInspectionOut, responses=_NOT_FOUND)
async def update_category_inspection(
    payload: CategoryInspectionUpdate,
    inspection_id: int = Path(..., ge=1),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.update(inspection_id, payload)


@router.delete("/{inspection_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_category_inspection(
    inspection_id: int = Path(..., ge=1),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    await svc.delete(inspection_id)
    return {"message": "Category inspection deleted successfully"}


@router.get(
    "/{inspection_id}/equipment",
    response_model=list[EquipmentOut],
    responses=_NOT_FOUND,
    summary="Equipment currently covered by the rule",
)
async def category_inspection_equipment(
    inspection_id: int = Path(..., ge=1),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.matched_equipment(inspection_id)


@router.post(
    "/{inspection_id}/complete",
    response_model=CategoryInspectionCompletionOut,
    responses={**_NOT_FOUND, 409: {"model": ErrorResponse, "description": "already completed"}},
    summary="Complete a category inspection",
    description="Advances the rule and writes a history entry to every matching item "
    "in one transaction.",
)
async def complete_category_inspection(
    inspection_id: int = Path(..., ge=1),
    payload: CompleteInspectionRequest | None = Body(None),
    actor: str = Depends(get_actor),
    svc: CategoryInspectionService = Depends(get_category_inspection_service),
):
    return await svc.complete(
        inspection_id, payload or CompleteInspectionRequest(), actor=actor
    )
