from fastapi import APIRouter, Body, Depends, Path, Query, status

from firegear.api.deps import get_actor, get_inspection_service
from firegear.schemas import (
    CompleteInspectionRequest,
    ErrorResponse,
    InspectionCompletionOut,
    InspectionCreate,
    InspectionOut,
    InspectionUpdate,
    MessageResponse,
)
from firegear.services.inspections import InspectionService

router = APIRouter(prefix="/api/inspections", tags=["inspections"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "inspection not found"}}


@router.get("", response_model=list[InspectionOut], summary="List individual inspections")
async def list_inspections(
    equipment_id: int | None = Query(None, ge=1),
    svc: InspectionService = Depends(get_inspection_service),
):
    return await svc.list(equipment_id=equipment_id)


@router.post(
    "",
    response_model=InspectionOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    description="Name defaults to the template name; `external_vendor` to the template flag.",
)
async def create_inspection(
    payload: InspectionCreate,
    actor: str = Depends(get_actor),
    svc: InspectionService = Depends(get_inspection_service),
):
    return await svc.create(payload, actor=actor)


@router.get("/{inspection_id}", response_model=InspectionOut, responses=_NOT_FOUND)
async def get_inspection(
    inspection_id: int = Path(..., ge=1),
    svc: InspectionService = Depends(get_inspection_service),
):
    return await svc.get(inspection_id)


@router.put("/{inspection_id}", response_model=InspectionOut, responses=_NOT_FOUND)
async def update_inspection(
    payload: InspectionUpdate,
    inspection_id: int = Path(..., ge=1),
    svc: InspectionService = Depends(get_inspection_service),
):
    return await svc.update(inspection_id, payload)


@router.delete("/{inspection_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_inspection(
    inspection_id: int = Path(..., ge=1),
    actor: str = Depends(get_actor),
    svc: InspectionService = Depends(get_inspection_service),
):
    await svc.delete(inspection_id, actor=actor)
    return {"message": "Inspection deleted successfully"}


@router.post(
    "/{inspection_id}/complete",
    response_model=InspectionCompletionOut,
    responses={**_NOT_FOUND, 409: {"model": ErrorResponse, "description": "already completed"}},
    summary="Complete an inspection",
    description=(
        "Advances the due date by the template interval. Without a template, "
        "`next_due_date` schedules the next occurrence; otherwise the inspection is closed."
    ),
)
async def complete_inspection(
    inspection_id: int = Path(..., ge=1),
    payload: CompleteInspectionRequest | None = Body(None),
    actor: str = Depends(get_actor),
    svc: InspectionService = Depends(get_inspection_service),
):
    return await svc.complete(
        inspection_id, payload or CompleteInspectionRequest(), actor=actor
    )
