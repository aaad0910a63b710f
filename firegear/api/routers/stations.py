from fastapi import APIRouter, Depends, Path, status

from firegear.api.deps import get_station_service
from firegear.schemas import (
    ErrorResponse,
    MessageResponse,
    StationCreate,
    StationOut,
    StationUpdate,
)
from firegear.services.stations import StationService

router = APIRouter(prefix="/api/stations", tags=["stations"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "station not found"}}


@router.get("", response_model=list[StationOut], summary="List stations")
async def list_stations(svc: StationService = Depends(get_station_service)):
    return await svc.list()


@router.post(
    "",
    response_model=StationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a station",
)
async def create_station(
    payload: StationCreate, svc: StationService = Depends(get_station_service)
):
    return await svc.create(payload)


@router.get("/{station_id}", response_model=StationOut, responses=_NOT_FOUND)
async def get_station(
    station_id: int = Path(..., ge=1), svc: StationService = Depends(get_station_service)
):
    return await svc.get(station_id)


@router.put("/{station_id}", response_model=StationOut, responses=_NOT_FOUND)
async def update_station(
    payload: StationUpdate,
    station_id: int = Path(..., ge=1),
    svc: StationService = Depends(get_station_service),
):
    return await svc.update(station_id, payload)


@router.delete(
    "/{station_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete a station",
    description="Also removes the station's equipment, their inspections and "
    "category inspections scoped to this station.",
)
async def delete_station(
    station_id: int = Path(..., ge=1), svc: StationService = Depends(get_station_service)
):
    await svc.delete(station_id)
    return {"message": "Station deleted successfully"}
