from fastapi import APIRouter, Depends, Path, Query, status

from firegear.api.deps import get_vendor_service
from firegear.schemas import ErrorResponse, MessageResponse, VendorCreate, VendorOut, VendorUpdate
from firegear.services.vendors import VendorService

router = APIRouter(prefix="/api/vendors", tags=["vendors"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "vendor not found"}}


@router.get(
    "",
    response_model=list[VendorOut],
    summary="List vendors",
    description="`q` matches name, contact person and services (case-insensitive substring).",
)
async def list_vendors(
    q: str | None = Query(None, max_length=100),
    svc: VendorService = Depends(get_vendor_service),
):
    return await svc.list(q=q)


@router.post("", response_model=VendorOut, status_code=status.HTTP_201_CREATED)
async def create_vendor(payload: VendorCreate, svc: VendorService = Depends(get_vendor_service)):
    return await svc.create(payload)


@router.get("/{vendor_id}", response_model=VendorOut, responses=_NOT_FOUND)
async def get_vendor(
    vendor_id: int = Path(..., ge=1), svc: VendorService = Depends(get_vendor_service)
):
    return await svc.get(vendor_id)


@router.put("/{vendor_id}", response_model=VendorOut, responses=_NOT_FOUND)
async def update_vendor(
    payload: VendorUpdate,
    vendor_id: int = Path(..., ge=1),
    svc: VendorService = Depends(get_vendor_service),
):
    return await svc.update(vendor_id, payload)


@router.delete("/{vendor_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_vendor(
    vendor_id: int = Path(..., ge=1), svc: VendorService = Depends(get_vendor_service)
):
    await svc.delete(vendor_id)
    return {"message": "Vendor deleted successfully"}
