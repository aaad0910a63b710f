from fastapi import APIRouter, Depends, Query

from firegear.api.deps import get_schedule_service
from firegear.schemas import ScheduleResponse
from firegear.schemas.meta import DashboardSummary
from firegear.services.schedule import ScheduleService

router = APIRouter(prefix="/api", tags=["schedule"])


@router.get(
    "/schedule",
    response_model=ScheduleResponse,
    summary="Open inspections by due date",
    description=(
        "Individual and category inspections that are still open, each with its own "
        "bucket. `within_days` limits the horizon; past-due work is always included."
    ),
)
async def schedule(
    within_days: int | None = Query(None, ge=0, le=3650),
    svc: ScheduleService = Depends(get_schedule_service),
):
    return await svc.upcoming(within_days=within_days)


@router.get("/dashboard", response_model=DashboardSummary, summary="Inventory summary counts")
async def dashboard(svc: ScheduleService = Depends(get_schedule_service)):
    return await svc.dashboard()
