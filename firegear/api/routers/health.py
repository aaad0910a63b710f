from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from firegear.api.deps import get_health_service
from firegear.api.errors import error_body
from firegear.core.config import get_settings
from firegear.core.startup import is_migration_completed, last_migration_error
from firegear.schemas import ErrorResponse
from firegear.schemas.meta import DatabaseHealthResponse, HealthResponse
from firegear.services.health import HealthService

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns 200 without touching the database.",
)
async def health():
    return {
        "status": "ok",
        "env": get_settings().app_env,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get(
    "/database",
    response_model=DatabaseHealthResponse,
    summary="Readiness probe",
    description="Runs SELECT 1 against the database; 503 while migrations are pending.",
    responses={503: {"model": ErrorResponse, "description": "database unavailable"}},
)
async def database_health(svc: HealthService = Depends(get_health_service)):
    if not is_migration_completed():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_body(
                "migrations_pending",
                "Database migrations are still running",
                last_migration_error(),
            ),
        )
    return await svc.database()
