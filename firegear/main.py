from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from sentry_sdk.integrations.starlette import StarletteIntegration
from slowapi.errors import RateLimitExceeded
from starlette.middleware.cors import CORSMiddleware

from firegear.api import errors
from firegear.api.routers import (
    category_inspections,
    dashboard,
    equipment,
    health,
    inspections,
    meta,
    stations,
    vendors,
)
from firegear.core.config import get_settings
from firegear.core.startup import run_database_migrations
from firegear.logging import setup_logging
from firegear.middleware.rate_limit import (
    client_ip,
    limiter,
    rate_limit_middleware,
    rate_limited_response,
)
from firegear.middleware.request_id import request_id_middleware
from firegear.middleware.security_headers import security_headers_middleware

openapi_tags = [
    {"name": "stations", "description": "Fire stations"},
    {"name": "equipment", "description": "Equipment inventory, status and audit history"},
    {"name": "inspections", "description": "Inspections scheduled on one item"},
    {"name": "category-inspections", "description": "Inspections covering a whole category"},
    {"name": "vendors", "description": "Outside service vendors"},
    {"name": "schedule", "description": "Upcoming work and dashboard counts"},
    {"name": "meta", "description": "Categories and statuses"},
    {"name": "inspection-templates", "description": "Recurring inspection catalogue"},
    {"name": "health", "description": "Liveness and readiness"},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    run_database_migrations()
    yield


def create_app() -> FastAPI:
    # Initialize structured logging first
    setup_logging()
    settings = get_settings()

    # Sentry stays off unless a DSN is configured
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            release=settings.release,
            integrations=[StarletteIntegration()],
            traces_sample_rate=settings.traces_rate,
            send_default_pii=False,
        )

    app = FastAPI(
        title="Fire Gear Tracker API",
        version="0.1.0",
        description="Equipment inventory and inspection scheduling for fire departments.",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.limiter = limiter

    # registered inside-out: request-id runs outermost
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(security_headers_middleware)
    app.middleware("http")(request_id_middleware)

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    errors.install(app)

    @app.exception_handler(RateLimitExceeded)
    async def _rate_limit_handler(request: Request, exc: RateLimitExceeded):
        info = getattr(request.state, "rate_limit_info", None)
        if not isinstance(info, dict):
            info = {"method": request.method, "ip": client_ip(request), "limit": str(exc.detail)}
        return rate_limited_response(info)

    for module in (
        health,
        stations,
        equipment,
        inspections,
        category_inspections,
        vendors,
        meta,
        dashboard,
    ):
        app.include_router(module.router)

    structlog.get_logger(__name__).info("app_startup", env=settings.app_env)
    return app


app = create_app()
