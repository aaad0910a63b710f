"""Per-client, per-method request throttling.

Limits are checked with the `limits` moving-window strategy directly so
reads and writes can carry different budgets without decorating every
route. The slowapi `Limiter` is attached to `app.state` and its
`RateLimitExceeded` is the exception type the app handler renders.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypedDict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from limits import parse as parse_limit
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter
from slowapi import Limiter

READ_METHODS = frozenset({"GET", "HEAD"})
WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class RateLimitInfo(TypedDict, total=False):
    method: str
    ip: str
    limit: str


def client_ip(request: Request) -> str:
    # first hop of X-Forwarded-For, else the ASGI peer
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "local"


limiter = Limiter(key_func=client_ip)

# single-process deployment; a shared backend would need Redis storage
_storage = MemoryStorage()
_rate = MovingWindowRateLimiter(_storage)


def reset() -> None:
    _storage.reset()


def _enabled() -> bool:
    if os.getenv("RATE_LIMIT_ENABLED") in {"1", "true", "TRUE"}:
        return True
    if os.getenv("TESTING"):
        return False
    return True


def limit_for_method(method: str) -> str | None:
    m = method.upper()
    if m in READ_METHODS:
        return os.getenv("RATE_LIMIT_READ", "120/minute")
    if m in WRITE_METHODS:
        return os.getenv("RATE_LIMIT_WRITE", "60/minute")
    # OPTIONS (CORS preflight) is never throttled
    return None


def rate_limited_response(info: RateLimitInfo) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={
            "error": {"code": "rate_limited", "message": "Too Many Requests", "detail": info}
        },
    )


async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
    if not _enabled():
        return await call_next(request)

    limit_str = limit_for_method(request.method)
    if not limit_str:
        return await call_next(request)

    ip = client_ip(request)
    key = f"ip:{ip}|m:{request.method.upper()}"
    if not _rate.hit(parse_limit(limit_str), key):
        info: RateLimitInfo = {"method": request.method.upper(), "ip": ip, "limit": limit_str}
        request.state.rate_limit_info = info
        return rate_limited_response(info)

    response = await call_next(request)
    response.headers.setdefault("X-RateLimit-Limit", limit_str)
    return response
