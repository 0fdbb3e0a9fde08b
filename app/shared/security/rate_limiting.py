"""
Per-client request throttling with slowapi.

A single default limit covers every route; no per-route decorators.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Build a limiter keyed on the client address.

    Each application gets its own limiter, so counters are never shared
    between app instances.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer a throttled request with 429 and the exceeded limit."""
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
