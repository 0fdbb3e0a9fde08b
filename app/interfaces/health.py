"""
Health check router.

Provides liveness endpoints for probes and uptime monitoring.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Depends

from app.core.container import Container
from app.interfaces.blog.dependencies import get_container
from app.interfaces.schemas import HealthResponse, PingResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(container: Container = Depends(get_container)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=container.settings.version)


@router.get("/ping", response_model=PingResponse, summary="Ping")
def ping() -> PingResponse:
    return PingResponse(message="pong")
