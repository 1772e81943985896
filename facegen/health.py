"""
Health check endpoints.

Provides liveness probes for container orchestration.
"""

from fastapi import APIRouter

from .config import settings
from .models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns service health status and configuration info"
)
async def health() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status and metadata
    """
    return HealthResponse(
        status="ok",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        environment=settings.ENVIRONMENT,
    )


@router.get(
    "/health/live",
    summary="Liveness probe",
    description="Simple check that the service is running"
)
async def liveness():
    """Kubernetes liveness probe."""
    return {"status": "alive"}
