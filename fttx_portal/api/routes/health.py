"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 with status "healthy" while the process is up
    - No dataset or template access: health never depends on request history
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from fttx_portal import __version__
from fttx_portal.api.dependencies import get_settings_from_app
from fttx_portal.config import Settings
from fttx_portal.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings_from_app)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        service=settings.service_name,
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )
