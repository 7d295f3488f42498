"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports the current number of stored people (no persistence to check)
"""

from fastapi import APIRouter, Depends, status

from people_api.config import get_settings
from people_api.services.person_resource import PersonResource, get_person_resource

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(resource: PersonResource = Depends(get_person_resource)):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "people": len(resource.store),
    }
