"""Health check endpoint: no dependencies, always available."""

from fastapi import APIRouter

from classroom_admin.config import get_settings
from classroom_admin.domain.resources import all_resources

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "apper_configured": bool(settings.apper_project_id and settings.apper_public_key),
        "resources": [descriptor.name for descriptor in all_resources()],
    }
