"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from classroom_admin.presentation.api.v1.endpoints.health import router as health_router
from classroom_admin.presentation.api.v1.endpoints.activities import router as activities_router
from classroom_admin.presentation.api.v1.endpoints.teachers import router as teachers_router
from classroom_admin.presentation.api.v1.endpoints.notifications import router as notifications_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(activities_router)
router.include_router(teachers_router)
router.include_router(notifications_router)
