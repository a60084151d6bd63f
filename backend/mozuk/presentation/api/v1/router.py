"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from mozuk.presentation.api.v1.endpoints.health import router as health_router
from mozuk.presentation.api.v1.endpoints.auth import router as auth_router
from mozuk.presentation.api.v1.endpoints.clients import router as clients_router
from mozuk.presentation.api.v1.endpoints.projects import router as projects_router
from mozuk.presentation.api.v1.endpoints.documents import router as documents_router
from mozuk.presentation.api.v1.endpoints.dashboard import router as dashboard_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(documents_router)
router.include_router(dashboard_router)
