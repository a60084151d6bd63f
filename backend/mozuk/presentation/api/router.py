"""Top-level API router — everything is served under /api/<version>."""

from fastapi import APIRouter

from mozuk.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
