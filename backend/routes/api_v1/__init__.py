"""API v1: priority dashboard, status transitions, lifecycle table and audit endpoints."""

from fastapi import APIRouter

from .audit import router as audit_router
from .lifecycle import router as lifecycle_router
from .meta import router as meta_router
from .obstacles import router as obstacles_router
from .priority import router as priority_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(meta_router)
router.include_router(priority_router)
router.include_router(obstacles_router)
router.include_router(lifecycle_router)
router.include_router(audit_router)

api_v1_router = router
