"""GET /api/v1/meta/version: application version and environment."""

from __future__ import annotations

from fastapi import APIRouter

from core.config import get_settings
from version import get_version

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/version", summary="Application version")
def meta_version() -> dict:
    """Return version from repo root VERSION file plus app name and environment."""
    settings = get_settings()
    return {"version": get_version(), "app_name": settings.app_name, "env": settings.env}
