"""GET /api/v1/audit/logs, GET /api/v1/audit/stats (read-only)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from audit.reporting import DEFAULT_TIMEFRAME, TIMEFRAMES
from core.auth import AdminActor
from core.dependencies import get_audit_reader, get_db_session
from repositories.audit_log_repo import AuditLogFilters
from services.audit_service import get_audit_stats, list_audit_logs

router = APIRouter(prefix="/audit", tags=["audit"])


@router.get("/logs", summary="Audit log (filtered, newest first, paginated)")
async def get_audit_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(25, ge=1, le=200),
    admin_id: Optional[str] = None,
    action: Optional[str] = None,
    target_type: Optional[str] = None,
    source: Optional[str] = None,
    start: Optional[datetime] = Query(None, description="Inclusive lower bound (ISO 8601)"),
    end: Optional[datetime] = Query(None, description="Inclusive upper bound (ISO 8601)"),
    _actor: AdminActor = Depends(get_audit_reader),
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    filters = AuditLogFilters(
        admin_id=admin_id,
        action=action,
        target_type=target_type,
        source=source,
        start_utc=start,
        end_utc=end,
    )
    return await list_audit_logs(session, filters, page=page, limit=limit)


@router.get("/stats", summary="Audit statistics for a timeframe")
async def get_stats(
    timeframe: str = Query(DEFAULT_TIMEFRAME, description="24h | 7d | 30d"),
    _actor: AdminActor = Depends(get_audit_reader),
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    if timeframe not in TIMEFRAMES:
        raise HTTPException(status_code=400, detail=f"timeframe must be one of: {', '.join(TIMEFRAMES)}")
    return await get_audit_stats(session, timeframe)
