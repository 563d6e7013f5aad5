"""Audit log queries: filtered pagination and timeframe statistics."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from audit.reporting import compute_audit_stats, timeframe_start
from repositories.audit_log_repo import AuditLogFilters, AuditLogRepository

# Upper bound on entries pulled for one statistics window
STATS_ENTRY_LIMIT = 1000


async def list_audit_logs(
    session: AsyncSession,
    filters: AuditLogFilters,
    page: int = 1,
    limit: int = 25,
) -> Dict[str, Any]:
    """One page of matching entries (newest first) with pagination info."""
    page = max(1, page)
    limit = max(1, limit)
    repo = AuditLogRepository(session)
    total = await repo.count_entries(filters)
    entries = await repo.list_entries(filters, limit=limit, offset=(page - 1) * limit)
    total_pages = math.ceil(total / limit) if total else 0
    return {
        "logs": [e.model_dump(mode="json") for e in entries],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": total_pages,
            "has_next": page < total_pages,
            "has_prev": page > 1,
        },
    }


async def get_audit_stats(
    session: AsyncSession,
    timeframe: str = "7d",
    now_utc: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Statistics over the last 24h, 7d or 30d. Raises ValueError for other timeframes."""
    now = now_utc or datetime.now(timezone.utc)
    start = timeframe_start(timeframe, now)
    entries = await AuditLogRepository(session).list_entries(
        AuditLogFilters(start_utc=start, end_utc=now),
        limit=STATS_ENTRY_LIMIT,
    )
    return {"timeframe": timeframe, **compute_audit_stats(entries).to_dict()}
