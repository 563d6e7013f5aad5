"""
Pure aggregation for audit statistics. No I/O; deterministic for fixed input and now.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from audit.model import AuditLogEntry, AuditSource

TIMEFRAMES: Dict[str, timedelta] = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_TIMEFRAME = "7d"
TOP_ADMINS_LIMIT = 5
RECENT_ACTIONS_LIMIT = 10


def timeframe_start(timeframe: str, now_utc: Optional[datetime] = None) -> datetime:
    """Start of the window ending at now_utc. Raises ValueError for an unknown timeframe."""
    if timeframe not in TIMEFRAMES:
        raise ValueError(f"timeframe must be one of: {', '.join(TIMEFRAMES)}")
    now = now_utc or datetime.now(timezone.utc)
    return now - TIMEFRAMES[timeframe]


@dataclass
class AuditStats:
    total_actions: int
    web_actions: int
    mobile_actions: int
    actions_by_type: Dict[str, int] = field(default_factory=dict)
    top_admins: List[Dict[str, Any]] = field(default_factory=list)
    recent_actions: List[AuditLogEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_actions": self.total_actions,
            "web_actions": self.web_actions,
            "mobile_actions": self.mobile_actions,
            "actions_by_type": dict(self.actions_by_type),
            "actions_by_source": {
                AuditSource.WEB_PORTAL.value: self.web_actions,
                AuditSource.MOBILE_APP.value: self.mobile_actions,
            },
            "top_admins": list(self.top_admins),
            "recent_actions": [e.model_dump(mode="json") for e in self.recent_actions],
        }


def compute_audit_stats(entries: List[AuditLogEntry]) -> AuditStats:
    """
    Aggregate entries (expected newest first): totals, web vs mobile, per action,
    top five admins by action count (ties keep first-seen order), ten most recent.
    """
    total = len(entries)
    mobile = sum(1 for e in entries if e.source == AuditSource.MOBILE_APP)

    by_type: Dict[str, int] = {}
    by_admin: Dict[str, int] = {}
    for e in entries:
        by_type[e.action] = by_type.get(e.action, 0) + 1
        admin_key = e.admin_email or e.admin_id
        by_admin[admin_key] = by_admin.get(admin_key, 0) + 1

    top_admins = [
        {"admin": admin, "action_count": count}
        for admin, count in sorted(by_admin.items(), key=lambda kv: -kv[1])[:TOP_ADMINS_LIMIT]
    ]

    return AuditStats(
        total_actions=total,
        web_actions=total - mobile,
        mobile_actions=mobile,
        actions_by_type=by_type,
        top_admins=top_admins,
        recent_actions=entries[:RECENT_ACTIONS_LIMIT],
    )
