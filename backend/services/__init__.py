"""Services: composition layer over repositories, priority, ranking, lifecycle and audit."""

from .audit_service import get_audit_stats, list_audit_logs
from .priority_service import build_dashboard, load_dashboard, load_obstacle_detail, obstacle_detail
from .status_service import change_obstacle_status

__all__ = [
    "build_dashboard",
    "change_obstacle_status",
    "get_audit_stats",
    "list_audit_logs",
    "load_dashboard",
    "load_obstacle_detail",
    "obstacle_detail",
]
