"""
Audit trail models: StatusChange facts and the persisted audit log entry shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from domain.obstacles.types import ObstacleStatus


class AuditAction(str, Enum):
    """Audit actions recorded for obstacle review on the priority dashboard."""

    OBSTACLE_VERIFIED = "priority_obstacle_verified"
    OBSTACLE_REJECTED = "priority_obstacle_rejected"
    OBSTACLE_RESOLVED = "priority_obstacle_resolved"
    OBSTACLE_REOPENED = "priority_obstacle_reopened"
    DASHBOARD_ACCESSED = "priority_dashboard_accessed"


class TargetType(str, Enum):
    OBSTACLE = "obstacle"
    USER = "user"
    ADMIN = "admin"
    SYSTEM = "system"


class AuditSource(str, Enum):
    WEB_PORTAL = "web_portal"
    MOBILE_APP = "mobile_app"


ACTION_DESCRIPTIONS: Dict[AuditAction, str] = {
    AuditAction.OBSTACLE_VERIFIED: "Verified obstacle via Priority Dashboard",
    AuditAction.OBSTACLE_REJECTED: "Rejected obstacle via Priority Dashboard",
    AuditAction.OBSTACLE_RESOLVED: "Resolved obstacle via Priority Dashboard",
    AuditAction.OBSTACLE_REOPENED: "Reverted obstacle to pending via Priority Dashboard",
    AuditAction.DASHBOARD_ACCESSED: "Accessed Priority Analysis Dashboard",
}

_ACTION_BY_TARGET_STATUS: Dict[ObstacleStatus, AuditAction] = {
    ObstacleStatus.VERIFIED: AuditAction.OBSTACLE_VERIFIED,
    ObstacleStatus.FALSE_REPORT: AuditAction.OBSTACLE_REJECTED,
    ObstacleStatus.RESOLVED: AuditAction.OBSTACLE_RESOLVED,
    ObstacleStatus.PENDING: AuditAction.OBSTACLE_REOPENED,
}


def action_for_status(to_status: ObstacleStatus) -> AuditAction:
    """Audit action for a transition into to_status. Raises KeyError for a status no transition can target."""
    return _ACTION_BY_TARGET_STATUS[to_status]


@dataclass(frozen=True)
class ObstacleContext:
    """Snapshot of the obstacle at transition time, carried into audit metadata."""

    obstacle_type: str
    severity: str
    priority_score: Optional[int] = None
    priority_category: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    barangay: Optional[str] = None


@dataclass(frozen=True)
class StatusChange:
    """Immutable record of one accepted status transition."""

    obstacle_id: str
    from_status: ObstacleStatus
    to_status: ObstacleStatus
    actor_id: str
    notes: str
    timestamp: datetime  # UTC
    actor_email: Optional[str] = None
    context: Optional[ObstacleContext] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "obstacle_id": self.obstacle_id,
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "actor_id": self.actor_id,
            "notes": self.notes,
            "timestamp": self.timestamp.isoformat(),
        }


class AuditLogEntry(BaseModel):
    """One audit log entry as written to and read from the store."""

    id: Optional[int] = Field(None, description="Assigned by the audit writer")
    admin_id: str
    admin_email: Optional[str] = None
    action: str
    target_type: TargetType
    target_id: str
    target_description: Optional[str] = None
    details: str
    source: AuditSource = AuditSource.WEB_PORTAL
    metadata: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime


def audit_entry_from_change(change: StatusChange) -> AuditLogEntry:
    """Map a StatusChange onto the audit log entry shape."""
    action = action_for_status(change.to_status)
    transition = f"Status changed from {change.from_status.value} to {change.to_status.value} via Priority Dashboard"
    details = f"{change.notes} | {transition}" if change.notes else transition

    metadata: Dict[str, Any] = {
        "source": AuditSource.WEB_PORTAL.value,
        "previous_status": change.from_status.value,
        "new_status": change.to_status.value,
        "admin_notes": change.notes,
    }
    target_description = "obstacle"
    ctx = change.context
    if ctx is not None:
        metadata["obstacle_type"] = ctx.obstacle_type
        metadata["obstacle_severity"] = ctx.severity
        if ctx.priority_score is not None:
            metadata["priority_score"] = ctx.priority_score
            metadata["priority_category"] = ctx.priority_category
            target_description = f"{ctx.obstacle_type} obstacle (Priority Score: {ctx.priority_score})"
        else:
            target_description = f"{ctx.obstacle_type} obstacle"
        if ctx.latitude is not None and ctx.longitude is not None:
            metadata["location"] = {"latitude": ctx.latitude, "longitude": ctx.longitude}
        if ctx.barangay:
            metadata["barangay"] = ctx.barangay

    return AuditLogEntry(
        admin_id=change.actor_id,
        admin_email=change.actor_email,
        action=action.value,
        target_type=TargetType.OBSTACLE,
        target_id=change.obstacle_id,
        target_description=target_description,
        details=details,
        source=AuditSource.WEB_PORTAL,
        metadata=metadata,
        timestamp=change.timestamp,
    )


def dashboard_access_entry(
    admin_id: str,
    admin_email: Optional[str],
    timestamp: datetime,
) -> AuditLogEntry:
    """Audit entry for an admin opening the priority dashboard."""
    return AuditLogEntry(
        admin_id=admin_id,
        admin_email=admin_email,
        action=AuditAction.DASHBOARD_ACCESSED.value,
        target_type=TargetType.SYSTEM,
        target_id="priority_dashboard",
        target_description="Priority Analysis Dashboard",
        details=ACTION_DESCRIPTIONS[AuditAction.DASHBOARD_ACCESSED],
        source=AuditSource.WEB_PORTAL,
        metadata={"source": AuditSource.WEB_PORTAL.value},
        timestamp=timestamp,
    )
