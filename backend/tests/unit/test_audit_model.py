"""
Unit tests for audit entry mapping: action names, details text, metadata, dashboard access.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest

from audit.model import (
    AuditAction,
    AuditSource,
    StatusChange,
    TargetType,
    action_for_status,
    audit_entry_from_change,
    dashboard_access_entry,
)
from domain.obstacles.types import ObstacleStatus

NOW = datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "to_status,action",
    [
        (ObstacleStatus.VERIFIED, AuditAction.OBSTACLE_VERIFIED),
        (ObstacleStatus.FALSE_REPORT, AuditAction.OBSTACLE_REJECTED),
        (ObstacleStatus.RESOLVED, AuditAction.OBSTACLE_RESOLVED),
        (ObstacleStatus.PENDING, AuditAction.OBSTACLE_REOPENED),
    ],
)
def test_action_for_status(to_status: ObstacleStatus, action: AuditAction) -> None:
    assert action_for_status(to_status) == action


def test_entry_from_change_with_notes() -> None:
    change = StatusChange(
        obstacle_id="obs-7",
        from_status=ObstacleStatus.PENDING,
        to_status=ObstacleStatus.FALSE_REPORT,
        actor_id="admin-3",
        notes="duplicate report",
        timestamp=NOW,
        actor_email="ops@lgu.ph",
    )
    entry = audit_entry_from_change(change)
    assert entry.action == "priority_obstacle_rejected"
    assert entry.target_type == TargetType.OBSTACLE
    assert entry.target_id == "obs-7"
    assert entry.admin_id == "admin-3"
    assert entry.admin_email == "ops@lgu.ph"
    assert entry.source == AuditSource.WEB_PORTAL
    assert entry.details == "duplicate report | Status changed from pending to false_report via Priority Dashboard"
    assert entry.metadata["previous_status"] == "pending"
    assert entry.metadata["new_status"] == "false_report"
    assert entry.target_description == "obstacle"
    assert entry.timestamp == NOW
    assert entry.id is None


def test_entry_from_change_without_notes() -> None:
    change = StatusChange("obs-8", ObstacleStatus.VERIFIED, ObstacleStatus.PENDING, "admin-1", "", NOW)
    entry = audit_entry_from_change(change)
    assert entry.details == "Status changed from verified to pending via Priority Dashboard"
    assert entry.action == "priority_obstacle_reopened"


def test_status_change_to_dict() -> None:
    change = StatusChange("obs-8", ObstacleStatus.PENDING, ObstacleStatus.VERIFIED, "admin-1", "ok", NOW)
    assert change.to_dict() == {
        "obstacle_id": "obs-8",
        "from_status": "pending",
        "to_status": "verified",
        "actor_id": "admin-1",
        "notes": "ok",
        "timestamp": "2026-03-01T08:30:00+00:00",
    }


def test_dashboard_access_entry() -> None:
    entry = dashboard_access_entry("admin-1", None, NOW)
    assert entry.action == "priority_dashboard_accessed"
    assert entry.target_type == TargetType.SYSTEM
    assert entry.target_id == "priority_dashboard"
    assert entry.details == "Accessed Priority Analysis Dashboard"


def test_action_for_untargetable_status_raises() -> None:
    """UNKNOWN is never a transition target, so it has no audit action."""
    with pytest.raises(KeyError):
        action_for_status(ObstacleStatus.UNKNOWN)
