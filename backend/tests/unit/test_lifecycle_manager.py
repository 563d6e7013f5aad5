"""
Unit tests for the lifecycle manager: validation, StatusChange construction, recorder hand-off.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from audit.model import ObstacleContext
from audit.recorder import InMemoryAuditRecorder
from domain.obstacles.types import ObstacleStatus
from lifecycle.manager import check_transition, record_transition, transition_error_message

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_allowed_transition_records_one_change() -> None:
    recorder = InMemoryAuditRecorder()
    result = record_transition(
        "obs-1",
        ObstacleStatus.PENDING,
        ObstacleStatus.VERIFIED,
        "admin-1",
        "checked on site",
        recorder,
        actor_email="a@lgu.ph",
        now_utc=NOW,
    )
    assert result.accepted is True
    assert result.change is not None
    assert result.change.timestamp == NOW
    assert len(recorder.changes) == 1
    change = recorder.changes[0]
    assert change.obstacle_id == "obs-1"
    assert change.from_status == ObstacleStatus.PENDING
    assert change.to_status == ObstacleStatus.VERIFIED
    assert change.actor_id == "admin-1"
    assert change.notes == "checked on site"
    assert len(recorder.entries) == 1
    assert recorder.entries[0].action == "priority_obstacle_verified"


def test_resolved_to_verified_rejected_with_zero_records() -> None:
    recorder = InMemoryAuditRecorder()
    result = record_transition(
        "obs-1", ObstacleStatus.RESOLVED, ObstacleStatus.VERIFIED, "admin-1", "", recorder
    )
    assert result.accepted is False
    assert result.change is None
    assert result.message == "Invalid status transition from resolved to verified"
    assert recorder.changes == []
    assert recorder.entries == []


def test_check_transition_logs_rejection(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="ops_events")
    result = check_transition("obs-9", ObstacleStatus.PENDING, ObstacleStatus.RESOLVED, "admin-2")
    assert result.accepted is False
    assert any("transition_rejected" in r.getMessage() for r in caplog.records)


def test_error_message_names_both_states() -> None:
    msg = transition_error_message(ObstacleStatus.FALSE_REPORT, ObstacleStatus.VERIFIED)
    assert "false_report" in msg and "verified" in msg


def test_context_is_carried_into_audit_metadata() -> None:
    ctx = ObstacleContext(
        obstacle_type="flooding",
        severity="high",
        priority_score=70,
        priority_category="HIGH",
        latitude=14.6,
        longitude=121.0,
        barangay="San Roque",
    )
    recorder = InMemoryAuditRecorder()
    result = record_transition(
        "obs-2", ObstacleStatus.VERIFIED, ObstacleStatus.RESOLVED, "admin-1", "", recorder, context=ctx
    )
    assert result.accepted is True
    entry = recorder.entries[0]
    assert entry.action == "priority_obstacle_resolved"
    assert entry.metadata["priority_score"] == 70
    assert entry.metadata["barangay"] == "San Roque"
    assert entry.target_description == "flooding obstacle (Priority Score: 70)"
