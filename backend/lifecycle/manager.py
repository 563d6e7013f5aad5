"""
Lifecycle manager: validates a requested status change and, when allowed,
records it to the audit trail. It never writes obstacle state itself; the
caller updates the store after validation passes.

A disallowed transition is an expected outcome (accepted=False), not an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from audit.model import ObstacleContext, StatusChange
from audit.recorder import AuditRecorder
from domain.obstacles.types import ObstacleStatus
from lifecycle.transitions import can_transition
from ops.ops_events import log_transition_accepted, log_transition_rejected


@dataclass(frozen=True)
class TransitionResult:
    accepted: bool
    change: Optional[StatusChange] = None
    message: str = ""


def transition_error_message(from_status: ObstacleStatus, to_status: ObstacleStatus) -> str:
    return f"Invalid status transition from {from_status.value} to {to_status.value}"


def check_transition(
    obstacle_id: str,
    from_status: ObstacleStatus,
    to_status: ObstacleStatus,
    actor_id: str,
) -> TransitionResult:
    """Validate only; nothing is recorded. Rejections are logged as ops events."""
    if can_transition(from_status, to_status):
        return TransitionResult(accepted=True)
    log_transition_rejected(obstacle_id, from_status.value, to_status.value, actor_id)
    return TransitionResult(accepted=False, message=transition_error_message(from_status, to_status))


def record_transition(
    obstacle_id: str,
    from_status: ObstacleStatus,
    to_status: ObstacleStatus,
    actor_id: str,
    notes: str,
    recorder: AuditRecorder,
    *,
    actor_email: Optional[str] = None,
    context: Optional[ObstacleContext] = None,
    now_utc: Optional[datetime] = None,
) -> TransitionResult:
    """
    Build a StatusChange for an allowed transition and submit it to recorder.
    Disallowed transitions produce no StatusChange and submit nothing.
    """
    checked = check_transition(obstacle_id, from_status, to_status, actor_id)
    if not checked.accepted:
        return checked

    change = StatusChange(
        obstacle_id=obstacle_id,
        from_status=from_status,
        to_status=to_status,
        actor_id=actor_id,
        notes=notes or "",
        timestamp=now_utc or datetime.now(timezone.utc),
        actor_email=actor_email,
        context=context,
    )
    log_transition_accepted(obstacle_id, from_status.value, to_status.value, actor_id)
    recorder.submit(change)
    return TransitionResult(accepted=True, change=change)
