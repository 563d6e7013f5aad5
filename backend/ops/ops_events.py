"""
Structured ops events for status transitions, audit writes and ranking runs.
Log-level + structured event dict; deterministic keys (no random ids).
"""

from __future__ import annotations

import logging
from typing import Any, Dict

OPS_LOGGER_NAME = "ops_events"


def _logger() -> logging.Logger:
    return logging.getLogger(OPS_LOGGER_NAME)


def _event(event_type: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """Emit a structured ops event (sorted keys)."""
    msg = f"ops_event={event_type} " + " ".join(f"{k}={v!r}" for k, v in sorted(kwargs.items()))
    _logger().log(level, msg, extra={"ops_event_type": event_type, "ops_event": {**kwargs}})


def log_transition_accepted(
    obstacle_id: str,
    from_status: str,
    to_status: str,
    actor_id: str,
) -> None:
    _event(
        "transition_accepted",
        obstacle_id=obstacle_id,
        from_status=from_status,
        to_status=to_status,
        actor_id=actor_id,
    )


def log_transition_rejected(
    obstacle_id: str,
    from_status: str,
    to_status: str,
    actor_id: str,
) -> None:
    """Disallowed transition: no store write, no audit record."""
    _event(
        "transition_rejected",
        level=logging.WARNING,
        obstacle_id=obstacle_id,
        from_status=from_status,
        to_status=to_status,
        actor_id=actor_id,
    )


def log_store_write_failed(obstacle_id: str, to_status: str, error: str) -> None:
    _event(
        "store_write_failed",
        level=logging.ERROR,
        obstacle_id=obstacle_id,
        to_status=to_status,
        error=error,
    )


def log_audit_write_failed(target_id: str, action: str, error: str) -> None:
    """Audit write failed; the status change it belongs to is not rolled back."""
    _event(
        "audit_write_failed",
        level=logging.WARNING,
        target_id=target_id,
        action=action,
        error=error,
    )


def log_ranking_summary(
    total: int,
    urgent: int,
    average_score: int,
    by_category: Dict[str, int] | None = None,
) -> None:
    payload: Dict[str, Any] = {"total": total, "urgent": urgent, "average_score": average_score}
    if by_category is not None:
        payload["by_category"] = {k: v for k, v in sorted(by_category.items())}
    _event("ranking_summary", **payload)
