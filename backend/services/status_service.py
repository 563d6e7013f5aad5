"""
Obstacle status change: validate, write the store, then hand the change to the
audit recorder. The store write and the audit write are independent; a failed
audit write leaves the status change in place.

Concurrent requests for the same obstacle are not serialised: each validates
against the status it read, and the last commit wins.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from audit.model import ObstacleContext
from audit.recorder import AuditRecorder
from core.errors import ObstacleNotFoundError, StoreWriteError
from domain.obstacles.types import Obstacle, ObstacleStatus
from lifecycle.manager import TransitionResult, check_transition, record_transition
from ops.ops_events import log_store_write_failed
from priority.calculator import calculate_priority
from repositories.obstacle_repo import ObstacleRepository

logger = logging.getLogger(__name__)


def _context_for(obstacle: Obstacle) -> ObstacleContext:
    priority = calculate_priority(obstacle)
    return ObstacleContext(
        obstacle_type=obstacle.type.value,
        severity=obstacle.severity.value,
        priority_score=priority.score,
        priority_category=priority.category.value,
        latitude=obstacle.location.latitude,
        longitude=obstacle.location.longitude,
        barangay=obstacle.barangay,
    )


async def change_obstacle_status(
    session: AsyncSession,
    obstacle_id: str,
    to_status: ObstacleStatus | str,
    actor_id: str,
    notes: str,
    recorder: AuditRecorder,
    *,
    actor_email: Optional[str] = None,
    now_utc: Optional[datetime] = None,
) -> TransitionResult:
    """
    Apply one admin-requested transition.

    Returns a rejected TransitionResult for a disallowed edge (no write, no audit).
    Raises ObstacleNotFoundError for an unknown id and StoreWriteError when the
    store write fails; in both cases nothing is audited.
    """
    repo = ObstacleRepository(session)
    obstacle = await repo.get_obstacle(obstacle_id)
    if obstacle is None:
        raise ObstacleNotFoundError(obstacle_id)

    target = ObstacleStatus.parse(to_status)
    from_status = obstacle.status
    checked = check_transition(obstacle_id, from_status, target, actor_id)
    if not checked.accepted:
        return checked

    now = now_utc or datetime.now(timezone.utc)
    context = _context_for(obstacle)

    logger.info("Updating obstacle %s status %s -> %s", obstacle_id, from_status.value, target.value)
    try:
        matched = await repo.update_status(
            obstacle_id,
            target,
            reviewed_by=actor_id,
            reviewed_at=now,
            admin_notes=notes or None,
        )
        if matched == 0:
            raise StoreWriteError(obstacle_id, "no row matched")
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        log_store_write_failed(obstacle_id, target.value, str(e))
        raise StoreWriteError(obstacle_id, str(e)) from e
    except StoreWriteError as e:
        await session.rollback()
        log_store_write_failed(obstacle_id, target.value, e.cause)
        raise

    return record_transition(
        obstacle_id,
        from_status,
        target,
        actor_id,
        notes,
        recorder,
        actor_email=actor_email,
        context=context,
        now_utc=now,
    )
