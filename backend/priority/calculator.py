"""
Deterministic priority score per obstacle.
Fixed weights (max 40 + 30 + 20 + 10 = 100); no I/O, no tuning.
"""

from __future__ import annotations

import logging
from typing import Dict

from domain.obstacles.types import (
    Obstacle,
    ObstacleSeverity,
    ObstacleStatus,
    ObstacleType,
)
from priority.model import PriorityBreakdown, PriorityCategory, PriorityResult
from priority.remediation import (
    implementation_category_for,
    recommendation_for,
    timeframe_for,
)

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100

SEVERITY_POINTS: Dict[ObstacleSeverity, int] = {
    ObstacleSeverity.BLOCKING: 40,
    ObstacleSeverity.HIGH: 30,
    ObstacleSeverity.MEDIUM: 20,
    ObstacleSeverity.LOW: 10,
}

COMMUNITY_POINTS_PER_NET_VOTE = 3
COMMUNITY_POINTS_MAX = 30

CRITICAL_TYPE_POINTS: Dict[ObstacleType, int] = {
    ObstacleType.NO_SIDEWALK: 20,
    ObstacleType.STAIRS_NO_RAMP: 20,
    ObstacleType.CONSTRUCTION: 15,
    ObstacleType.FLOODING: 15,
}

ADMIN_STATUS_POINTS: Dict[ObstacleStatus, int] = {
    ObstacleStatus.VERIFIED: 10,
    ObstacleStatus.PENDING: 5,
    ObstacleStatus.RESOLVED: 0,
    ObstacleStatus.FALSE_REPORT: 0,
}
# Unknown status is treated as not yet triaged
ADMIN_STATUS_DEFAULT_POINTS = 5

# Inclusive lower bounds, checked in order
CATEGORY_THRESHOLDS = (
    (80, PriorityCategory.CRITICAL),
    (60, PriorityCategory.HIGH),
    (40, PriorityCategory.MEDIUM),
)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def severity_points(severity: ObstacleSeverity) -> int:
    return SEVERITY_POINTS.get(severity, 0)


def community_points(upvotes: int, downvotes: int) -> int:
    """Net support times 3, capped at 30. Net negative support gives 0, never a penalty."""
    net_support = upvotes - downvotes
    return _clamp(net_support * COMMUNITY_POINTS_PER_NET_VOTE, 0, COMMUNITY_POINTS_MAX)


def critical_points(obstacle_type: ObstacleType) -> int:
    return CRITICAL_TYPE_POINTS.get(obstacle_type, 0)


def admin_points(status: ObstacleStatus) -> int:
    return ADMIN_STATUS_POINTS.get(status, ADMIN_STATUS_DEFAULT_POINTS)


def category_for_score(score: int) -> PriorityCategory:
    for lower_bound, category in CATEGORY_THRESHOLDS:
        if score >= lower_bound:
            return category
    return PriorityCategory.LOW


def calculate_priority(obstacle: Obstacle) -> PriorityResult:
    """
    Score one obstacle.

    - severity: blocking 40, high 30, medium 20, low 10, unknown 0
    - community: clamp((upvotes - downvotes) * 3, 0, 30)
    - criticality: no_sidewalk/stairs_no_ramp 20, construction/flooding 15
    - admin state: verified 10, pending 5, resolved/false_report 0, unknown 5
    - score = clamp(sum, 0, 100)

    Total over every well-formed Obstacle; unrecognised enum values contribute
    their zero/default term instead of raising.
    """
    breakdown = PriorityBreakdown(
        severity_points=severity_points(obstacle.severity),
        community_points=community_points(obstacle.upvotes, obstacle.downvotes),
        critical_points=critical_points(obstacle.type),
        admin_points=admin_points(obstacle.status),
    )
    score = _clamp(breakdown.total, SCORE_MIN, SCORE_MAX)
    category = category_for_score(score)

    logger.debug(
        "Priority for obstacle %s: score=%d category=%s breakdown=%s type=%s status=%s",
        obstacle.id,
        score,
        category.value,
        breakdown,
        obstacle.type.value,
        obstacle.status.value,
    )

    return PriorityResult(
        score=score,
        category=category,
        recommendation=recommendation_for(obstacle.type),
        implementation_category=implementation_category_for(obstacle.type),
        timeframe=timeframe_for(obstacle.type),
        breakdown=breakdown,
    )
