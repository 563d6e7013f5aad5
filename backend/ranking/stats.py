"""Aggregate statistics over a ranked set. Pure; safe on an empty set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from domain.obstacles.types import ObstacleStatus
from priority.model import PriorityCategory, PriorityObstacle
from ranking.pipeline import is_urgent


@dataclass
class RankingStats:
    total: int
    by_status: Dict[str, int] = field(default_factory=dict)
    by_category: Dict[str, int] = field(default_factory=dict)
    urgent: int = 0
    average_score: int = 0
    resolved: int = 0
    total_votes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "by_status": dict(self.by_status),
            "by_category": dict(self.by_category),
            "urgent": self.urgent,
            "average_score": self.average_score,
            "resolved": self.resolved,
            "total_votes": self.total_votes,
        }


def _round_half_up(total: int, count: int) -> int:
    """round(total / count) with .5 going up, for non-negative integers."""
    return (2 * total + count) // (2 * count)


def compute_stats(ranked: List[PriorityObstacle]) -> RankingStats:
    """
    Counts per status (UNKNOWN kept under "unknown") and per category,
    urgent = CRITICAL + HIGH, average score (0 when empty), total votes.
    Every known status and category key is present, zero when absent.
    """
    by_status: Dict[str, int] = {s.value: 0 for s in ObstacleStatus if s != ObstacleStatus.UNKNOWN}
    by_category: Dict[str, int] = {c.value: 0 for c in PriorityCategory}
    score_sum = 0
    urgent = 0
    total_votes = 0

    for item in ranked:
        status_key = item.obstacle.status.value
        by_status[status_key] = by_status.get(status_key, 0) + 1
        by_category[item.priority.category.value] += 1
        score_sum += item.priority.score
        total_votes += item.obstacle.upvotes + item.obstacle.downvotes
        if is_urgent(item):
            urgent += 1

    count = len(ranked)
    return RankingStats(
        total=count,
        by_status=by_status,
        by_category=by_category,
        urgent=urgent,
        average_score=_round_half_up(score_sum, count) if count else 0,
        resolved=by_status[ObstacleStatus.RESOLVED.value],
        total_votes=total_votes,
    )
