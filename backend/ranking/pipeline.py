"""
Ranking pipeline: score every obstacle and order by priority.
Recomputed on every load; no caching, no incremental state.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from domain.obstacles.types import Obstacle, ObstacleStatus
from priority.calculator import calculate_priority
from priority.model import PriorityCategory, PriorityObstacle

URGENT_CATEGORIES = frozenset({PriorityCategory.CRITICAL, PriorityCategory.HIGH})


class RankingTab(str, Enum):
    """Dashboard filter tabs."""

    ALL = "all"
    URGENT = "urgent"
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    RESOLVED = "resolved"


def rank(obstacles: Iterable[Obstacle]) -> List[PriorityObstacle]:
    """
    Pair each obstacle with its PriorityResult, highest score first.
    sorted() is stable, so equal scores keep input order.
    """
    scored = [PriorityObstacle(obstacle=o, priority=calculate_priority(o)) for o in obstacles]
    return sorted(scored, key=lambda po: po.priority.score, reverse=True)


def is_urgent(item: PriorityObstacle) -> bool:
    return item.priority.category in URGENT_CATEGORIES


def filter_ranked(ranked: List[PriorityObstacle], tab: RankingTab | str) -> List[PriorityObstacle]:
    """Subset of an already ranked list for a dashboard tab; order is preserved."""
    tab = RankingTab(tab)
    if tab == RankingTab.ALL:
        return list(ranked)
    if tab == RankingTab.URGENT:
        return [r for r in ranked if is_urgent(r)]
    if tab == RankingTab.RESOLVED:
        return [r for r in ranked if r.obstacle.status == ObstacleStatus.RESOLVED]
    category = PriorityCategory(tab.value.upper())
    return [r for r in ranked if r.priority.category == category]
