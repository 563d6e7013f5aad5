"""Priority dashboard: load obstacles from the store, rank, filter and summarise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import ObstacleNotFoundError
from domain.obstacles.types import Obstacle, ObstacleStatus
from lifecycle.transitions import available_actions, status_label
from ops.ops_events import log_ranking_summary
from priority.calculator import calculate_priority
from priority.model import PriorityObstacle
from ranking.pipeline import RankingTab, filter_ranked, rank
from ranking.stats import RankingStats, compute_stats
from repositories.obstacle_repo import ObstacleRepository


@dataclass
class DashboardView:
    tab: RankingTab
    ranked: List[PriorityObstacle]
    visible: List[PriorityObstacle]
    stats: RankingStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tab": self.tab.value,
            "count": len(self.visible),
            "obstacles": [item.to_dict() for item in self.visible],
            "stats": self.stats.to_dict(),
        }


def build_dashboard(obstacles: Sequence[Obstacle], tab: RankingTab | str = RankingTab.ALL) -> DashboardView:
    """Rank all obstacles; stats always cover the full set, not the tab."""
    tab = RankingTab(tab)
    ranked = rank(obstacles)
    stats = compute_stats(ranked)
    log_ranking_summary(stats.total, stats.urgent, stats.average_score, stats.by_category)
    return DashboardView(tab=tab, ranked=ranked, visible=filter_ranked(ranked, tab), stats=stats)


async def load_dashboard(
    session: AsyncSession,
    tab: RankingTab | str = RankingTab.ALL,
    statuses: Optional[Sequence[ObstacleStatus]] = None,
) -> DashboardView:
    obstacles = await ObstacleRepository(session).list_obstacles(statuses=statuses)
    return build_dashboard(obstacles, tab)


def obstacle_detail(obstacle: Obstacle) -> Dict[str, Any]:
    """One obstacle with its priority, status label and the actions open to an admin."""
    return {
        "obstacle": obstacle.model_dump(mode="json"),
        "priority": calculate_priority(obstacle).to_dict(),
        "status_label": status_label(obstacle.status),
        "available_actions": [
            {"status": a.status.value, "label": a.label, "color": a.color}
            for a in available_actions(obstacle.status)
        ],
        "needs_admin_attention": obstacle.needs_admin_attention,
        "community_verified": obstacle.is_community_verified,
    }


async def load_obstacle_detail(session: AsyncSession, obstacle_id: str) -> Dict[str, Any]:
    obstacle = await ObstacleRepository(session).get_obstacle(obstacle_id)
    if obstacle is None:
        raise ObstacleNotFoundError(obstacle_id)
    return obstacle_detail(obstacle)
