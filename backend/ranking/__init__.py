"""Obstacle ranking pipeline and dashboard statistics."""

from .pipeline import RankingTab, filter_ranked, is_urgent, rank
from .stats import RankingStats, compute_stats

__all__ = [
    "RankingStats",
    "RankingTab",
    "compute_stats",
    "filter_ranked",
    "is_urgent",
    "rank",
]
