"""Data models for obstacle priority scoring."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

from domain.obstacles.types import Obstacle


class PriorityCategory(str, Enum):
    """Coarse urgency bucket derived from the score."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ImplementationCategory(str, Enum):
    """Scale of the remediation work, keyed by obstacle type."""

    QUICK_FIX = "Quick Fix"
    MEDIUM_PROJECT = "Medium Project"
    MAJOR_INFRASTRUCTURE = "Major Infrastructure"


@dataclass(frozen=True)
class PriorityBreakdown:
    """The four weighted subtotals of a score."""

    severity_points: int
    community_points: int
    critical_points: int
    admin_points: int

    @property
    def total(self) -> int:
        """Unclamped sum of all subtotals."""
        return self.severity_points + self.community_points + self.critical_points + self.admin_points


@dataclass(frozen=True)
class PriorityResult:
    """Derived priority for one obstacle. Recomputed on demand, never stored as truth."""

    score: int  # 0..100
    category: PriorityCategory
    recommendation: str
    implementation_category: ImplementationCategory
    timeframe: str
    breakdown: PriorityBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "category": self.category.value,
            "recommendation": self.recommendation,
            "implementation_category": self.implementation_category.value,
            "timeframe": self.timeframe,
            "breakdown": asdict(self.breakdown),
        }


@dataclass(frozen=True)
class PriorityObstacle:
    """An obstacle paired with its computed priority."""

    obstacle: Obstacle
    priority: PriorityResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "obstacle": self.obstacle.model_dump(mode="json"),
            "priority": self.priority.to_dict(),
        }
