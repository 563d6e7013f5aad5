"""Priority calculator: obstacle attributes -> score, category and remediation guidance."""

from .calculator import calculate_priority, category_for_score
from .model import (
    ImplementationCategory,
    PriorityBreakdown,
    PriorityCategory,
    PriorityObstacle,
    PriorityResult,
)

__all__ = [
    "ImplementationCategory",
    "PriorityBreakdown",
    "PriorityCategory",
    "PriorityObstacle",
    "PriorityResult",
    "calculate_priority",
    "category_for_score",
]
