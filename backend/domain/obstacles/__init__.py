"""
Obstacle vocabulary: types, severities, review states and the Obstacle record.
Pure data; no scoring or lifecycle logic.
"""

from domain.obstacles.types import (
    Location,
    Obstacle,
    ObstacleSeverity,
    ObstacleStatus,
    ObstacleType,
)

__all__ = [
    "Location",
    "Obstacle",
    "ObstacleSeverity",
    "ObstacleStatus",
    "ObstacleType",
]
