"""
Remediation guidance keyed by obstacle type.
Lookups depend on type only: two obstacles of one type always get the same guidance.
"""

from __future__ import annotations

from typing import Dict, FrozenSet

from domain.obstacles.types import ObstacleType
from priority.model import ImplementationCategory

RECOMMENDATIONS: Dict[ObstacleType, str] = {
    ObstacleType.VENDOR_BLOCKING: "Coordinate with local authorities for vendor management",
    ObstacleType.PARKED_VEHICLES: "Implement parking enforcement and signage",
    ObstacleType.CONSTRUCTION: "Require accessible temporary pathways during construction",
    ObstacleType.ELECTRICAL_POST: "Relocate or mark pole with tactile indicators",
    ObstacleType.TREE_ROOTS: "Repair pathway and install root barriers",
    ObstacleType.NO_SIDEWALK: "Construct accessible sidewalk with proper curb cuts",
    ObstacleType.FLOODING: "Improve drainage and install accessible walkways",
    ObstacleType.STAIRS_NO_RAMP: "Install compliant accessibility ramp",
    ObstacleType.NARROW_PASSAGE: "Widen pathway to minimum accessible width",
    ObstacleType.BROKEN_PAVEMENT: "Repair pavement with smooth, level surface",
    ObstacleType.BROKEN_INFRASTRUCTURE: "Repair damaged infrastructure and restore a level path",
    ObstacleType.DEBRIS: "Clear debris and schedule regular path maintenance",
    ObstacleType.STEEP_SLOPE: "Install ramp or alternative accessible route",
    ObstacleType.OTHER: "Assess specific accessibility barriers and implement appropriate solution",
}

QUICK_FIX_TYPES: FrozenSet[ObstacleType] = frozenset({
    ObstacleType.VENDOR_BLOCKING,
    ObstacleType.PARKED_VEHICLES,
})

MAJOR_INFRASTRUCTURE_TYPES: FrozenSet[ObstacleType] = frozenset({
    ObstacleType.NO_SIDEWALK,
    ObstacleType.STAIRS_NO_RAMP,
    ObstacleType.CONSTRUCTION,
    ObstacleType.FLOODING,
})

TIMEFRAMES: Dict[ImplementationCategory, str] = {
    ImplementationCategory.QUICK_FIX: "1-30 days (enforcement/management)",
    ImplementationCategory.MEDIUM_PROJECT: "1-6 months (repairs/modifications)",
    ImplementationCategory.MAJOR_INFRASTRUCTURE: "6+ months (construction/major work)",
}


def recommendation_for(obstacle_type: ObstacleType) -> str:
    # UNKNOWN shares the generic guidance of OTHER
    return RECOMMENDATIONS.get(obstacle_type, RECOMMENDATIONS[ObstacleType.OTHER])


def implementation_category_for(obstacle_type: ObstacleType) -> ImplementationCategory:
    if obstacle_type in QUICK_FIX_TYPES:
        return ImplementationCategory.QUICK_FIX
    if obstacle_type in MAJOR_INFRASTRUCTURE_TYPES:
        return ImplementationCategory.MAJOR_INFRASTRUCTURE
    return ImplementationCategory.MEDIUM_PROJECT


def timeframe_for(obstacle_type: ObstacleType) -> str:
    return TIMEFRAMES[implementation_category_for(obstacle_type)]
