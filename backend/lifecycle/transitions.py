"""
Review-status state machine as data: the set of allowed (from, to) edges plus
the admin actions and labels shown for each state.

resolved has no outgoing edges. pending is the only re-open target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from domain.obstacles.types import ObstacleStatus

Edge = Tuple[ObstacleStatus, ObstacleStatus]

ALLOWED_TRANSITIONS: FrozenSet[Edge] = frozenset({
    (ObstacleStatus.PENDING, ObstacleStatus.VERIFIED),
    (ObstacleStatus.PENDING, ObstacleStatus.FALSE_REPORT),
    (ObstacleStatus.VERIFIED, ObstacleStatus.RESOLVED),
    (ObstacleStatus.VERIFIED, ObstacleStatus.PENDING),
    (ObstacleStatus.FALSE_REPORT, ObstacleStatus.PENDING),
})

INITIAL_STATUS = ObstacleStatus.PENDING


@dataclass(frozen=True)
class StatusAction:
    """A button offered to the admin for moving an obstacle to `status`."""

    status: ObstacleStatus
    label: str
    color: str  # blue | green | red | gray


# Order is display order; every action must be an allowed edge.
STATUS_ACTIONS: Dict[ObstacleStatus, Tuple[StatusAction, ...]] = {
    ObstacleStatus.PENDING: (
        StatusAction(ObstacleStatus.VERIFIED, "Mark Under Review", "blue"),
        StatusAction(ObstacleStatus.FALSE_REPORT, "Mark Invalid", "red"),
    ),
    ObstacleStatus.VERIFIED: (
        StatusAction(ObstacleStatus.RESOLVED, "Mark as Fixed", "green"),
        StatusAction(ObstacleStatus.PENDING, "Revert to Pending", "gray"),
    ),
    ObstacleStatus.FALSE_REPORT: (
        StatusAction(ObstacleStatus.PENDING, "Revert to Pending", "gray"),
    ),
    ObstacleStatus.RESOLVED: (),
}

STATUS_LABELS: Dict[ObstacleStatus, str] = {
    ObstacleStatus.PENDING: "Pending Review",
    ObstacleStatus.VERIFIED: "Under Review",
    ObstacleStatus.RESOLVED: "Fixed",
    ObstacleStatus.FALSE_REPORT: "Invalid",
}


def can_transition(from_status: ObstacleStatus, to_status: ObstacleStatus) -> bool:
    """Pure lookup in ALLOWED_TRANSITIONS. UNKNOWN on either side is never allowed."""
    return (from_status, to_status) in ALLOWED_TRANSITIONS


def allowed_targets(from_status: ObstacleStatus) -> List[ObstacleStatus]:
    """Statuses reachable in one step, in display order."""
    return [a.status for a in available_actions(from_status)]


def available_actions(status: ObstacleStatus) -> List[StatusAction]:
    return list(STATUS_ACTIONS.get(status, ()))


def status_label(status: ObstacleStatus) -> str:
    return STATUS_LABELS.get(status, "Unknown")


def is_terminal(status: ObstacleStatus) -> bool:
    return not any(src == status for src, _ in ALLOWED_TRANSITIONS)
