"""GET /api/v1/lifecycle/transitions: the review-status state machine (read-only)."""

from __future__ import annotations

from fastapi import APIRouter

from domain.obstacles.types import ObstacleStatus
from lifecycle.transitions import (
    ALLOWED_TRANSITIONS,
    available_actions,
    is_terminal,
    status_label,
)

router = APIRouter(prefix="/lifecycle", tags=["lifecycle"])


@router.get("/transitions", summary="Allowed status transitions and admin actions")
def get_transitions() -> dict:
    statuses = [s for s in ObstacleStatus if s != ObstacleStatus.UNKNOWN]
    return {
        "transitions": sorted([src.value, dst.value] for src, dst in ALLOWED_TRANSITIONS),
        "statuses": {
            s.value: {
                "label": status_label(s),
                "terminal": is_terminal(s),
                "actions": [
                    {"status": a.status.value, "label": a.label, "color": a.color}
                    for a in available_actions(s)
                ],
            }
            for s in statuses
        },
    }
