"""Obstacle review lifecycle: transition table, validation and change recording."""

from .manager import TransitionResult, check_transition, record_transition, transition_error_message
from .transitions import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUS,
    StatusAction,
    allowed_targets,
    available_actions,
    can_transition,
    is_terminal,
    status_label,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "INITIAL_STATUS",
    "StatusAction",
    "TransitionResult",
    "allowed_targets",
    "available_actions",
    "can_transition",
    "check_transition",
    "is_terminal",
    "record_transition",
    "status_label",
    "transition_error_message",
]
