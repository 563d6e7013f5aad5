"""Operational logging: structured ops events."""

from .ops_events import (
    log_audit_write_failed,
    log_ranking_summary,
    log_store_write_failed,
    log_transition_accepted,
    log_transition_rejected,
)

__all__ = [
    "log_audit_write_failed",
    "log_ranking_summary",
    "log_store_write_failed",
    "log_transition_accepted",
    "log_transition_rejected",
]
