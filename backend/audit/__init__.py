"""Audit trail: StatusChange facts, best-effort recorders and audit statistics."""

from .model import (
    ACTION_DESCRIPTIONS,
    AuditAction,
    AuditLogEntry,
    AuditSource,
    ObstacleContext,
    StatusChange,
    TargetType,
    action_for_status,
    audit_entry_from_change,
)
from .recorder import (
    AuditRecorder,
    BackgroundAuditRecorder,
    InMemoryAuditRecorder,
    get_audit_recorder,
    set_audit_recorder,
)
from .reporting import AuditStats, compute_audit_stats, timeframe_start

__all__ = [
    "ACTION_DESCRIPTIONS",
    "AuditAction",
    "AuditLogEntry",
    "AuditRecorder",
    "AuditSource",
    "AuditStats",
    "BackgroundAuditRecorder",
    "InMemoryAuditRecorder",
    "ObstacleContext",
    "StatusChange",
    "TargetType",
    "action_for_status",
    "audit_entry_from_change",
    "compute_audit_stats",
    "get_audit_recorder",
    "set_audit_recorder",
    "timeframe_start",
]
