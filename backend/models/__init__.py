"""Canonical SQLAlchemy models: obstacle reports and the admin audit trail.

Schema only; scoring and lifecycle rules live in the priority and lifecycle packages.
"""

from .base import Base
from .audit_log import AuditLogRecord
from .obstacle import ObstacleRecord

__all__ = [
    "Base",
    "AuditLogRecord",
    "ObstacleRecord",
]
