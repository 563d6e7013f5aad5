"""Repository layer for DB access only (CRUD + simple queries).

Repositories accept AsyncSession explicitly and never commit; commit
responsibility stays with the service layer.
"""

from .base import BaseRepository
from .audit_log_repo import AuditLogFilters, AuditLogRepository
from .obstacle_repo import ObstacleRepository

__all__ = [
    "AuditLogFilters",
    "AuditLogRepository",
    "BaseRepository",
    "ObstacleRepository",
]
