"""Audit log writer: persists entries in their own session, independent of the status write."""

from __future__ import annotations

from core.database import get_database_manager
from audit.model import AuditLogEntry
from repositories.audit_log_repo import AuditLogRepository


async def persist_audit_entry(entry: AuditLogEntry) -> int:
    """Insert one audit entry and return the id the store assigned."""
    async with get_database_manager().session() as session:
        repo = AuditLogRepository(session)
        record = await repo.add_entry(entry)
        await session.flush()
        return record.id
