from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from audit.model import AuditLogEntry
from models.audit_log import AuditLogRecord
from .base import BaseRepository


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware values are converted to UTC; naive values are taken as UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class AuditLogFilters:
    """Optional equality/range filters for audit queries. None means no filter."""

    admin_id: Optional[str] = None
    action: Optional[str] = None
    target_type: Optional[str] = None
    source: Optional[str] = None
    start_utc: Optional[datetime] = None
    end_utc: Optional[datetime] = None

    def __post_init__(self) -> None:
        # Stored timestamps are UTC and SQLite compares them as strings without offsets
        self.start_utc = _as_utc(self.start_utc)
        self.end_utc = _as_utc(self.end_utc)


def record_to_entry(record: AuditLogRecord) -> AuditLogEntry:
    timestamp = _as_utc(record.timestamp)
    try:
        metadata = json.loads(record.metadata_json or "{}")
    except json.JSONDecodeError:
        metadata = {}
    return AuditLogEntry(
        id=record.id,
        admin_id=record.admin_id,
        admin_email=record.admin_email,
        action=record.action,
        target_type=record.target_type,
        target_id=record.target_id,
        target_description=record.target_description,
        details=record.details,
        source=record.source,
        metadata=metadata,
        timestamp=timestamp,
    )


class AuditLogRepository(BaseRepository[AuditLogRecord]):
    """Repository for AuditLogRecord entities. Insert and read only."""

    model = AuditLogRecord

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def add_entry(self, entry: AuditLogEntry) -> AuditLogRecord:
        """Add an audit entry (not committed)."""
        record = AuditLogRecord(
            admin_id=entry.admin_id,
            admin_email=entry.admin_email,
            action=entry.action,
            target_type=entry.target_type.value,
            target_id=entry.target_id,
            target_description=entry.target_description,
            details=entry.details,
            source=entry.source.value,
            metadata_json=json.dumps(entry.metadata, sort_keys=True, default=str),
            timestamp=entry.timestamp,
        )
        await self.add(record)
        return record

    def _apply_filters(self, stmt: Any, filters: AuditLogFilters) -> Any:
        if filters.admin_id:
            stmt = stmt.where(AuditLogRecord.admin_id == filters.admin_id)
        if filters.action:
            stmt = stmt.where(AuditLogRecord.action == filters.action)
        if filters.target_type:
            stmt = stmt.where(AuditLogRecord.target_type == filters.target_type)
        if filters.source:
            stmt = stmt.where(AuditLogRecord.source == filters.source)
        if filters.start_utc is not None:
            stmt = stmt.where(AuditLogRecord.timestamp >= filters.start_utc)
        if filters.end_utc is not None:
            stmt = stmt.where(AuditLogRecord.timestamp <= filters.end_utc)
        return stmt

    async def list_entries(
        self,
        filters: Optional[AuditLogFilters] = None,
        limit: int = 25,
        offset: int = 0,
    ) -> List[AuditLogEntry]:
        """List matching entries, newest first."""
        stmt = select(AuditLogRecord).order_by(desc(AuditLogRecord.timestamp), desc(AuditLogRecord.id))
        stmt = self._apply_filters(stmt, filters or AuditLogFilters())
        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [record_to_entry(r) for r in result.scalars().all()]

    async def count_entries(self, filters: Optional[AuditLogFilters] = None) -> int:
        stmt = select(func.count()).select_from(AuditLogRecord)
        stmt = self._apply_filters(stmt, filters or AuditLogFilters())
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
