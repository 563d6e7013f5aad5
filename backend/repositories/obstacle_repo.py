from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.obstacles.types import Location, Obstacle, ObstacleStatus
from models.obstacle import ObstacleRecord
from .base import BaseRepository


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; everything stored is UTC.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def record_to_obstacle(record: ObstacleRecord) -> Obstacle:
    """Convert a stored row to the engine's Obstacle; enum strings are parsed leniently."""
    return Obstacle(
        id=record.id,
        location=Location(
            latitude=record.latitude or 0.0,
            longitude=record.longitude or 0.0,
            accuracy=record.accuracy,
        ),
        type=record.type,
        severity=record.severity,
        description=record.description or "",
        reported_by=record.reported_by or "unknown",
        reported_at=_as_utc(record.reported_at),
        upvotes=max(0, record.upvotes or 0),
        downvotes=max(0, record.downvotes or 0),
        status=record.status,
        photo_ref=record.photo_ref,
        barangay=record.barangay,
        time_pattern=record.time_pattern,
        verified=bool(record.verified),
        reviewed_by=record.reviewed_by,
        reviewed_at=_as_utc(record.reviewed_at),
        admin_notes=record.admin_notes,
        admin_reported=bool(record.admin_reported),
    )


class ObstacleRepository(BaseRepository[ObstacleRecord]):
    """Repository for ObstacleRecord entities."""

    model = ObstacleRecord

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_obstacle(self, obstacle_id: str) -> Optional[Obstacle]:
        record = await self.get_by_id(obstacle_id)
        return record_to_obstacle(record) if record is not None else None

    async def list_obstacles(
        self,
        statuses: Optional[Sequence[ObstacleStatus]] = None,
        limit: Optional[int] = None,
    ) -> List[Obstacle]:
        """List obstacles, newest report first, optionally restricted to statuses."""
        stmt = select(ObstacleRecord).order_by(desc(ObstacleRecord.reported_at), ObstacleRecord.id)
        if statuses:
            stmt = stmt.where(ObstacleRecord.status.in_([s.value for s in statuses]))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [record_to_obstacle(r) for r in result.scalars().all()]

    async def update_status(
        self,
        obstacle_id: str,
        status: ObstacleStatus,
        reviewed_by: str,
        reviewed_at: datetime,
        admin_notes: Optional[str] = None,
    ) -> int:
        """Write the new status and review fields (not committed). Returns rows matched."""
        values = {
            "status": status.value,
            "verified": status == ObstacleStatus.VERIFIED,
            "reviewed_by": reviewed_by,
            "reviewed_at": reviewed_at,
        }
        if admin_notes:
            values["admin_notes"] = admin_notes
        stmt = update(ObstacleRecord).where(ObstacleRecord.id == obstacle_id).values(**values)
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)
