from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class AuditLogRecord(Base):
    """Append-only audit trail entry. Rows are inserted, never updated or deleted."""

    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    admin_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    admin_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    action: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    target_type: Mapped[str] = mapped_column(String(20), nullable=False)
    target_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    target_description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    details: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False, default="web_portal")
    metadata_json: Mapped[str] = mapped_column(
        Text, nullable=False, default="{}"
    )  # TODO: Use JSON type when migrating off SQLite.
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
