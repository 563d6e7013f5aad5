from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ObstacleRecord(Base):
    """Stored obstacle report. Enum columns hold raw strings; parsing happens on read."""

    __tablename__ = "obstacles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    longitude: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    accuracy: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="other")
    severity: Mapped[str] = mapped_column(String(20), nullable=False, default="low")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    photo_ref: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    time_pattern: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    reported_by: Mapped[str] = mapped_column(String(128), nullable=False, default="unknown")
    reported_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    barangay: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reviewed_by: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    admin_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    admin_reported: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
