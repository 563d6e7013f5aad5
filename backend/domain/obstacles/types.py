"""
Obstacle schema: closed enums and the Obstacle record as the engine sees it.

Every enum carries an explicit UNKNOWN member. Unrecognised input parses to
UNKNOWN instead of raising, so a malformed report never blocks triage.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _FallbackEnum(str, Enum):
    """str Enum whose lookup is case-insensitive and falls back to UNKNOWN."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls["UNKNOWN"]

    @classmethod
    def parse(cls, value: object) -> Any:
        """Return the member for value; None and unrecognised values give UNKNOWN."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls["UNKNOWN"]
        return cls(str(value))


class ObstacleType(_FallbackEnum):
    """Kind of accessibility barrier reported from the mobile app."""

    VENDOR_BLOCKING = "vendor_blocking"
    PARKED_VEHICLES = "parked_vehicles"
    CONSTRUCTION = "construction"
    ELECTRICAL_POST = "electrical_post"
    NO_SIDEWALK = "no_sidewalk"
    FLOODING = "flooding"
    STAIRS_NO_RAMP = "stairs_no_ramp"
    NARROW_PASSAGE = "narrow_passage"
    BROKEN_PAVEMENT = "broken_pavement"
    BROKEN_INFRASTRUCTURE = "broken_infrastructure"
    DEBRIS = "debris"
    TREE_ROOTS = "tree_roots"
    STEEP_SLOPE = "steep_slope"
    OTHER = "other"
    UNKNOWN = "unknown"


class ObstacleSeverity(_FallbackEnum):
    """How much the obstacle impacts mobility (blocking > high > medium > low)."""

    BLOCKING = "blocking"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class ObstacleStatus(_FallbackEnum):
    """Review state of a report; see lifecycle.transitions for legal moves."""

    PENDING = "pending"
    VERIFIED = "verified"
    RESOLVED = "resolved"
    FALSE_REPORT = "false_report"
    UNKNOWN = "unknown"


# Thresholds from the community validation rules
COMMUNITY_VERIFIED_MIN_UPVOTES = 8
ATTENTION_MIN_UPVOTES = 3


class Location(BaseModel):
    """Geographic point of a report."""

    latitude: float = Field(0.0, description="WGS84 latitude")
    longitude: float = Field(0.0, description="WGS84 longitude")
    accuracy: Optional[float] = Field(None, ge=0, description="GPS accuracy in metres")


class Obstacle(BaseModel):
    """A community-reported accessibility barrier. Votes are read-only inputs."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Obstacle identifier")
    location: Location = Field(default_factory=Location)
    type: ObstacleType = Field(ObstacleType.OTHER, description="Obstacle type")
    severity: ObstacleSeverity = Field(ObstacleSeverity.LOW, description="Impact on mobility")
    description: str = ""
    reported_by: str = "unknown"
    reported_at: Optional[datetime] = None
    upvotes: int = Field(0, ge=0, description="Community confirmations")
    downvotes: int = Field(0, ge=0, description="Community disputes")
    status: ObstacleStatus = Field(ObstacleStatus.PENDING, description="Review state")
    photo_ref: Optional[str] = Field(None, description="Reference to photo evidence")

    barangay: Optional[str] = None
    time_pattern: Optional[str] = Field(None, description="permanent | morning | afternoon | evening | weekend")
    verified: bool = False
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    admin_notes: Optional[str] = None
    admin_reported: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> ObstacleType:
        return ObstacleType.parse(v)

    @field_validator("severity", mode="before")
    @classmethod
    def _parse_severity(cls, v: Any) -> ObstacleSeverity:
        return ObstacleSeverity.parse(v)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v: Any) -> ObstacleStatus:
        return ObstacleStatus.parse(v)

    @property
    def validation_count(self) -> int:
        return self.upvotes + self.downvotes

    @property
    def is_community_verified(self) -> bool:
        return self.upvotes >= COMMUNITY_VERIFIED_MIN_UPVOTES and self.upvotes > self.downvotes

    @property
    def is_blocking(self) -> bool:
        return self.severity in (ObstacleSeverity.BLOCKING, ObstacleSeverity.HIGH)

    @property
    def needs_admin_attention(self) -> bool:
        """Pending community report with enough confirmations to warrant review."""
        return (
            self.status == ObstacleStatus.PENDING
            and not self.admin_reported
            and self.upvotes >= ATTENTION_MIN_UPVOTES
        )
