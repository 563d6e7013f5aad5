from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Canonical SQLAlchemy base for the obstacle store and audit trail."""

    pass
