"""Shared fixtures for integration tests: in-memory store and an ASGI client with audit capture."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from audit.recorder import InMemoryAuditRecorder
from core.database import dispose_database, get_database_manager, init_database
from core.dependencies import get_db_session, get_recorder
from models.obstacle import ObstacleRecord

REPORTED_AT = datetime(2026, 2, 1, 9, 0, tzinfo=timezone.utc)


def _obstacle_record(obstacle_id: str, **kwargs) -> ObstacleRecord:
    values = {
        "id": obstacle_id,
        "latitude": 14.5547,
        "longitude": 121.0244,
        "type": "other",
        "severity": "low",
        "description": "",
        "reported_by": "user-1",
        "reported_at": REPORTED_AT,
        "upvotes": 0,
        "downvotes": 0,
        "status": "pending",
    }
    values.update(kwargs)
    return ObstacleRecord(**values)


@pytest.fixture
def obstacle_record():
    """Factory for stored obstacle rows with neutral defaults."""
    return _obstacle_record


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory SQLite store with all tables created."""
    await init_database("sqlite+aiosqlite:///:memory:", create_schema=True)
    yield get_database_manager()
    await dispose_database()


@pytest_asyncio.fixture
async def seed(db):
    async def _seed(*records: ObstacleRecord) -> None:
        async with db.session() as session:
            session.add_all(records)

    return _seed


@pytest.fixture
def recorder():
    return InMemoryAuditRecorder()


@pytest_asyncio.fixture
async def client(db, recorder):
    from main import app

    async def override_session():
        async with db.session() as s:
            yield s

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_recorder] = lambda: recorder
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_db_session, None)
    app.dependency_overrides.pop(get_recorder, None)
