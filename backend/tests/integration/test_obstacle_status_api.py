"""
Integration tests for POST /api/v1/obstacles/{id}/status: 200/400/401/403/404/409/503.
"""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest
from sqlalchemy.exc import OperationalError

from repositories.obstacle_repo import ObstacleRepository

FIELD_ADMIN_HEADERS = {"X-Admin-Id": "field-7", "X-Admin-Email": "field@lgu.ph", "X-Admin-Role": "field_admin"}


@pytest.mark.asyncio
async def test_accepted_transition(client, seed, obstacle_record, recorder) -> None:
    await seed(obstacle_record("obs-1"))
    r = await client.post(
        "/api/v1/obstacles/obs-1/status",
        json={"status": "verified", "notes": "confirmed"},
        headers=FIELD_ADMIN_HEADERS,
    )
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "verified"
    assert data["status_label"] == "Under Review"
    assert data["change"]["from_status"] == "pending"
    assert data["change"]["actor_id"] == "field-7"
    assert len(recorder.entries) == 1
    assert recorder.entries[0].admin_email == "field@lgu.ph"

    r = await client.get("/api/v1/priority/obstacles/obs-1", headers=FIELD_ADMIN_HEADERS)
    assert r.json()["obstacle"]["status"] == "verified"


@pytest.mark.asyncio
async def test_disallowed_transition_is_409(client, seed, obstacle_record, recorder) -> None:
    await seed(obstacle_record("obs-2", status="resolved"))
    r = await client.post("/api/v1/obstacles/obs-2/status", json={"status": "verified"}, headers=FIELD_ADMIN_HEADERS)
    assert r.status_code == 409
    assert r.json()["detail"] == "Invalid status transition from resolved to verified"
    assert recorder.entries == []


@pytest.mark.asyncio
async def test_unknown_status_value_is_400(client, seed, obstacle_record) -> None:
    await seed(obstacle_record("obs-3"))
    r = await client.post("/api/v1/obstacles/obs-3/status", json={"status": "archived"}, headers=FIELD_ADMIN_HEADERS)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_missing_obstacle_is_404(client) -> None:
    r = await client.post("/api/v1/obstacles/ghost/status", json={"status": "verified"}, headers=FIELD_ADMIN_HEADERS)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_auth_required(client, seed, obstacle_record) -> None:
    await seed(obstacle_record("obs-4"))
    r = await client.post("/api/v1/obstacles/obs-4/status", json={"status": "verified"})
    assert r.status_code == 401
    r = await client.post(
        "/api/v1/obstacles/obs-4/status",
        json={"status": "verified"},
        headers={"X-Admin-Id": "user-9", "X-Admin-Role": "reporter"},
    )
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_store_failure_is_503_with_retry_message(client, seed, obstacle_record, recorder, monkeypatch) -> None:
    await seed(obstacle_record("obs-5"))

    async def broken_update(self, *args, **kwargs):
        raise OperationalError("UPDATE obstacles", {}, Exception("disk I/O error"))

    monkeypatch.setattr(ObstacleRepository, "update_status", broken_update)
    r = await client.post("/api/v1/obstacles/obs-5/status", json={"status": "verified"}, headers=FIELD_ADMIN_HEADERS)
    assert r.status_code == 503
    assert r.json()["detail"] == "Failed to update obstacle status. Please try again."
    assert recorder.entries == []


@pytest.mark.asyncio
async def test_revert_cycle(client, seed, obstacle_record, recorder) -> None:
    """pending -> false_report -> pending -> verified -> resolved, then resolved is final."""
    await seed(obstacle_record("obs-6"))
    for target in ("false_report", "pending", "verified", "resolved"):
        r = await client.post("/api/v1/obstacles/obs-6/status", json={"status": target}, headers=FIELD_ADMIN_HEADERS)
        assert r.status_code == 200, target
    r = await client.post("/api/v1/obstacles/obs-6/status", json={"status": "pending"}, headers=FIELD_ADMIN_HEADERS)
    assert r.status_code == 409
    assert [e.action for e in recorder.entries] == [
        "priority_obstacle_rejected",
        "priority_obstacle_reopened",
        "priority_obstacle_verified",
        "priority_obstacle_resolved",
    ]
