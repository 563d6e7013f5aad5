"""
Integration tests for the priority dashboard API: ranking, tabs, detail, calculate, auth.
"""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest

ADMIN_HEADERS = {"X-Admin-Id": "admin-1", "X-Admin-Email": "admin@lgu.ph", "X-Admin-Role": "lgu_admin"}


async def _seed_dashboard(seed, obstacle_record) -> None:
    await seed(
        obstacle_record("vendor", type="vendor_blocking", severity="high", upvotes=8, downvotes=2),
        obstacle_record("stairs", type="stairs_no_ramp", severity="blocking", upvotes=15, downvotes=1, status="verified"),
        obstacle_record("debris", type="debris", severity="low", status="resolved"),
    )


@pytest.mark.asyncio
async def test_ranked_obstacles_highest_first(client, seed, obstacle_record, recorder) -> None:
    """GET /api/v1/priority/obstacles ranks by score and audits the dashboard access."""
    await _seed_dashboard(seed, obstacle_record)
    r = await client.get("/api/v1/priority/obstacles", headers=ADMIN_HEADERS)
    assert r.status_code == 200
    data = r.json()
    assert data["tab"] == "all"
    assert [o["obstacle"]["id"] for o in data["obstacles"]] == ["stairs", "vendor", "debris"]
    assert data["obstacles"][0]["priority"]["score"] == 100
    assert data["obstacles"][1]["priority"]["implementation_category"] == "Quick Fix"
    stats = data["stats"]
    assert stats["total"] == 3
    assert stats["urgent"] == 1
    assert stats["resolved"] == 1
    # (100 + 53 + 10) / 3 = 54.33
    assert stats["average_score"] == 54
    assert [e.action for e in recorder.entries] == ["priority_dashboard_accessed"]
    assert recorder.entries[0].admin_id == "admin-1"


@pytest.mark.asyncio
async def test_tab_filters_list_but_not_stats(client, seed, obstacle_record) -> None:
    await _seed_dashboard(seed, obstacle_record)
    r = await client.get("/api/v1/priority/obstacles", params={"tab": "resolved"}, headers=ADMIN_HEADERS)
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 1
    assert data["obstacles"][0]["obstacle"]["id"] == "debris"
    assert data["stats"]["total"] == 3


@pytest.mark.asyncio
async def test_unknown_tab_is_400(client) -> None:
    r = await client.get("/api/v1/priority/obstacles", params={"tab": "everything"}, headers=ADMIN_HEADERS)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_empty_store_returns_zero_stats(client) -> None:
    r = await client.get("/api/v1/priority/obstacles", headers=ADMIN_HEADERS)
    assert r.status_code == 200
    assert r.json()["obstacles"] == []
    assert r.json()["stats"]["average_score"] == 0


@pytest.mark.asyncio
async def test_dashboard_requires_identity_and_admin_role(client) -> None:
    r = await client.get("/api/v1/priority/obstacles")
    assert r.status_code == 401
    r = await client.get("/api/v1/priority/obstacles", headers={"X-Admin-Id": "u-1", "X-Admin-Role": "viewer"})
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_obstacle_detail(client, seed, obstacle_record) -> None:
    await _seed_dashboard(seed, obstacle_record)
    r = await client.get("/api/v1/priority/obstacles/vendor", headers=ADMIN_HEADERS)
    assert r.status_code == 200
    data = r.json()
    assert data["priority"]["score"] == 53
    assert data["status_label"] == "Pending Review"
    assert [a["status"] for a in data["available_actions"]] == ["verified", "false_report"]
    assert data["needs_admin_attention"] is True

    r = await client.get("/api/v1/priority/obstacles/debris", headers=ADMIN_HEADERS)
    assert r.json()["available_actions"] == []

    r = await client.get("/api/v1/priority/obstacles/nope", headers=ADMIN_HEADERS)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_calculate_scores_payload(client) -> None:
    """POST /api/v1/priority/calculate scores without storing; unknown enums degrade."""
    body = {"id": "tmp", "type": "vendor_blocking", "severity": "high", "upvotes": 8, "downvotes": 2, "status": "pending"}
    r = await client.post("/api/v1/priority/calculate", json=body)
    assert r.status_code == 200
    assert r.json()["score"] == 53
    assert r.json()["category"] == "MEDIUM"

    r = await client.post("/api/v1/priority/calculate", json={"id": "tmp", "type": "sinkhole", "severity": "???"})
    assert r.status_code == 200
    assert r.json()["breakdown"]["severity_points"] == 0

    r = await client.post("/api/v1/priority/calculate", json={"id": "tmp", "upvotes": -3})
    assert r.status_code == 422
