"""
Tests for tools/rank_obstacles.py: ranks a JSON file, filters by tab, checks transitions.
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

# Repo root (parent of backend)
_repo_root = Path(__file__).resolve().parent.parent.parent.parent
_cli = _repo_root / "tools" / "rank_obstacles.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(_cli), *args],
        cwd=str(_repo_root),
        capture_output=True,
        text=True,
        timeout=60,
    )


def _write_input(tmp_path: Path) -> Path:
    path = tmp_path / "obstacles.json"
    path.write_text(
        json.dumps(
            {
                "obstacles": [
                    {"id": "a", "type": "vendor_blocking", "severity": "high", "upvotes": 8, "downvotes": 2},
                    {"id": "b", "type": "stairs_no_ramp", "severity": "blocking", "upvotes": 15, "downvotes": 1, "status": "verified"},
                    {"id": "c", "type": "mystery", "severity": "low"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_rank_prints_ranked_json(tmp_path: Path) -> None:
    result = _run("rank", "--input", str(_write_input(tmp_path)))
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert [o["obstacle"]["id"] for o in data["obstacles"]] == ["b", "a", "c"]
    assert data["obstacles"][2]["obstacle"]["type"] == "unknown"
    assert data["stats"]["total"] == 3


def test_rank_with_tab(tmp_path: Path) -> None:
    result = _run("rank", "--input", str(_write_input(tmp_path)), "--tab", "critical")
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["tab"] == "critical"
    assert [o["obstacle"]["id"] for o in data["obstacles"]] == ["b"]


def test_rank_bad_input_exits_1(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"id": "x", "upvotes": -1}]), encoding="utf-8")
    result = _run("rank", "--input", str(path))
    assert result.returncode == 1
    assert "obstacle #0" in result.stderr


def test_check_transition_exit_codes() -> None:
    ok = _run("check-transition", "pending", "verified")
    assert ok.returncode == 0
    assert json.loads(ok.stdout)["allowed"] is True
    bad = _run("check-transition", "resolved", "verified")
    assert bad.returncode == 1
    assert json.loads(bad.stdout)["message"] == "Invalid status transition from resolved to verified"


def test_transitions_table() -> None:
    result = _run("transitions")
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert ["pending", "verified"] in data["transitions"]
    assert data["statuses"]["resolved"]["terminal"] is True
