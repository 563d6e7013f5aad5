"""
Priority CLI: rank obstacles and inspect the review lifecycle.
Usage: python tools/rank_obstacles.py rank --input obstacles.json [--tab urgent]
        python tools/rank_obstacles.py rank --from-db [--tab critical]
        python tools/rank_obstacles.py check-transition pending verified
        python tools/rank_obstacles.py transitions
Output is JSON on stdout; exit code 0 on success, 1 on rejected transition or bad input.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

_backend = Path(__file__).resolve().parent.parent / "backend"
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))


def _load_obstacles_file(path: Path) -> list:
    from pydantic import ValidationError

    from domain.obstacles.types import Obstacle

    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("obstacles") or []
    if not isinstance(raw, list):
        raise ValueError("input must be a JSON list of obstacles or {\"obstacles\": [...]}")
    obstacles = []
    for i, item in enumerate(raw):
        try:
            obstacles.append(Obstacle.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"obstacle #{i}: {e.errors()[0].get('msg')}") from e
    return obstacles


def _load_obstacles_db() -> list:
    import models  # noqa: F401
    from core.config import get_settings
    from core.database import dispose_database, get_database_manager, init_database
    from repositories.obstacle_repo import ObstacleRepository

    async def _run() -> list:
        await init_database(get_settings().database_url, create_schema=True)
        try:
            async with get_database_manager().session() as session:
                return await ObstacleRepository(session).list_obstacles()
        finally:
            await dispose_database()

    return asyncio.run(_run())


def _cmd_rank(args: argparse.Namespace) -> int:
    from services.priority_service import build_dashboard

    try:
        if args.from_db:
            obstacles = _load_obstacles_db()
        else:
            obstacles = _load_obstacles_file(Path(args.input))
        view = build_dashboard(obstacles, args.tab)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1
    print(json.dumps(view.to_dict(), indent=2 if args.pretty else None, sort_keys=True))
    return 0


def _cmd_check_transition(args: argparse.Namespace) -> int:
    from domain.obstacles.types import ObstacleStatus
    from lifecycle.manager import transition_error_message
    from lifecycle.transitions import can_transition

    src = ObstacleStatus.parse(args.from_status)
    dst = ObstacleStatus.parse(args.to_status)
    allowed = can_transition(src, dst)
    out = {"from": src.value, "to": dst.value, "allowed": allowed}
    if not allowed:
        out["message"] = transition_error_message(src, dst)
    print(json.dumps(out, sort_keys=True))
    return 0 if allowed else 1


def _cmd_transitions(_args: argparse.Namespace) -> int:
    from routes.api_v1.lifecycle import get_transitions

    print(json.dumps(get_transitions(), indent=2, sort_keys=True))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    from ranking.pipeline import RankingTab
    from version import get_version

    argv = sys.argv[1:] if argv is None else argv
    if "--version" in argv or "-V" in argv:
        print(get_version())
        return 0
    parser = argparse.ArgumentParser(prog="priority", description="Obstacle priority ranking and lifecycle checks")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Rank obstacles by priority score and print stats.")
    source = rank.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="JSON file: list of obstacles or {\"obstacles\": [...]}")
    source.add_argument("--from-db", action="store_true", help="Read obstacles from DATABASE_URL")
    rank.add_argument("--tab", default=RankingTab.ALL.value, choices=[t.value for t in RankingTab], help="Dashboard tab filter")
    rank.add_argument("--pretty", action="store_true", help="Indent JSON output")
    rank.set_defaults(func=_cmd_rank)

    check = sub.add_parser("check-transition", help="Exit 0 if FROM -> TO is allowed, else 1.")
    check.add_argument("from_status")
    check.add_argument("to_status")
    check.set_defaults(func=_cmd_check_transition)

    table = sub.add_parser("transitions", help="Print the allowed transitions and admin actions.")
    table.set_defaults(func=_cmd_transitions)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
