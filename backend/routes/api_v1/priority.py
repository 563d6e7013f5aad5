"""GET /api/v1/priority/obstacles, GET /api/v1/priority/obstacles/{id}, POST /api/v1/priority/calculate."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from audit.model import dashboard_access_entry
from audit.recorder import AuditRecorder
from core.auth import AdminActor
from core.dependencies import get_admin_actor, get_db_session, get_recorder
from core.errors import ObstacleNotFoundError
from domain.obstacles.types import Obstacle
from priority.calculator import calculate_priority
from ranking.pipeline import RankingTab
from services.priority_service import load_dashboard, load_obstacle_detail

router = APIRouter(prefix="/priority", tags=["priority"])


@router.get(
    "/obstacles",
    summary="Ranked obstacles and dashboard statistics",
    response_description="Obstacles for the tab, highest score first, plus stats over all obstacles.",
)
async def get_ranked_obstacles(
    tab: str = Query(RankingTab.ALL.value, description="all | urgent | critical | high | medium | low | resolved"),
    actor: AdminActor = Depends(get_admin_actor),
    session: AsyncSession = Depends(get_db_session),
    recorder: AuditRecorder = Depends(get_recorder),
) -> dict:
    """
    Rank every stored obstacle by priority score. Stats cover the full set;
    `tab` only narrows the returned list. Each call is audited as a dashboard access.
    """
    try:
        ranking_tab = RankingTab(tab)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"tab must be one of: {', '.join(t.value for t in RankingTab)}",
        )
    view = await load_dashboard(session, ranking_tab)
    recorder.submit_entry(dashboard_access_entry(actor.id, actor.email, datetime.now(timezone.utc)))
    return view.to_dict()


@router.get("/obstacles/{obstacle_id}", summary="One obstacle with priority and available actions")
async def get_obstacle(
    obstacle_id: str,
    _actor: AdminActor = Depends(get_admin_actor),
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        return await load_obstacle_detail(session, obstacle_id)
    except ObstacleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post(
    "/calculate",
    summary="Score an obstacle payload",
    response_description="PriorityResult for the payload; nothing is stored.",
)
def post_calculate(obstacle: Obstacle) -> dict:
    """Unrecognised type, severity or status values score as their zero/default term."""
    return calculate_priority(obstacle).to_dict()
