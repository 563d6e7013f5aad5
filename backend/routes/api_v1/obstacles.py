"""POST /api/v1/obstacles/{obstacle_id}/status: request a review-status transition."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from audit.recorder import AuditRecorder
from core.auth import AdminActor
from core.dependencies import get_admin_actor, get_db_session, get_recorder
from core.errors import ObstacleNotFoundError, StoreWriteError
from domain.obstacles.types import ObstacleStatus
from lifecycle.transitions import status_label
from services.status_service import change_obstacle_status

router = APIRouter(prefix="/obstacles", tags=["obstacles"])

_VALID_STATUSES = [s.value for s in ObstacleStatus if s != ObstacleStatus.UNKNOWN]


class StatusChangeBody(BaseModel):
    """Body for POST /obstacles/{obstacle_id}/status."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "verified", "notes": "Confirmed on site visit"}
        }
    )

    status: str = Field(..., description="Target status: pending | verified | resolved | false_report")
    notes: str = Field("", max_length=2000, description="Admin notes recorded with the change")


@router.post(
    "/{obstacle_id}/status",
    summary="Change obstacle review status",
    description="Validate the transition, write the new status, then record the change to the audit trail (best effort).",
)
async def post_obstacle_status(
    obstacle_id: str,
    body: StatusChangeBody,
    actor: AdminActor = Depends(get_admin_actor),
    session: AsyncSession = Depends(get_db_session),
    recorder: AuditRecorder = Depends(get_recorder),
):
    """
    - **200**: transition accepted and stored; returns the recorded change.
    - **400**: status is not one of the known statuses.
    - **404**: obstacle does not exist.
    - **409**: transition not allowed from the current status (nothing written).
    - **503**: store write failed; safe to retry.
    """
    if body.status.strip().lower() not in _VALID_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"status must be one of: {', '.join(_VALID_STATUSES)}",
        )
    try:
        result = await change_obstacle_status(
            session,
            obstacle_id,
            body.status,
            actor.id,
            body.notes,
            recorder,
            actor_email=actor.email,
        )
    except ObstacleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StoreWriteError as e:
        raise HTTPException(status_code=503, detail=StoreWriteError.user_message) from e

    if not result.accepted:
        raise HTTPException(status_code=409, detail=result.message)

    change = result.change
    return {
        "obstacle_id": obstacle_id,
        "status": change.to_status.value,
        "status_label": status_label(change.to_status),
        "change": change.to_dict(),
    }
