"""Recommendation endpoints — ranked suggestions, snapshot, behavior tracking."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.base import get_db
from creatorrec.schemas.behavior import TrackBehaviorRequest, TrackBehaviorResponse
from creatorrec.schemas.recommendation import (
    RecommendationFilter,
    RecommendationItem,
    RecommendationSnapshotRead,
)
from creatorrec.services.behavior_service import track_behavior
from creatorrec.services.recommendation_service import get_active_snapshot, get_recommendations

router = APIRouter(prefix="/creators/{creator_id}/recommendations", tags=["recommendations"])


@router.get("", response_model=list[RecommendationItem])
async def list_recommendations(
    creator_id: UUID,
    db: AsyncSession = Depends(get_db),
    type: RecommendationFilter = Query("all", description="Strategy to run, or 'all'"),
    limit: int = Query(20, ge=1, le=100),
):
    """Compute the creator's ranked recommendations and store them as the current snapshot."""
    return await get_recommendations(db, creator_id, limit=limit, recommendation_type=type)


@router.get("/snapshot", response_model=list[RecommendationSnapshotRead])
async def get_snapshot(
    creator_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Return the last stored recommendation set without recomputing."""
    return await get_active_snapshot(db, creator_id)


@router.post("/track", response_model=TrackBehaviorResponse)
async def track(
    request: Request,
    creator_id: UUID,
    payload: TrackBehaviorRequest,
    db: AsyncSession = Depends(get_db),
):
    """Record a creator action. Always 200; ``success`` reports whether it was stored."""
    success = await track_behavior(
        db,
        creator_id,
        payload.action,
        entity_type=payload.entity_type,
        entity_id=payload.entity_id,
        metadata=payload.metadata,
        session_id=payload.session_id,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return TrackBehaviorResponse(success=success)
