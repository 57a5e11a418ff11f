"""Similar creator endpoints — explicit recomputation and lookup."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.base import get_db
from creatorrec.schemas.market_trend import SimilarCreatorRead
from creatorrec.services.similarity_service import calculate_similar_creators, list_similar_creators

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/creators/{creator_id}/similar-creators", tags=["similar-creators"])


@router.get("", response_model=list[SimilarCreatorRead])
async def get_similar_creators(
    creator_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """List stored similarity edges for a creator, most similar first."""
    return await list_similar_creators(db, creator_id)


@router.post("/calculate", response_model=list[SimilarCreatorRead])
async def recalculate(
    creator_id: UUID,
    db: AsyncSession = Depends(get_db),
    background: bool = Query(False, description="Queue a Celery task instead of computing inline"),
):
    """Recompute a creator's similarity edges."""
    if background:
        from creatorrec.tasks.recommendation_tasks import recalculate_similar_creators
        try:
            recalculate_similar_creators.delay(str(creator_id))
        except Exception:
            logger.exception("Failed to queue similarity recalculation for creator %s", creator_id)
            raise HTTPException(status_code=503, detail="Task queue unavailable")
        return JSONResponse(status_code=202, content={"queued": True})

    return await calculate_similar_creators(db, creator_id)
