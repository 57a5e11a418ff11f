"""Celery tasks for creator similarity and recommendation snapshots.

Both are dispatched explicitly by callers; nothing here runs on a schedule.
"""

import asyncio
import logging
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from creatorrec.config import get_settings
from creatorrec.tasks.celery_app import celery_app
from creatorrec.models.base import SyncSessionLocal

# Import ALL models to ensure relationships resolve
from creatorrec.models.creator import Creator  # noqa: F401
from creatorrec.models.product import Product  # noqa: F401
from creatorrec.models.dropshipping import DropshippingPartner, DropshippingProduct  # noqa: F401
from creatorrec.models.creator_behavior import CreatorBehavior  # noqa: F401
from creatorrec.models.market_trend import MarketTrend  # noqa: F401
from creatorrec.models.product_recommendation import ProductRecommendation  # noqa: F401
from creatorrec.models.creator_preferences import CreatorPreferences
from creatorrec.models.similar_creator import SimilarCreator
from creatorrec.services.recommendation_service import get_recommendations
from creatorrec.services.similarity_service import build_similarity_edges

logger = logging.getLogger(__name__)


@celery_app.task(name="creatorrec.tasks.recommendation_tasks.recalculate_similar_creators")
def recalculate_similar_creators(creator_id: str):
    """Rebuild all outgoing similarity edges for one creator."""
    settings = get_settings()
    creator_uuid = UUID(creator_id)
    with SyncSessionLocal() as session:
        try:
            prefs = session.execute(
                select(CreatorPreferences).where(CreatorPreferences.creator_id == creator_uuid)
            ).scalar_one_or_none()
            others = session.execute(
                select(CreatorPreferences).where(CreatorPreferences.creator_id != creator_uuid)
            ).scalars().all()

            edges = build_similarity_edges(creator_uuid, prefs, others, settings.similarity_threshold)

            session.execute(delete(SimilarCreator).where(SimilarCreator.creator_id == creator_uuid))
            session.add_all(edges)
            session.commit()

            logger.info("Recalculated %d similar creators for creator %s", len(edges), creator_id)
            return {"similar_creators": len(edges)}

        except Exception:
            session.rollback()
            logger.exception("Failed to recalculate similar creators for creator %s", creator_id)
            raise


async def _refresh_snapshot(creator_id: str, limit: int) -> int:
    settings = get_settings()
    # One event loop per task run; pooled connections cannot outlive it.
    task_engine = create_async_engine(settings.database_url, poolclass=NullPool)
    session_factory = async_sessionmaker(task_engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            try:
                recommendations = await get_recommendations(session, UUID(creator_id), limit=limit)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        return len(recommendations)
    finally:
        await task_engine.dispose()


@celery_app.task(name="creatorrec.tasks.recommendation_tasks.refresh_recommendations")
def refresh_recommendations(creator_id: str, limit: int | None = None):
    """Recompute and persist a creator's recommendation snapshot outside a request."""
    limit = limit or get_settings().default_recommendation_limit
    try:
        stored = asyncio.run(_refresh_snapshot(creator_id, limit))
    except Exception:
        logger.exception("Failed to refresh recommendations for creator %s", creator_id)
        raise
    logger.info("Refreshed %d recommendations for creator %s", stored, creator_id)
    return {"recommendations": stored}
