"""Recommendation service — runs the strategies, ranks the merged set, persists the snapshot."""

import logging
import math
from datetime import date, datetime, timezone
from typing import Iterable
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.config import Settings, get_settings
from creatorrec.models.product_recommendation import ProductRecommendation, OWN_PRODUCT
from creatorrec.schemas.recommendation import RecommendationItem
from creatorrec.services.preference_service import creator_exists, get_or_create_preferences
from creatorrec.services.recommendation_strategies import STRATEGIES

logger = logging.getLogger(__name__)

ALL_STRATEGIES = "all"


def deduplicate_recommendations(recommendations: Iterable[RecommendationItem]) -> list[RecommendationItem]:
    """Keep the first occurrence of each (product type, product id) pair."""
    seen = set()
    unique = []
    for rec in recommendations:
        key = (rec.type, rec.id)
        if key in seen:
            continue
        seen.add(key)
        unique.append(rec)
    return unique


def rank_recommendations(recommendations: Iterable[RecommendationItem], limit: int) -> list[RecommendationItem]:
    """Dedupe, order by score descending (ties keep strategy order), truncate."""
    unique = deduplicate_recommendations(recommendations)
    return sorted(unique, key=lambda rec: rec.score, reverse=True)[:limit]


async def get_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    limit: int = 20,
    recommendation_type: str = ALL_STRATEGIES,
    today: date | None = None,
    settings: Settings | None = None,
) -> list[RecommendationItem]:
    """Compute, persist and return the creator's ranked recommendations.

    ``recommendation_type`` is ``"all"`` or one strategy name. Under ``"all"``
    every strategy is asked for ``ceil(limit / 4)`` candidates; a single
    strategy is asked for ``limit``. Strategies that come up short are not
    backfilled.
    """
    settings = settings or get_settings()

    if recommendation_type == ALL_STRATEGIES:
        requested = list(STRATEGIES)
        per_strategy = math.ceil(limit / len(STRATEGIES))
    elif recommendation_type in STRATEGIES:
        requested = [recommendation_type]
        per_strategy = limit
    else:
        logger.warning("Unknown recommendation type %r for creator %s", recommendation_type, creator_id)
        return []

    if not await creator_exists(db, creator_id):
        logger.info("No recommendations for unknown creator %s", creator_id)
        return []

    preferences = await get_or_create_preferences(db, creator_id, settings)
    today = today or datetime.now(timezone.utc).date()

    # Strategies share the request session, so they run one after another.
    candidates: list[RecommendationItem] = []
    for name in requested:
        candidates.extend(
            await _run_strategy(db, name, creator_id, preferences, per_strategy, today, settings)
        )

    ranked = rank_recommendations(candidates, limit)
    await store_recommendations(db, creator_id, ranked)

    logger.info(
        "Computed %d recommendations for creator %s (type=%s, candidates=%d)",
        len(ranked), creator_id, recommendation_type, len(candidates),
    )
    return ranked


async def _run_strategy(db, name, creator_id, preferences, limit, today, settings) -> list[RecommendationItem]:
    """Run one strategy in a SAVEPOINT; a failure yields no candidates."""
    strategy = STRATEGIES[name]
    try:
        async with db.begin_nested():
            return await strategy(db, creator_id, preferences, limit, today, settings)
    except Exception:
        logger.exception("Strategy %s failed for creator %s", name, creator_id)
        return []


async def store_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    recommendations: list[RecommendationItem],
) -> bool:
    """Replace the creator's active snapshot with ``recommendations``.

    Delete and insert share one SAVEPOINT, so readers never see a partial set.
    A write failure is logged and reported as ``False``; it does not propagate.
    """
    try:
        async with db.begin_nested():
            await db.execute(
                delete(ProductRecommendation).where(
                    ProductRecommendation.creator_id == creator_id,
                    ProductRecommendation.is_active == True,  # noqa: E712
                )
            )
            db.add_all([
                ProductRecommendation(
                    creator_id=creator_id,
                    recommendation_type=rec.recommendation_type,
                    product_type=rec.type,
                    product_id=rec.id if rec.type == OWN_PRODUCT else None,
                    dropshipping_product_id=rec.id if rec.type != OWN_PRODUCT else None,
                    score=round(rec.score, 2),
                    reason=rec.reason,
                    recommendation_metadata=rec.metadata.model_dump(mode="json", exclude_none=True),
                    is_active=True,
                    created_at=datetime.now(timezone.utc),
                )
                for rec in recommendations
            ])
            await db.flush()
        return True
    except Exception:
        logger.exception("Failed to store recommendations for creator %s", creator_id)
        return False


async def get_active_snapshot(db: AsyncSession, creator_id: UUID) -> list[ProductRecommendation]:
    result = await db.execute(
        select(ProductRecommendation)
        .where(
            ProductRecommendation.creator_id == creator_id,
            ProductRecommendation.is_active == True,  # noqa: E712
        )
        .order_by(ProductRecommendation.score.desc())
    )
    return list(result.scalars().all())
