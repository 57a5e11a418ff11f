"""Similarity service — pairwise creator similarity from preference overlap."""

import logging
from datetime import datetime, timezone
from typing import Iterable
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.config import Settings, get_settings
from creatorrec.models.creator_preferences import CreatorPreferences
from creatorrec.models.similar_creator import SimilarCreator

logger = logging.getLogger(__name__)

SHARED_CATEGORY_POINTS = 15
SAME_LOCATION_POINTS = 10
SAME_AUDIENCE_POINTS = 15
SAME_BRAND_STYLE_POINTS = 10
MAX_SIMILARITY = 100


def score_creator_similarity(
    prefs: CreatorPreferences | None,
    other: CreatorPreferences | None,
) -> tuple[float, list[str]]:
    """Score two profiles in [0, 100] and explain the score."""
    score = 0
    factors = []
    if prefs is None or other is None:
        return 0.0, factors

    if prefs.preferred_categories and other.preferred_categories:
        other_categories = set(other.preferred_categories)
        common = [c for c in dict.fromkeys(prefs.preferred_categories) if c in other_categories]
        if common:
            score += len(common) * SHARED_CATEGORY_POINTS
            factors.append(f"{len(common)} common categories")

    if prefs.location and prefs.location == other.location:
        score += SAME_LOCATION_POINTS
        factors.append("same location")

    if prefs.target_audience and prefs.target_audience == other.target_audience:
        score += SAME_AUDIENCE_POINTS
        factors.append("same target audience")

    if prefs.brand_style and prefs.brand_style == other.brand_style:
        score += SAME_BRAND_STYLE_POINTS
        factors.append("similar brand style")

    return float(max(0, min(score, MAX_SIMILARITY))), factors


def build_similarity_edges(
    creator_id: UUID,
    prefs: CreatorPreferences | None,
    others: Iterable[CreatorPreferences],
    threshold: float,
) -> list[SimilarCreator]:
    """Directed edges creator -> other for every pair scoring above ``threshold``."""
    now = datetime.now(timezone.utc)
    edges = []
    for other in others:
        if other.creator_id == creator_id:
            continue
        score, factors = score_creator_similarity(prefs, other)
        if score > threshold:
            edges.append(SimilarCreator(
                creator_id=creator_id,
                similar_creator_id=other.creator_id,
                similarity_score=score,
                similarity_factors=factors,
                calculated_at=now,
                created_at=now,
            ))
    return edges


async def calculate_similar_creators(
    db: AsyncSession,
    creator_id: UUID,
    settings: Settings | None = None,
) -> list[SimilarCreator]:
    """Recompute and replace every outgoing similarity edge for a creator.

    Only this creator's edges change; other creators keep theirs until they
    are recomputed.
    """
    settings = settings or get_settings()

    prefs_result = await db.execute(
        select(CreatorPreferences).where(CreatorPreferences.creator_id == creator_id)
    )
    prefs = prefs_result.scalar_one_or_none()

    others_result = await db.execute(
        select(CreatorPreferences).where(CreatorPreferences.creator_id != creator_id)
    )
    edges = build_similarity_edges(creator_id, prefs, others_result.scalars(), settings.similarity_threshold)

    try:
        async with db.begin_nested():
            await db.execute(delete(SimilarCreator).where(SimilarCreator.creator_id == creator_id))
            db.add_all(edges)
            await db.flush()
    except Exception:
        logger.exception("Failed to store similar creators for creator %s", creator_id)
        raise

    logger.info("Stored %d similar creators for creator %s", len(edges), creator_id)
    return sorted(edges, key=lambda edge: edge.similarity_score, reverse=True)


async def list_similar_creators(db: AsyncSession, creator_id: UUID) -> list[SimilarCreator]:
    result = await db.execute(
        select(SimilarCreator)
        .where(SimilarCreator.creator_id == creator_id)
        .order_by(SimilarCreator.similarity_score.desc())
    )
    return list(result.scalars().all())
