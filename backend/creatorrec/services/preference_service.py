"""Preference service — infers, loads and updates creator shopping profiles."""

import logging
from collections import Counter
from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.config import Settings, get_settings
from creatorrec.models.creator import Creator
from creatorrec.models.creator_preferences import CreatorPreferences
from creatorrec.models.product import Product
from creatorrec.schemas.preferences import CreatorPreferencesUpdate

logger = logging.getLogger(__name__)

TOP_CATEGORY_COUNT = 3


def infer_preferences(products: Iterable[Product], settings: Settings | None = None) -> dict:
    """Build a default profile from a creator's own catalog.

    Top categories by frequency (ties keep first-seen order), a budget band
    over positively priced products, and configured defaults for the rest.
    """
    settings = settings or get_settings()
    products = list(products)

    category_freq = Counter(p.category for p in products if p.category)
    preferred_categories = [cat for cat, _ in category_freq.most_common(TOP_CATEGORY_COUNT)]

    prices = [float(p.price) for p in products if p.price is not None and float(p.price) > 0]
    if prices:
        budget_range = {
            "min": min(prices),
            "max": max(prices),
            "average": sum(prices) / len(prices),
        }
    else:
        budget_range = {
            "min": settings.default_budget_min,
            "max": settings.default_budget_max,
            "average": settings.default_budget_average,
        }

    return {
        "preferred_categories": preferred_categories,
        "budget_range": budget_range,
        "target_audience": settings.default_target_audience,
        "location": settings.default_location,
        "interests": list(preferred_categories),
        "brand_style": settings.default_brand_style,
    }


async def creator_exists(db: AsyncSession, creator_id: UUID) -> bool:
    result = await db.execute(select(Creator.id).where(Creator.id == creator_id))
    return result.scalar_one_or_none() is not None


async def get_preferences(db: AsyncSession, creator_id: UUID) -> CreatorPreferences | None:
    result = await db.execute(
        select(CreatorPreferences).where(CreatorPreferences.creator_id == creator_id)
    )
    return result.scalar_one_or_none()


async def get_or_create_preferences(
    db: AsyncSession,
    creator_id: UUID,
    settings: Settings | None = None,
) -> CreatorPreferences:
    """Load the creator's preferences, inferring and persisting them on first access."""
    preferences = await get_preferences(db, creator_id)
    if preferences:
        return preferences

    products_result = await db.execute(select(Product).where(Product.creator_id == creator_id))
    inferred = infer_preferences(products_result.scalars().all(), settings)

    preferences = CreatorPreferences(creator_id=creator_id, **inferred)
    db.add(preferences)
    await db.flush()
    await db.refresh(preferences)

    logger.info(
        "Inferred preferences for creator %s (categories: %s)",
        creator_id, inferred["preferred_categories"],
    )
    return preferences


async def update_preferences(
    db: AsyncSession,
    creator_id: UUID,
    update: CreatorPreferencesUpdate,
    settings: Settings | None = None,
) -> CreatorPreferences:
    """Apply a partial update. Missing profiles are inferred first, then patched."""
    preferences = await get_or_create_preferences(db, creator_id, settings)

    changes = update.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if field in ("preferred_categories", "interests"):
            value = list(value)
        setattr(preferences, field, value)

    await db.flush()
    await db.refresh(preferences)

    logger.info("Updated preferences for creator %s (fields: %s)", creator_id, sorted(changes))
    return preferences
