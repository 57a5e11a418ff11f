"""Recommendation strategies — rule-based scoring of the dropshipping catalog.

Each strategy takes the creator, their resolved preferences and a candidate
budget, and returns scored ``RecommendationItem`` objects. Strategies are
independent; an empty list means "nothing to suggest", never an error.

Scores:
    trending          trend_score of the product's category (period trends >= 70)
    personalized      70 + 15 preferred + 10 in budget + 2/recent view (max +10), capped at 95
    similar_creators  60 + 5 per similar-creator add_to_store, capped at 90
    seasonal          trend_score + 20 in a peak month, capped at 95
"""

from datetime import date
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.config import Settings, get_settings
from creatorrec.models.creator_behavior import CreatorBehavior, VIEW_PRODUCT, ADD_TO_STORE
from creatorrec.models.creator_preferences import CreatorPreferences
from creatorrec.models.dropshipping import DropshippingPartner, DropshippingProduct, APPROVED_PARTNER_STATUS
from creatorrec.models.market_trend import MarketTrend
from creatorrec.models.product_recommendation import DROPSHIPPING_PRODUCT
from creatorrec.models.similar_creator import SimilarCreator
from creatorrec.schemas.recommendation import PartnerSummary, RecommendationItem, RecommendationMetadata

TRENDING = "trending"
PERSONALIZED = "personalized"
SIMILAR_CREATORS = "similar_creators"
SEASONAL = "seasonal"

PERSONALIZED_BASE_SCORE = 70
PREFERRED_CATEGORY_BOOST = 15
BUDGET_MATCH_BOOST = 10
RECENT_VIEW_BOOST = 2
RECENT_VIEW_BOOST_CAP = 10
PERSONALIZED_MAX_SCORE = 95

SIMILAR_BASE_SCORE = 60
SIMILAR_ADD_BOOST = 5
SIMILAR_MAX_SCORE = 90

SEASONAL_PEAK_BOOST = 20
SEASONAL_MAX_SCORE = 95


# --- Scoring ---

def personalized_score(
    category: str | None,
    price: float | None,
    preferred_categories: list[str],
    budget_range: dict | None,
    viewed_categories: list[str],
) -> float:
    score = PERSONALIZED_BASE_SCORE

    if category in preferred_categories:
        score += PREFERRED_CATEGORY_BOOST

    if budget_range and price is not None:
        if float(budget_range["min"]) <= price <= float(budget_range["max"]):
            score += BUDGET_MATCH_BOOST

    recent_views = sum(1 for viewed in viewed_categories if viewed == category)
    score += min(recent_views * RECENT_VIEW_BOOST, RECENT_VIEW_BOOST_CAP)

    return float(min(score, PERSONALIZED_MAX_SCORE))


def similar_creator_score(add_count: int) -> float:
    return float(min(SIMILAR_BASE_SCORE + add_count * SIMILAR_ADD_BOOST, SIMILAR_MAX_SCORE))


def seasonal_score(trend_score: float, peak_months: list[int], month: int) -> float:
    # Candidates are pre-filtered to peak-month trends, so the plain branch only
    # applies to callers scoring arbitrary trends.
    if month in peak_months:
        return float(min(trend_score + SEASONAL_PEAK_BOOST, SEASONAL_MAX_SCORE))
    return float(trend_score)


def season_name(month: int) -> str:
    if month == 12 or month <= 2:
        return "Holiday Season"
    if 3 <= month <= 5:
        return "Spring"
    if 6 <= month <= 8:
        return "Mid-Year"
    return "Back-to-School"


# --- Catalog helpers ---

def _eligible_products():
    """Active dropshipping products from approved partners, in a stable order."""
    return (
        select(DropshippingProduct, DropshippingPartner)
        .join(DropshippingPartner, DropshippingProduct.partner_id == DropshippingPartner.id)
        .where(
            DropshippingProduct.is_active == True,  # noqa: E712
            DropshippingPartner.status == APPROVED_PARTNER_STATUS,
        )
        .order_by(DropshippingProduct.created_at.desc(), DropshippingProduct.id)
    )


def _product_price(product: DropshippingProduct) -> float | None:
    if product.suggested_retail_price is None:
        return None
    return float(product.suggested_retail_price)


def _to_item(
    product: DropshippingProduct,
    partner: DropshippingPartner,
    recommendation_type: str,
    score: float,
    reason: str,
    **extra,
) -> RecommendationItem:
    return RecommendationItem(
        id=product.id,
        type=DROPSHIPPING_PRODUCT,
        recommendation_type=recommendation_type,
        name=product.name,
        description=product.description or "",
        price=_product_price(product),
        images=product.images if isinstance(product.images, list) else [],
        category=product.category or "",
        score=score,
        reason=reason,
        metadata=RecommendationMetadata(
            recommendation_type=recommendation_type,
            wholesale_price=product.wholesale_price,
            commission_rate=product.commission_rate,
            **extra,
        ),
        partner=PartnerSummary.model_validate(partner) if partner else None,
    )


# --- Strategies ---

async def trending_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    preferences: CreatorPreferences,
    limit: int,
    today: date,
    settings: Settings | None = None,
) -> list[RecommendationItem]:
    """Products in this period's hottest categories, scored by the category trend."""
    settings = settings or get_settings()
    period = today.strftime("%Y-%m")

    trends_result = await db.execute(
        select(MarketTrend)
        .where(
            MarketTrend.period == period,
            MarketTrend.trend_score >= settings.trending_min_score,
        )
        .order_by(MarketTrend.trend_score.desc())
        .limit(settings.trend_category_limit)
    )
    category_scores: dict[str, float] = {}
    for trend in trends_result.scalars():
        category_scores.setdefault(trend.category, float(trend.trend_score))

    if not category_scores:
        return []

    result = await db.execute(
        _eligible_products()
        .where(DropshippingProduct.category.in_(list(category_scores)))
        .limit(limit)
    )

    items = []
    for product, partner in result.all():
        score = category_scores[product.category]
        items.append(_to_item(
            product, partner, TRENDING, score,
            f"Trending in {product.category} category with {round(score)}% market growth",
            trend_score=score,
        ))
    return items


async def personalized_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    preferences: CreatorPreferences,
    limit: int,
    today: date,
    settings: Settings | None = None,
) -> list[RecommendationItem]:
    """Products in categories the creator prefers or has recently viewed."""
    settings = settings or get_settings()

    behavior_result = await db.execute(
        select(CreatorBehavior)
        .where(CreatorBehavior.creator_id == creator_id)
        .order_by(CreatorBehavior.created_at.desc())
        .limit(settings.behavior_history_limit)
    )
    viewed_categories = [
        event.event_metadata["category"]
        for event in behavior_result.scalars()
        if event.action == VIEW_PRODUCT
        and event.event_metadata
        and event.event_metadata.get("category")
    ]

    preferred_categories = list(preferences.preferred_categories or [])
    target_categories = list(dict.fromkeys(preferred_categories + viewed_categories))
    if not target_categories:
        return []

    result = await db.execute(
        _eligible_products()
        .where(DropshippingProduct.category.in_(target_categories))
        .limit(limit)
    )

    items = []
    for product, partner in result.all():
        score = personalized_score(
            product.category,
            _product_price(product),
            preferred_categories,
            preferences.budget_range,
            viewed_categories,
        )
        items.append(_to_item(
            product, partner, PERSONALIZED, score,
            f"Matches your interests in {product.category} and fits your target audience",
        ))
    return items


async def similar_creator_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    preferences: CreatorPreferences,
    limit: int,
    today: date,
    settings: Settings | None = None,
) -> list[RecommendationItem]:
    """Products that the creator's closest peers have added to their stores."""
    settings = settings or get_settings()

    edges_result = await db.execute(
        select(SimilarCreator.similar_creator_id)
        .where(SimilarCreator.creator_id == creator_id)
        .order_by(SimilarCreator.similarity_score.desc())
        .limit(settings.similar_creator_limit)
    )
    similar_creator_ids = list(edges_result.scalars())
    if not similar_creator_ids:
        return []

    add_count = func.count(CreatorBehavior.id)
    counts_result = await db.execute(
        select(CreatorBehavior.entity_id, add_count.label("count"))
        .where(
            CreatorBehavior.creator_id.in_(similar_creator_ids),
            CreatorBehavior.action == ADD_TO_STORE,
            CreatorBehavior.entity_type == DROPSHIPPING_PRODUCT,
            CreatorBehavior.entity_id.isnot(None),
        )
        .group_by(CreatorBehavior.entity_id)
        .order_by(add_count.desc())
        .limit(limit)
    )
    counts = {row.entity_id: int(row.count) for row in counts_result}
    if not counts:
        return []

    result = await db.execute(
        _eligible_products().where(DropshippingProduct.id.in_(list(counts)))
    )

    items = []
    for product, partner in result.all():
        count = counts[product.id]
        items.append(_to_item(
            product, partner, SIMILAR_CREATORS, similar_creator_score(count),
            "Popular among creators with similar audiences and product preferences",
            similar_creator_count=count,
        ))
    return items


async def seasonal_recommendations(
    db: AsyncSession,
    creator_id: UUID,
    preferences: CreatorPreferences,
    limit: int,
    today: date,
    settings: Settings | None = None,
) -> list[RecommendationItem]:
    """Products in categories that peak in the current month."""
    settings = settings or get_settings()
    month = today.month
    season = season_name(month)

    # peak_months lives in a JSON column, so membership is checked here rather
    # than in SQL to stay portable across backends.
    trends_result = await db.execute(
        select(MarketTrend).order_by(MarketTrend.trend_score.desc())
    )
    peak_trends = [trend for trend in trends_result.scalars() if month in trend.peak_months]
    seasonal_trends: dict[str, MarketTrend] = {}
    for trend in peak_trends[:settings.trend_category_limit]:
        seasonal_trends.setdefault(trend.category, trend)

    if not seasonal_trends:
        return []

    result = await db.execute(
        _eligible_products()
        .where(DropshippingProduct.category.in_(list(seasonal_trends)))
        .limit(limit)
    )

    items = []
    for product, partner in result.all():
        trend = seasonal_trends[product.category]
        score = seasonal_score(float(trend.trend_score), trend.peak_months, month)
        items.append(_to_item(
            product, partner, SEASONAL, score,
            f"Perfect timing for {season} sales in {product.category}",
            season=season,
            trend_score=float(trend.trend_score),
        ))
    return items


STRATEGIES = {
    TRENDING: trending_recommendations,
    PERSONALIZED: personalized_recommendations,
    SIMILAR_CREATORS: similar_creator_recommendations,
    SEASONAL: seasonal_recommendations,
}
