"""Market trend queries."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.market_trend import MarketTrend


async def list_market_trends(
    db: AsyncSession,
    region: str | None = None,
    period: str | None = None,
) -> list[MarketTrend]:
    query = select(MarketTrend)
    if region:
        query = query.where(MarketTrend.region == region)
    if period:
        query = query.where(MarketTrend.period == period)
    query = query.order_by(MarketTrend.trend_score.desc(), MarketTrend.category)
    result = await db.execute(query)
    return list(result.scalars().all())
