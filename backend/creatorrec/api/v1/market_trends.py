"""Market trend endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.base import get_db
from creatorrec.schemas.market_trend import MarketTrendRead
from creatorrec.services.market_trend_service import list_market_trends

router = APIRouter(prefix="/market-trends", tags=["market-trends"])


@router.get("", response_model=list[MarketTrendRead])
async def get_market_trends(
    db: AsyncSession = Depends(get_db),
    region: str | None = Query(None, description="Filter by region (kenya, africa, global, ...)"),
    period: str | None = Query(None, pattern=r"^\d{4}-\d{2}$", description="Filter by period (YYYY-MM)"),
):
    """List market trends, strongest first."""
    return await list_market_trends(db, region=region, period=period)
