"""Pydantic schemas for MarketTrend and SimilarCreator models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Seasonality(BaseModel):
    peak_months: list[int] = Field(default_factory=list)
    low_months: list[int] = Field(default_factory=list)


class MarketTrendRead(BaseModel):
    """Market trend output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category: str
    region: str
    period: str
    trend_score: float
    search_volume: int | None = None
    sales_velocity: float | None = None
    competition_level: str | None = None
    price_range: dict | None = None
    seasonality: Seasonality | None = None
    keywords: list[str] | None = None


class SimilarCreatorRead(BaseModel):
    """A directed creator similarity edge."""

    model_config = ConfigDict(from_attributes=True)

    creator_id: UUID
    similar_creator_id: UUID
    similarity_score: float
    similarity_factors: list[str] = Field(default_factory=list)
    calculated_at: datetime
