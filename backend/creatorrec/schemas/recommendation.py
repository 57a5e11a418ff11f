"""Pydantic schemas for product recommendations."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

RecommendationType = Literal["trending", "personalized", "similar_creators", "seasonal"]
RecommendationFilter = Literal["all", "trending", "personalized", "similar_creators", "seasonal"]
ProductType = Literal["own_product", "dropshipping_product"]


class PartnerSummary(BaseModel):
    """Supplier info embedded in a dropshipping recommendation."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    company_name: str
    logo: str | None = None


class RecommendationMetadata(BaseModel):
    """Per-recommendation context.

    ``recommendation_type`` is always set. The remaining keys depend on the
    strategy: ``trend_score`` for trending and seasonal, ``season`` for
    seasonal, ``similar_creator_count`` for similar_creators. Unknown keys
    are preserved.
    """

    model_config = ConfigDict(extra="allow")

    recommendation_type: RecommendationType
    wholesale_price: float | None = None
    commission_rate: float | None = None
    trend_score: float | None = None
    season: str | None = None
    similar_creator_count: int | None = None


class RecommendationItem(BaseModel):
    """A scored candidate returned by the engine."""

    id: UUID
    type: ProductType = "dropshipping_product"
    recommendation_type: RecommendationType
    name: str
    description: str = ""
    price: float | None = None
    images: list[str] = Field(default_factory=list)
    category: str = ""
    score: float
    reason: str
    metadata: RecommendationMetadata
    partner: PartnerSummary | None = None


class RecommendationSnapshotRead(BaseModel):
    """A persisted recommendation row."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    creator_id: UUID
    recommendation_type: str
    product_type: str
    product_id: UUID | None = None
    dropshipping_product_id: UUID | None = None
    score: float
    reason: str | None = None
    metadata: dict | None = Field(default=None, validation_alias="recommendation_metadata")
    is_active: bool
    viewed_at: datetime | None = None
    clicked_at: datetime | None = None
    added_to_store_at: datetime | None = None
    created_at: datetime
