"""Pydantic schemas package."""

from creatorrec.schemas.recommendation import (
    PartnerSummary,
    RecommendationMetadata,
    RecommendationItem,
    RecommendationSnapshotRead,
)
from creatorrec.schemas.preferences import (
    BudgetRange,
    CreatorPreferencesRead,
    CreatorPreferencesUpdate,
)
from creatorrec.schemas.behavior import (
    BehaviorMetadata,
    TrackBehaviorRequest,
    TrackBehaviorResponse,
)
from creatorrec.schemas.market_trend import (
    Seasonality,
    MarketTrendRead,
    SimilarCreatorRead,
)

__all__ = [
    # Recommendation
    "PartnerSummary",
    "RecommendationMetadata",
    "RecommendationItem",
    "RecommendationSnapshotRead",
    # Preferences
    "BudgetRange",
    "CreatorPreferencesRead",
    "CreatorPreferencesUpdate",
    # Behavior
    "BehaviorMetadata",
    "TrackBehaviorRequest",
    "TrackBehaviorResponse",
    # Market trends / similarity
    "Seasonality",
    "MarketTrendRead",
    "SimilarCreatorRead",
]
