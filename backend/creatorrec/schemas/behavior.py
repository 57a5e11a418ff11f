"""Pydantic schemas for creator behavior tracking."""

from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

BehaviorAction = Literal[
    "view_product",
    "add_to_store",
    "remove_from_store",
    "click_recommendation",
    "search",
    "filter",
]
EntityType = Literal["product", "dropshipping_product", "category"]


class BehaviorMetadata(BaseModel):
    """Context recorded with a behavior event.

    ``category`` drives personalization for ``view_product`` events.
    ``search_term`` and ``filters`` accompany ``search``/``filter`` events.
    Extra keys are kept as sent.
    """

    model_config = ConfigDict(extra="allow")

    category: str | None = None
    recommendation_type: str | None = None
    score: float | None = None
    search_term: str | None = None
    filters: dict[str, Any] | None = None


class TrackBehaviorRequest(BaseModel):
    action: BehaviorAction
    entity_type: EntityType | None = None
    entity_id: UUID | None = None
    metadata: BehaviorMetadata = Field(default_factory=BehaviorMetadata)
    session_id: str | None = None


class TrackBehaviorResponse(BaseModel):
    success: bool
