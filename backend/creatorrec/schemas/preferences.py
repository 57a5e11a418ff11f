"""Pydantic schemas for CreatorPreferences model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BudgetRange(BaseModel):
    """Price band a creator is comfortable selling in."""

    min: float
    max: float
    average: float


class CreatorPreferencesRead(BaseModel):
    """Full preferences output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    creator_id: UUID
    preferred_categories: list[str] = Field(default_factory=list)
    budget_range: BudgetRange | None = None
    target_audience: str | None = None
    location: str | None = None
    interests: list[str] = Field(default_factory=list)
    brand_style: str | None = None
    created_at: datetime
    updated_at: datetime


class CreatorPreferencesUpdate(BaseModel):
    """Partial update; only fields that are sent get written.

    List fields may be omitted or sent as ``[]`` but not as ``null``.
    """

    preferred_categories: list[str] = Field(default=None)
    budget_range: BudgetRange | None = None
    target_audience: str | None = None
    location: str | None = None
    interests: list[str] = Field(default=None)
    brand_style: str | None = None
