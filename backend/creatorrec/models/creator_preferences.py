"""Creator preferences model — inferred or explicit shopping profile per creator."""

from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from creatorrec.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class CreatorPreferences(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "creator_preferences"

    creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), unique=True, nullable=False)

    preferred_categories = Column(JSONType, nullable=False, default=list)
    budget_range = Column(JSONType, nullable=False, default=dict)  # {"min": ..., "max": ..., "average": ...}
    target_audience = Column(String(50))  # general, young_adults, professionals, families
    location = Column(String(100))
    interests = Column(JSONType, nullable=False, default=list)
    brand_style = Column(String(50))  # affordable, luxury, eco_friendly

    # Relationships
    creator = relationship("Creator", back_populates="preferences")
