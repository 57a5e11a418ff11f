"""Creator behavior model — append-only log of creator catalog actions."""

from sqlalchemy import Column, String, DateTime, ForeignKey, Index, Uuid, func
from sqlalchemy.orm import relationship

from creatorrec.models.base import Base, JSONType, UUIDMixin

VIEW_PRODUCT = "view_product"
ADD_TO_STORE = "add_to_store"
REMOVE_FROM_STORE = "remove_from_store"
CLICK_RECOMMENDATION = "click_recommendation"
SEARCH = "search"
FILTER = "filter"

BEHAVIOR_ACTIONS = (VIEW_PRODUCT, ADD_TO_STORE, REMOVE_FROM_STORE, CLICK_RECOMMENDATION, SEARCH, FILTER)


class CreatorBehavior(UUIDMixin, Base):
    __tablename__ = "creator_behavior"

    creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False)
    action = Column(String(30), nullable=False)
    entity_type = Column(String(30))  # product, dropshipping_product, category
    entity_id = Column(Uuid(as_uuid=True))
    event_metadata = Column("metadata", JSONType, default=dict)
    session_id = Column(String(255))
    ip_address = Column(String(45))
    user_agent = Column(String(500))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    creator = relationship("Creator", back_populates="behavior")

    __table_args__ = (
        Index("idx_behavior_creator_created", "creator_id", "created_at"),
        Index("idx_behavior_action_entity", "action", "entity_type", "entity_id"),
    )
