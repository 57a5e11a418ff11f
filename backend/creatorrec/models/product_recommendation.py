"""Product recommendation model — the latest ranked snapshot per creator."""

from sqlalchemy import Column, String, Numeric, Boolean, Text, DateTime, ForeignKey, Index, CheckConstraint, Uuid, func

from creatorrec.models.base import Base, JSONType, UUIDMixin

OWN_PRODUCT = "own_product"
DROPSHIPPING_PRODUCT = "dropshipping_product"


class ProductRecommendation(UUIDMixin, Base):
    __tablename__ = "product_recommendations"

    creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False)
    recommendation_type = Column(String(30), nullable=False)  # trending, personalized, similar_creators, seasonal
    product_type = Column(String(30), nullable=False)  # own_product, dropshipping_product

    # Exactly one of these is set, matching product_type
    product_id = Column(Uuid(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"))
    dropshipping_product_id = Column(Uuid(as_uuid=True), ForeignKey("dropshipping_products.id", ondelete="CASCADE"))

    score = Column(Numeric(5, 2, asdecimal=False), nullable=False)  # 0-100
    reason = Column(Text)
    recommendation_metadata = Column("metadata", JSONType, default=dict)
    is_active = Column(Boolean, default=True, nullable=False)

    # Feedback stamps
    viewed_at = Column(DateTime(timezone=True))
    clicked_at = Column(DateTime(timezone=True))
    added_to_store_at = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_recommendations_creator_active", "creator_id", "is_active"),
        Index("idx_recommendations_dropshipping", "dropshipping_product_id"),
        CheckConstraint(
            "(product_id IS NULL) <> (dropshipping_product_id IS NULL)",
            name="ck_recommendations_one_product",
        ),
    )
