"""Product model — a creator's own catalog items."""

from sqlalchemy import Column, String, Numeric, Boolean, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from creatorrec.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class Product(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "products"

    creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    currency = Column(String(3), default="KES")
    product_type = Column(String(20), default="physical")  # digital, physical, service, booking
    category = Column(String(100), index=True)
    images = Column(JSONType, default=list)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    creator = relationship("Creator", back_populates="products")

    __table_args__ = (
        Index("idx_products_creator_category", "creator_id", "category"),
    )
