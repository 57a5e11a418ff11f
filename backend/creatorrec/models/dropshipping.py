"""Dropshipping models — supplier partners and their catalog."""

from sqlalchemy import Column, String, Numeric, Boolean, Integer, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from creatorrec.models.base import Base, JSONType, TimestampMixin, UUIDMixin

APPROVED_PARTNER_STATUS = "approved"


class DropshippingPartner(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "dropshipping_partners"

    company_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=False)
    logo = Column(String(500))
    status = Column(String(20), default="pending", nullable=False, index=True)  # pending, approved, suspended, rejected
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    products = relationship("DropshippingProduct", back_populates="partner")


class DropshippingProduct(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "dropshipping_products"

    partner_id = Column(Uuid(as_uuid=True), ForeignKey("dropshipping_partners.id"), nullable=False, index=True)
    external_id = Column(String(255))

    # Core
    name = Column(String(255), nullable=False)
    description = Column(Text)
    category = Column(String(100), index=True)
    sku = Column(String(100), nullable=False)
    images = Column(JSONType, default=list)

    # Pricing
    wholesale_price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    suggested_retail_price = Column(Numeric(10, 2, asdecimal=False))
    currency = Column(String(3), default="KES")
    commission_rate = Column(Numeric(5, 2, asdecimal=False), default=10.0)

    stock = Column(Integer, default=0)
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    partner = relationship("DropshippingPartner", back_populates="products")

    __table_args__ = (
        Index("idx_dropshipping_category_active", "category", "is_active"),
    )
