"""Creator model — storefront tenants (owned by the accounts service)."""

from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship

from creatorrec.models.base import Base, TimestampMixin, UUIDMixin


class Creator(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "creators"

    store_handle = Column(String(100), unique=True, nullable=False, index=True)
    store_name = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    products = relationship("Product", back_populates="creator", cascade="all, delete-orphan")
    behavior = relationship("CreatorBehavior", back_populates="creator", cascade="all, delete-orphan")
    preferences = relationship("CreatorPreferences", back_populates="creator", uselist=False, cascade="all, delete-orphan")
