"""Initial schema — catalog read models and recommendation engine tables.

Creates:
- creators, products: storefront tenants and their own catalog
- dropshipping_partners, dropshipping_products: supplier catalog
- creator_behavior: append-only creator action log
- creator_preferences: one inferred/explicit profile per creator
- market_trends: per-category, per-period demand signals
- similar_creators: directed creator similarity edges
- product_recommendations: latest ranked snapshot per creator

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Creators
    op.create_table(
        "creators",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("store_handle", sa.String(100), unique=True, nullable=False, index=True),
        sa.Column("store_name", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # Creator products
    op.create_table(
        "products",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(3), server_default="KES"),
        sa.Column("product_type", sa.String(20), server_default="physical"),
        sa.Column("category", sa.String(100), index=True),
        sa.Column("images", postgresql.JSONB, server_default=sa.text("'[]'::jsonb")),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_products_creator_category", "products", ["creator_id", "category"])

    # Dropshipping partners
    op.create_table(
        "dropshipping_partners",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("logo", sa.String(500)),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # Dropshipping products
    op.create_table(
        "dropshipping_products",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("partner_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("dropshipping_partners.id"), nullable=False, index=True),
        sa.Column("external_id", sa.String(255)),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("category", sa.String(100), index=True),
        sa.Column("sku", sa.String(100), nullable=False),
        sa.Column("images", postgresql.JSONB, server_default=sa.text("'[]'::jsonb")),
        sa.Column("wholesale_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("suggested_retail_price", sa.Numeric(10, 2)),
        sa.Column("currency", sa.String(3), server_default="KES"),
        sa.Column("commission_rate", sa.Numeric(5, 2), server_default=sa.text("10.00")),
        sa.Column("stock", sa.Integer, server_default=sa.text("0")),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true"), index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_dropshipping_category_active", "dropshipping_products", ["category", "is_active"])

    # Creator behavior
    op.create_table(
        "creator_behavior",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), nullable=False),
        sa.Column("action", sa.String(30), nullable=False),
        sa.Column("entity_type", sa.String(30)),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True)),
        sa.Column("metadata", postgresql.JSONB, server_default=sa.text("'{}'::jsonb")),
        sa.Column("session_id", sa.String(255)),
        sa.Column("ip_address", sa.String(45)),
        sa.Column("user_agent", sa.String(500)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_behavior_creator_created", "creator_behavior", ["creator_id", "created_at"])
    op.create_index("idx_behavior_action_entity", "creator_behavior", ["action", "entity_type", "entity_id"])

    # Creator preferences
    op.create_table(
        "creator_preferences",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), unique=True, nullable=False),
        sa.Column("preferred_categories", postgresql.JSONB, server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("budget_range", postgresql.JSONB, server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("target_audience", sa.String(50)),
        sa.Column("location", sa.String(100)),
        sa.Column("interests", postgresql.JSONB, server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("brand_style", sa.String(50)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # Market trends
    op.create_table(
        "market_trends",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("category", sa.String(100), nullable=False, index=True),
        sa.Column("region", sa.String(50), nullable=False, server_default="africa"),
        sa.Column("period", sa.String(7), nullable=False),
        sa.Column("trend_score", sa.Numeric(5, 2), nullable=False),
        sa.Column("search_volume", sa.Integer, server_default=sa.text("0")),
        sa.Column("sales_velocity", sa.Numeric(8, 2), server_default=sa.text("0.00")),
        sa.Column("competition_level", sa.String(10), server_default="medium"),
        sa.Column("price_range", postgresql.JSONB),
        sa.Column("seasonality", postgresql.JSONB),
        sa.Column("keywords", postgresql.JSONB, server_default=sa.text("'[]'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_trends_period_score", "market_trends", ["period", "trend_score"])
    op.create_index("idx_trends_region", "market_trends", ["region"])

    # Similar creators
    op.create_table(
        "similar_creators",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), nullable=False),
        sa.Column("similar_creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), nullable=False),
        sa.Column("similarity_score", sa.Numeric(5, 2), nullable=False),
        sa.Column("similarity_factors", postgresql.JSONB, server_default=sa.text("'[]'::jsonb")),
        sa.Column("calculated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_similar_creators_creator_score", "similar_creators", ["creator_id", "similarity_score"])

    # Product recommendations
    op.create_table(
        "product_recommendations",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("creators.id", ondelete="CASCADE"), nullable=False),
        sa.Column("recommendation_type", sa.String(30), nullable=False),
        sa.Column("product_type", sa.String(30), nullable=False),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("products.id", ondelete="CASCADE")),
        sa.Column("dropshipping_product_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("dropshipping_products.id", ondelete="CASCADE")),
        sa.Column("score", sa.Numeric(5, 2), nullable=False),
        sa.Column("reason", sa.Text),
        sa.Column("metadata", postgresql.JSONB, server_default=sa.text("'{}'::jsonb")),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("viewed_at", sa.DateTime(timezone=True)),
        sa.Column("clicked_at", sa.DateTime(timezone=True)),
        sa.Column("added_to_store_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "(product_id IS NULL) <> (dropshipping_product_id IS NULL)",
            name="ck_recommendations_one_product",
        ),
    )
    op.create_index("idx_recommendations_creator_active", "product_recommendations", ["creator_id", "is_active"])
    op.create_index("idx_recommendations_dropshipping", "product_recommendations", ["dropshipping_product_id"])


def downgrade() -> None:
    op.drop_table("product_recommendations")
    op.drop_table("similar_creators")
    op.drop_table("market_trends")
    op.drop_table("creator_preferences")
    op.drop_table("creator_behavior")
    op.drop_table("dropshipping_products")
    op.drop_table("dropshipping_partners")
    op.drop_table("products")
    op.drop_table("creators")
