"""Row builders for tests."""

import uuid
from datetime import datetime, timedelta, timezone

from creatorrec.models.creator import Creator
from creatorrec.models.creator_behavior import CreatorBehavior
from creatorrec.models.creator_preferences import CreatorPreferences
from creatorrec.models.dropshipping import DropshippingPartner, DropshippingProduct
from creatorrec.models.market_trend import MarketTrend
from creatorrec.models.product import Product
from creatorrec.models.similar_creator import SimilarCreator


async def make_creator(db, handle=None):
    handle = handle or f"store-{uuid.uuid4().hex[:8]}"
    creator = Creator(store_handle=handle, store_name=handle.title())
    db.add(creator)
    await db.flush()
    return creator


async def make_product(db, creator, category="Fashion", price=1500.0, **kwargs):
    product = Product(creator_id=creator.id, name=f"{category} item", category=category, price=price, **kwargs)
    db.add(product)
    await db.flush()
    return product


async def make_partner(db, status="approved", company_name="Nairobi Wholesale"):
    partner = DropshippingPartner(company_name=company_name, contact_email="ops@example.com", status=status)
    db.add(partner)
    await db.flush()
    return partner


async def make_dropshipping_product(db, partner, category="Fashion", price=3000.0, is_active=True, **kwargs):
    product = DropshippingProduct(
        partner_id=partner.id,
        name=kwargs.pop("name", f"{category} supplier item"),
        category=category,
        sku=uuid.uuid4().hex[:12],
        wholesale_price=kwargs.pop("wholesale_price", price * 0.6 if price else 100.0),
        suggested_retail_price=price,
        commission_rate=10.0,
        images=["https://cdn.example.com/item.jpg"],
        is_active=is_active,
        **kwargs,
    )
    db.add(product)
    await db.flush()
    return product


async def make_trend(db, category, trend_score, period="2026-12", peak_months=None, region="kenya"):
    trend = MarketTrend(
        category=category,
        region=region,
        period=period,
        trend_score=trend_score,
        search_volume=1000,
        seasonality={"peak_months": peak_months or [], "low_months": []},
        keywords=[category.lower()],
    )
    db.add(trend)
    await db.flush()
    return trend


async def make_preferences(
    db,
    creator,
    preferred_categories=(),
    budget_range=None,
    target_audience="general",
    location="kenya",
    brand_style="affordable",
):
    prefs = CreatorPreferences(
        creator_id=creator.id,
        preferred_categories=list(preferred_categories),
        budget_range=budget_range or {"min": 500, "max": 10000, "average": 2500},
        target_audience=target_audience,
        location=location,
        interests=list(preferred_categories),
        brand_style=brand_style,
    )
    db.add(prefs)
    await db.flush()
    return prefs


async def make_behavior(db, creator, action, entity_id=None, entity_type="dropshipping_product", metadata=None, minutes_ago=0):
    event = CreatorBehavior(
        creator_id=creator.id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        event_metadata=metadata or {},
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )
    db.add(event)
    await db.flush()
    return event


async def make_edge(db, creator, similar, score=75.0):
    edge = SimilarCreator(
        creator_id=creator.id,
        similar_creator_id=similar.id,
        similarity_score=score,
        similarity_factors=["same location"],
        calculated_at=datetime.now(timezone.utc),
    )
    db.add(edge)
    await db.flush()
    return edge
