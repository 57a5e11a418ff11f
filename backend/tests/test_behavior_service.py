"""Tests for behavior tracking."""

from datetime import date

from sqlalchemy import select

from creatorrec.models.creator_behavior import CreatorBehavior
from creatorrec.schemas.behavior import BehaviorMetadata
from creatorrec.services.behavior_service import track_behavior
from creatorrec.services.recommendation_service import get_active_snapshot, get_recommendations

from factories import make_creator, make_dropshipping_product, make_partner, make_preferences


async def test_event_is_stored_with_metadata(db):
    creator = await make_creator(db)
    partner = await make_partner(db)
    product = await make_dropshipping_product(db, partner, category="Beauty")

    stored = await track_behavior(
        db, creator.id, "view_product",
        entity_type="dropshipping_product",
        entity_id=product.id,
        metadata=BehaviorMetadata(category="Beauty", recommendation_type="trending", score=82.5),
        session_id="sess-42",
        ip_address="41.90.1.10",
        user_agent="Mozilla/5.0",
    )

    assert stored is True
    event = (await db.execute(
        select(CreatorBehavior).where(CreatorBehavior.creator_id == creator.id)
    )).scalar_one()
    assert event.action == "view_product"
    assert event.entity_id == product.id
    assert event.event_metadata == {"category": "Beauty", "recommendation_type": "trending", "score": 82.5}
    assert event.session_id == "sess-42"
    assert event.ip_address == "41.90.1.10"


async def test_search_event_keeps_extra_metadata(db):
    creator = await make_creator(db)

    await track_behavior(db, creator.id, "search", metadata={"search_term": "kikoy", "page": 2})

    event = (await db.execute(select(CreatorBehavior))).scalar_one()
    assert event.entity_id is None
    assert event.event_metadata == {"search_term": "kikoy", "page": 2}


async def test_storage_failure_returns_false(db, monkeypatch):
    creator = await make_creator(db)

    async def broken_flush(*args, **kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(db, "flush", broken_flush)
    stored = await track_behavior(db, creator.id, "view_product", metadata={"category": "Toys"})
    monkeypatch.undo()

    assert stored is False
    assert (await db.execute(select(CreatorBehavior))).scalars().all() == []


async def test_view_stamps_active_recommendation_once(db):
    creator = await make_creator(db)
    await make_preferences(db, creator, ["Beauty"])
    partner = await make_partner(db)
    product = await make_dropshipping_product(db, partner, category="Beauty")
    await get_recommendations(db, creator.id, today=date(2026, 6, 1))

    await track_behavior(db, creator.id, "view_product", entity_type="dropshipping_product", entity_id=product.id)
    first = (await get_active_snapshot(db, creator.id))[0]
    await db.refresh(first)
    first_viewed = first.viewed_at

    await track_behavior(db, creator.id, "view_product", entity_type="dropshipping_product", entity_id=product.id)
    await db.refresh(first)

    assert first_viewed is not None
    assert first.viewed_at == first_viewed
    assert first.clicked_at is None
    assert first.added_to_store_at is None


async def test_add_to_store_stamps_added_at(db):
    creator = await make_creator(db)
    await make_preferences(db, creator, ["Beauty"])
    partner = await make_partner(db)
    product = await make_dropshipping_product(db, partner, category="Beauty")
    await get_recommendations(db, creator.id, today=date(2026, 6, 1))

    await track_behavior(db, creator.id, "add_to_store", entity_type="dropshipping_product", entity_id=product.id)

    row = (await get_active_snapshot(db, creator.id))[0]
    await db.refresh(row)
    assert row.added_to_store_at is not None
    assert row.viewed_at is None
