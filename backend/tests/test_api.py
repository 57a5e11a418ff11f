"""HTTP-level tests for the v1 API."""

import uuid
from unittest.mock import patch

import pytest_asyncio
from sqlalchemy import select

from creatorrec.models.creator_behavior import CreatorBehavior
from creatorrec.tasks.recommendation_tasks import recalculate_similar_creators

from factories import (
    make_creator,
    make_dropshipping_product,
    make_partner,
    make_preferences,
    make_product,
    make_trend,
)


@pytest_asyncio.fixture
async def seeded(session_factory):
    """A creator with a Fashion profile, two Fashion supplier items and a few trends."""
    async with session_factory() as session:
        creator = await make_creator(session, handle="duka-la-mitindo")
        peer = await make_creator(session, handle="mitindo-hub")
        await make_preferences(session, creator, ["Fashion", "Beauty"])
        await make_preferences(session, peer, ["Fashion", "Beauty"])
        partner = await make_partner(session)
        items = [
            await make_dropshipping_product(session, partner, category="Fashion", price=2000),
            await make_dropshipping_product(session, partner, category="Fashion", price=4000),
        ]
        await make_trend(session, "Fashion", 81, period="2026-06", region="kenya")
        await make_trend(session, "Electronics", 74, period="2026-06", region="uganda")
        await session.commit()
        return {"creator": creator, "peer": peer, "items": items}


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


class TestRecommendationsEndpoint:
    async def test_returns_ranked_list(self, client, seeded):
        creator_id = seeded["creator"].id
        resp = await client.get(f"/api/v1/creators/{creator_id}/recommendations", params={"type": "personalized"})

        assert resp.status_code == 200
        body = resp.json()
        assert {item["id"] for item in body} == {str(p.id) for p in seeded["items"]}
        assert all(item["type"] == "dropshipping_product" for item in body)
        assert all(item["metadata"]["recommendation_type"] == "personalized" for item in body)
        assert body[0]["partner"]["company_name"] == "Nairobi Wholesale"
        scores = [item["score"] for item in body]
        assert scores == sorted(scores, reverse=True)

    async def test_snapshot_reflects_last_computation(self, client, seeded):
        creator_id = seeded["creator"].id
        computed = (await client.get(
            f"/api/v1/creators/{creator_id}/recommendations", params={"type": "personalized", "limit": 1},
        )).json()

        resp = await client.get(f"/api/v1/creators/{creator_id}/recommendations/snapshot")

        assert resp.status_code == 200
        snapshot = resp.json()
        assert len(snapshot) == 1
        assert snapshot[0]["dropshipping_product_id"] == computed[0]["id"]
        assert snapshot[0]["metadata"]["recommendation_type"] == "personalized"

    async def test_unknown_type_is_rejected(self, client, seeded):
        resp = await client.get(
            f"/api/v1/creators/{seeded['creator'].id}/recommendations", params={"type": "viral"},
        )
        assert resp.status_code == 422

    async def test_limit_out_of_range_is_rejected(self, client, seeded):
        resp = await client.get(
            f"/api/v1/creators/{seeded['creator'].id}/recommendations", params={"limit": 0},
        )
        assert resp.status_code == 422

    async def test_unknown_creator_gets_empty_list(self, client):
        resp = await client.get(f"/api/v1/creators/{uuid.uuid4()}/recommendations")
        assert resp.status_code == 200
        assert resp.json() == []


class TestTrackEndpoint:
    async def test_records_event(self, client, seeded, session_factory):
        creator_id = seeded["creator"].id
        product_id = seeded["items"][0].id

        resp = await client.post(
            f"/api/v1/creators/{creator_id}/recommendations/track",
            json={
                "action": "click_recommendation",
                "entity_type": "dropshipping_product",
                "entity_id": str(product_id),
                "metadata": {"category": "Fashion", "recommendation_type": "trending", "score": 81},
            },
            headers={"user-agent": "creator-dashboard/1.0"},
        )

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        async with session_factory() as session:
            event = (await session.execute(
                select(CreatorBehavior).where(CreatorBehavior.creator_id == creator_id)
            )).scalar_one()
        assert event.action == "click_recommendation"
        assert event.entity_id == product_id
        assert event.user_agent == "creator-dashboard/1.0"

    async def test_unknown_action_is_rejected(self, client, seeded):
        resp = await client.post(
            f"/api/v1/creators/{seeded['creator'].id}/recommendations/track",
            json={"action": "like"},
        )
        assert resp.status_code == 422


class TestPreferencesEndpoint:
    async def test_unknown_creator_is_404(self, client):
        resp = await client.get(f"/api/v1/creators/{uuid.uuid4()}/preferences")
        assert resp.status_code == 404

    async def test_first_read_infers_from_catalog(self, client, session_factory):
        async with session_factory() as session:
            creator = await make_creator(session)
            await make_product(session, creator, category="Kitchen", price=800)
            await make_product(session, creator, category="Kitchen", price=1200)
            await session.commit()

        resp = await client.get(f"/api/v1/creators/{creator.id}/preferences")

        assert resp.status_code == 200
        body = resp.json()
        assert body["preferred_categories"] == ["Kitchen"]
        assert body["budget_range"] == {"min": 800.0, "max": 1200.0, "average": 1000.0}
        assert body["location"] == "kenya"

    async def test_put_updates_only_sent_fields(self, client, seeded):
        creator_id = seeded["creator"].id

        resp = await client.put(
            f"/api/v1/creators/{creator_id}/preferences",
            json={"brand_style": "luxury", "budget_range": {"min": 5000, "max": 20000, "average": 9000}},
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["brand_style"] == "luxury"
        assert body["budget_range"]["max"] == 20000
        assert body["preferred_categories"] == ["Fashion", "Beauty"]
        assert body["target_audience"] == "general"

    async def test_put_null_category_list_is_rejected(self, client, seeded):
        creator_id = seeded["creator"].id

        for field in ("preferred_categories", "interests"):
            resp = await client.put(f"/api/v1/creators/{creator_id}/preferences", json={field: None})
            assert resp.status_code == 422

        body = (await client.get(f"/api/v1/creators/{creator_id}/preferences")).json()
        assert body["preferred_categories"] == ["Fashion", "Beauty"]

    async def test_put_empty_category_list_clears_it(self, client, seeded):
        resp = await client.put(
            f"/api/v1/creators/{seeded['creator'].id}/preferences", json={"preferred_categories": []},
        )

        assert resp.status_code == 200
        assert resp.json()["preferred_categories"] == []


class TestMarketTrendsEndpoint:
    async def test_filters_by_region(self, client, seeded):
        resp = await client.get("/api/v1/market-trends", params={"region": "uganda"})

        assert resp.status_code == 200
        assert [t["category"] for t in resp.json()] == ["Electronics"]

    async def test_lists_strongest_first(self, client, seeded):
        resp = await client.get("/api/v1/market-trends", params={"period": "2026-06"})

        assert [t["trend_score"] for t in resp.json()] == [81, 74]

    async def test_bad_period_is_rejected(self, client):
        resp = await client.get("/api/v1/market-trends", params={"period": "June"})
        assert resp.status_code == 422


class TestSimilarCreatorsEndpoint:
    async def test_calculate_inline_then_list(self, client, seeded):
        creator_id = seeded["creator"].id

        resp = await client.post(f"/api/v1/creators/{creator_id}/similar-creators/calculate")

        assert resp.status_code == 200
        edges = resp.json()
        assert [e["similar_creator_id"] for e in edges] == [str(seeded["peer"].id)]
        assert edges[0]["similarity_score"] == 65

        listed = (await client.get(f"/api/v1/creators/{creator_id}/similar-creators")).json()
        assert [e["similar_creator_id"] for e in listed] == [str(seeded["peer"].id)]
        assert listed[0]["similarity_factors"] == edges[0]["similarity_factors"]

    async def test_background_calculation_is_queued(self, client, seeded):
        creator_id = seeded["creator"].id

        with patch.object(recalculate_similar_creators, "delay") as delay:
            resp = await client.post(
                f"/api/v1/creators/{creator_id}/similar-creators/calculate", params={"background": "true"},
            )

        assert resp.status_code == 202
        assert resp.json() == {"queued": True}
        delay.assert_called_once_with(str(creator_id))

    async def test_queue_failure_is_503(self, client, seeded):
        with patch.object(recalculate_similar_creators, "delay", side_effect=ConnectionError("redis down")):
            resp = await client.post(
                f"/api/v1/creators/{seeded['creator'].id}/similar-creators/calculate", params={"background": "true"},
            )

        assert resp.status_code == 503
