"""Tests for the baseline market trend seeding script."""

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from creatorrec.models.base import Base
from creatorrec.models.market_trend import MarketTrend
from scripts import seed_market_trends


@pytest.fixture
def trend_session_factory(monkeypatch):
    engine = create_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    monkeypatch.setattr(seed_market_trends, "SyncSessionLocal", factory)
    yield factory
    engine.dispose()


def _trends(factory, region=None):
    query = select(MarketTrend)
    if region:
        query = query.where(MarketTrend.region == region)
    with factory() as session:
        return session.execute(query).scalars().all()


def test_seed_inserts_baseline_once(trend_session_factory):
    created = seed_market_trends.seed("2026-12", "kenya")
    again = seed_market_trends.seed("2026-12", "kenya")

    assert created == len(seed_market_trends.BASELINE_TRENDS)
    assert again == 0
    trends = _trends(trend_session_factory)
    assert len(trends) == created
    electronics = next(t for t in trends if t.category == "Electronics")
    assert electronics.period == "2026-12"
    assert electronics.peak_months == [11, 12]


def test_seed_leaves_existing_rows_untouched(trend_session_factory):
    with trend_session_factory() as session:
        session.add(MarketTrend(category="Fashion", region="kenya", period="2026-12", trend_score=97))
        session.commit()

    created = seed_market_trends.seed("2026-12", "kenya")

    assert created == len(seed_market_trends.BASELINE_TRENDS) - 1
    fashion = [t for t in _trends(trend_session_factory) if t.category == "Fashion"]
    assert [t.trend_score for t in fashion] == [97]


def test_seed_is_scoped_by_region(trend_session_factory):
    seed_market_trends.seed("2026-12", "kenya")
    created = seed_market_trends.seed("2026-12", "uganda")

    assert created == len(seed_market_trends.BASELINE_TRENDS)
    assert len(_trends(trend_session_factory, region="uganda")) == created
