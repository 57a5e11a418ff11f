"""Seed baseline market trends for the current period.

Market trends are maintained by the analytics team; this loads a starting set
so trending and seasonal recommendations have data in fresh environments.
Rows that already exist for (category, region, period) are left untouched.

Usage:
    docker compose exec backend python -m scripts.seed_market_trends
    docker compose exec backend python -m scripts.seed_market_trends --period 2026-12 --region kenya
"""

import argparse
import logging
from datetime import datetime, timezone

from sqlalchemy import select

from creatorrec.models.base import SyncSessionLocal
from creatorrec.models.market_trend import MarketTrend

logger = logging.getLogger(__name__)

# category, trend_score, search_volume, peak_months, low_months, keywords
BASELINE_TRENDS = [
    ("Electronics", 88, 42000, [11, 12], [2, 3], ["smartphones", "earbuds", "power banks"]),
    ("Fashion", 82, 38000, [12, 1, 4], [6, 7], ["ankara", "sneakers", "handbags"]),
    ("Beauty", 79, 27000, [2, 12], [7], ["skincare", "shea butter", "wigs"]),
    ("Home & Kitchen", 74, 19000, [11, 12], [5], ["blenders", "cookware", "decor"]),
    ("Back to School", 71, 15000, [1, 5, 9], [3, 11], ["backpacks", "stationery", "uniforms"]),
    ("Sports & Fitness", 66, 12000, [1, 6], [10], ["yoga mats", "jerseys", "dumbbells"]),
    ("Baby & Kids", 63, 9000, [6, 12], [2], ["diapers", "toys", "strollers"]),
    ("Books", 52, 6000, [1, 9], [7], ["novels", "textbooks", "journals"]),
]


def seed(period: str, region: str) -> int:
    created = 0
    with SyncSessionLocal() as session:
        try:
            for category, score, volume, peak, low, keywords in BASELINE_TRENDS:
                existing = session.execute(
                    select(MarketTrend.id).where(
                        MarketTrend.category == category,
                        MarketTrend.region == region,
                        MarketTrend.period == period,
                    )
                ).scalar_one_or_none()
                if existing:
                    continue

                session.add(MarketTrend(
                    category=category,
                    region=region,
                    period=period,
                    trend_score=score,
                    search_volume=volume,
                    seasonality={"peak_months": peak, "low_months": low},
                    keywords=keywords,
                ))
                created += 1

            session.commit()
        except Exception:
            session.rollback()
            logger.exception("Failed to seed market trends for %s/%s", region, period)
            raise
    return created


def main():
    parser = argparse.ArgumentParser(description="Seed baseline market trends")
    parser.add_argument("--period", default=datetime.now(timezone.utc).strftime("%Y-%m"), help="YYYY-MM")
    parser.add_argument("--region", default="kenya")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    created = seed(args.period, args.region)
    logger.info("Seeded %d market trends for %s/%s", created, args.region, args.period)


if __name__ == "__main__":
    main()
