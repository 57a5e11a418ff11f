"""Market trend model — per-category, per-period demand signals (loaded externally)."""

from sqlalchemy import Column, String, Integer, Numeric, Index

from creatorrec.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class MarketTrend(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "market_trends"

    category = Column(String(100), nullable=False, index=True)
    region = Column(String(50), default="africa", nullable=False)  # kenya, uganda, nigeria, africa, global
    period = Column(String(7), nullable=False)  # "2024-06" for June 2024

    trend_score = Column(Numeric(5, 2, asdecimal=False), nullable=False)  # 0-100
    search_volume = Column(Integer, default=0)
    sales_velocity = Column(Numeric(8, 2, asdecimal=False), default=0.0)  # sales per day
    competition_level = Column(String(10), default="medium")  # low, medium, high
    price_range = Column(JSONType)  # {"min": ..., "max": ..., "average": ...}
    seasonality = Column(JSONType)  # {"peak_months": [11, 12], "low_months": [2, 3]}
    keywords = Column(JSONType, default=list)

    __table_args__ = (
        Index("idx_trends_period_score", "period", "trend_score"),
        Index("idx_trends_region", "region"),
    )

    @property
    def peak_months(self) -> list[int]:
        return [int(m) for m in (self.seasonality or {}).get("peak_months", [])]
