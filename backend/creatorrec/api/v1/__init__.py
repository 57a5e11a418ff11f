"""API v1 router aggregation."""

from fastapi import APIRouter

from creatorrec.api.v1.recommendations import router as recommendations_router
from creatorrec.api.v1.preferences import router as preferences_router
from creatorrec.api.v1.similar_creators import router as similar_creators_router
from creatorrec.api.v1.market_trends import router as market_trends_router

router = APIRouter(prefix="/api/v1")

router.include_router(recommendations_router)
router.include_router(preferences_router)
router.include_router(similar_creators_router)
router.include_router(market_trends_router)
