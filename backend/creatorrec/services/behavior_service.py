"""Behavior service — best-effort logging of creator catalog actions."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.creator_behavior import (
    CreatorBehavior,
    VIEW_PRODUCT,
    ADD_TO_STORE,
    CLICK_RECOMMENDATION,
)
from creatorrec.models.product_recommendation import ProductRecommendation, DROPSHIPPING_PRODUCT
from creatorrec.schemas.behavior import BehaviorMetadata

logger = logging.getLogger(__name__)

# Which snapshot column an action stamps on the matching active recommendation
FEEDBACK_COLUMNS = {
    VIEW_PRODUCT: "viewed_at",
    CLICK_RECOMMENDATION: "clicked_at",
    ADD_TO_STORE: "added_to_store_at",
}


def _normalize_metadata(metadata: BehaviorMetadata | dict[str, Any] | None) -> dict[str, Any]:
    if metadata is None:
        return {}
    if isinstance(metadata, BehaviorMetadata):
        return metadata.model_dump(exclude_none=True)
    return dict(metadata)


async def track_behavior(
    db: AsyncSession,
    creator_id: UUID,
    action: str,
    entity_type: str | None = None,
    entity_id: UUID | None = None,
    metadata: BehaviorMetadata | dict[str, Any] | None = None,
    session_id: str | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> bool:
    """Append a behavior event. Never raises; returns whether the event was stored.

    Runs in a SAVEPOINT so a failed insert leaves the caller's transaction usable.
    """
    now = datetime.now(timezone.utc)
    try:
        async with db.begin_nested():
            db.add(CreatorBehavior(
                creator_id=creator_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                event_metadata=_normalize_metadata(metadata),
                session_id=session_id,
                ip_address=ip_address,
                user_agent=user_agent,
                created_at=now,
            ))
            await db.flush()

            column = FEEDBACK_COLUMNS.get(action)
            if column and entity_type == DROPSHIPPING_PRODUCT and entity_id is not None:
                await _stamp_recommendation(db, creator_id, entity_id, column, now)
        return True
    except Exception:
        logger.exception("Failed to track behavior %s for creator %s", action, creator_id)
        return False


async def _stamp_recommendation(
    db: AsyncSession,
    creator_id: UUID,
    dropshipping_product_id: UUID,
    column: str,
    when: datetime,
) -> None:
    """Record first view/click/add on the creator's active recommendation for a product."""
    stamp_column = getattr(ProductRecommendation, column)
    await db.execute(
        update(ProductRecommendation)
        .where(
            ProductRecommendation.creator_id == creator_id,
            ProductRecommendation.is_active == True,  # noqa: E712
            ProductRecommendation.dropshipping_product_id == dropshipping_product_id,
            stamp_column.is_(None),
        )
        .values({column: when})
        .execution_options(synchronize_session=False)
    )
