"""Creator preference endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from creatorrec.models.base import get_db
from creatorrec.schemas.preferences import CreatorPreferencesRead, CreatorPreferencesUpdate
from creatorrec.services.preference_service import (
    creator_exists,
    get_or_create_preferences,
    update_preferences,
)

router = APIRouter(prefix="/creators/{creator_id}/preferences", tags=["preferences"])


async def _require_creator(creator_id: UUID, db: AsyncSession):
    if not await creator_exists(db, creator_id):
        raise HTTPException(status_code=404, detail="Creator not found")


@router.get("", response_model=CreatorPreferencesRead)
async def get_preferences(
    creator_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get the creator's preferences, inferring them from their catalog on first access."""
    await _require_creator(creator_id, db)
    return await get_or_create_preferences(db, creator_id)


@router.put("", response_model=CreatorPreferencesRead)
async def put_preferences(
    creator_id: UUID,
    update: CreatorPreferencesUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partially update the creator's preferences."""
    await _require_creator(creator_id, db)
    return await update_preferences(db, creator_id, update)
