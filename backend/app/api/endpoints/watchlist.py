"""Watchlist endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.rate_limit import RATE_LIMITS, limiter
from app.schemas.watchlist import WatchlistItemCreate, WatchlistItemResponse, WatchlistToggleResponse
from app.services.watchlist_service import watchlist_service

router = APIRouter()


@router.get("", response_model=List[WatchlistItemResponse])
async def list_watchlist(db: AsyncSession = Depends(get_db)):
    return await watchlist_service.list_items(db)


@router.post("", response_model=WatchlistToggleResponse, response_model_exclude_none=True)
@limiter.limit(RATE_LIMITS["watchlist_toggle"])
async def toggle_watchlist(
    request: Request,
    data: WatchlistItemCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add the ticker, or remove it if it is already watched."""
    action, result = await watchlist_service.toggle(db, data.ticker, data.name, data.type)
    if action == "removed":
        return {"action": action, "ticker": result}
    return {"action": action, "item": WatchlistItemResponse.model_validate(result)}
