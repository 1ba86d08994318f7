"""Watchlist: list with demo fallback, toggle add/remove by ticker."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.watchlist_item import WatchlistItem
from app.services.fallback import with_fallback
from app.services.fixtures import MOCK_WATCHLIST

logger = logging.getLogger(__name__)


def mock_watchlist() -> List[Dict[str, Any]]:
    now = datetime.now(timezone.utc)
    return [{**item, "added_at": now} for item in MOCK_WATCHLIST]


class WatchlistService:
    """Service for watchlist entries."""

    async def list_items(self, db: AsyncSession) -> List[Any]:
        async def from_db():
            result = await db.execute(select(WatchlistItem).order_by(WatchlistItem.added_at.desc()))
            return result.scalars().all()

        return await with_fallback(from_db, mock_watchlist, "watchlist", session=db)

    async def toggle(
        self, db: AsyncSession, ticker: str, name: str, type_: str
    ) -> Tuple[str, Union[WatchlistItem, str]]:
        """Remove the ticker if present, otherwise add it.

        Returns ``("removed", ticker)`` or ``("added", item)``.
        """
        result = await db.execute(select(WatchlistItem).where(WatchlistItem.ticker == ticker))
        existing = result.scalar_one_or_none()

        if existing is not None:
            await db.delete(existing)
            await db.commit()
            logger.info("Removed %s from watchlist", ticker)
            return "removed", ticker

        item = WatchlistItem(ticker=ticker, name=name, type=type_)
        db.add(item)
        await db.commit()
        await db.refresh(item)
        logger.info("Added %s to watchlist", ticker)
        return "added", item


watchlist_service = WatchlistService()
