"""Market overview: latest snapshot per ticker, with demo data fallback."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import numpy as np
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.market_data import MarketData
from app.services import chart_data
from app.services.fallback import with_fallback
from app.services.fixtures import MARKET_LABELS, MOCK_MARKET_DATA, UNKNOWN_MARKET_LABEL

logger = logging.getLogger(__name__)


def mock_market_rows() -> List[Dict[str, Any]]:
    now = datetime.now(timezone.utc)
    return [{"id": f"mock-{i}", **row, "timestamp": now} for i, row in enumerate(MOCK_MARKET_DATA)]


def label_for(ticker: str) -> Dict[str, str]:
    return MARKET_LABELS.get(ticker, {"name": ticker, **UNKNOWN_MARKET_LABEL})


class MarketService:
    """Service for market snapshots."""

    async def get_overview(
        self, db: AsyncSession, rng: Optional[np.random.Generator] = None
    ) -> List[Dict[str, Any]]:
        rows = await with_fallback(
            lambda: self._latest_snapshots(db), mock_market_rows, "market data", session=db
        )
        return [self._enrich(row, rng) for row in rows]

    async def _latest_snapshots(self, db: AsyncSession) -> List[Dict[str, Any]]:
        result = await db.execute(select(MarketData).order_by(MarketData.timestamp.desc()))

        seen = set()
        rows = []
        for snapshot in result.scalars().all():
            if snapshot.ticker in seen:
                continue
            seen.add(snapshot.ticker)
            rows.append({
                "id": snapshot.id,
                "ticker": snapshot.ticker,
                "price": snapshot.price,
                "change": snapshot.change,
                "change_percent": snapshot.change_percent,
                "volume": snapshot.volume,
                "timestamp": snapshot.timestamp,
            })
        return rows

    @staticmethod
    def _enrich(row: Dict[str, Any], rng: Optional[np.random.Generator]) -> Dict[str, Any]:
        return {
            **row,
            **label_for(row["ticker"]),
            "intraday_data": chart_data.intraday(row["price"], row["change_percent"], rng=rng),
        }


market_service = MarketService()
