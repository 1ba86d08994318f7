#!/usr/bin/env python3
"""Seed the database with a demo portfolio, market quotes and news."""

import argparse
import asyncio
import sys
from datetime import date, datetime, timezone

sys.path.insert(0, str(__file__).rsplit("/", 2)[0])

from sqlalchemy import delete, select

from app.core.database import AsyncSessionLocal, engine
from app.core.logging import get_logger, setup_logging
from app.models import Base
from app.models.asset import Asset, AssetType
from app.models.market_data import MarketData
from app.models.news_item import NewsItem
from app.services.fixtures import MOCK_MARKET_DATA, MOCK_NEWS
from app.services.portfolio_service import portfolio_service

logger = get_logger(__name__)

DEMO_ASSETS = [
    ("LVMH", "MC.PA", AssetType.STOCK, 12, 680.0, 742.5, "Luxe"),
    ("TotalEnergies", "TTE.PA", AssetType.STOCK, 80, 55.2, 61.8, "Energie"),
    ("Apple", "AAPL", AssetType.STOCK, 25, 150.0, 228.4, "Tech"),
    ("iShares MSCI World", "IWDA.AS", AssetType.ETF, 300, 72.0, 98.6, "Monde"),
    ("Amundi S&P 500", "500.PA", AssetType.ETF, 150, 78.5, 96.2, "US"),
    ("Bitcoin", "BTC-USD", AssetType.CRYPTO, 0.35, 42000.0, 95000.0, None),
    ("Ethereum", "ETH-USD", AssetType.CRYPTO, 4, 2900.0, 3400.0, None),
    ("SCPI Primovie", "SCPI-PRIM", AssetType.REAL_ESTATE, 100, 203.0, 190.0, "SCPI"),
    ("Livret A", "LIVRET-A", AssetType.SAVINGS, 1, 22950.0, 22950.0, "Epargne reglementee"),
]


async def seed(reset: bool) -> None:
    try:
        await _seed(reset)
    finally:
        await engine.dispose()


async def _seed(reset: bool) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        if reset:
            for model in (Asset, MarketData, NewsItem):
                await session.execute(delete(model))
            logger.info("Existing demo data removed")

        existing = await session.execute(select(Asset.id).limit(1))
        if existing.first() is not None:
            logger.info("Assets already present, nothing to seed (use --reset to replace them)")
            return

        portfolio = await portfolio_service.get_or_create_default_portfolio(session)
        for name, ticker, asset_type, quantity, buy_price, current_price, category in DEMO_ASSETS:
            session.add(
                Asset(
                    portfolio_id=portfolio.id,
                    name=name,
                    ticker=ticker,
                    type=asset_type,
                    quantity=quantity,
                    buy_price=buy_price,
                    current_price=current_price,
                    currency="EUR",
                    category=category,
                    buy_date=date(2024, 1, 15),
                )
            )

        now = datetime.now(timezone.utc)
        for row in MOCK_MARKET_DATA:
            session.add(MarketData(timestamp=now, **row))

        for item in MOCK_NEWS:
            session.add(NewsItem(**{key: value for key, value in item.items() if key != "id"}))

        await session.commit()
        logger.info(
            "Seeded %d assets, %d market quotes and %d news items",
            len(DEMO_ASSETS),
            len(MOCK_MARKET_DATA),
            len(MOCK_NEWS),
        )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="Delete existing demo rows first")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(seed(args.reset))


if __name__ == "__main__":
    main()
