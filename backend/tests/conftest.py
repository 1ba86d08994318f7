"""Pytest configuration and fixtures."""

import os
from datetime import date, datetime
from typing import AsyncGenerator, Iterable

# Set test env vars before any app import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base
from app.models.asset import Asset, AssetType
from app.models.portfolio import Portfolio
from app.services.settings_store import SettingsStore, get_settings_store

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def settings_store(tmp_path) -> SettingsStore:
    return SettingsStore.load(tmp_path / "preferences.json")


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, settings_store: SettingsStore
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database and preferences overrides."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings_store] = lambda: settings_store

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _insert_assets(session: AsyncSession, rows: Iterable[dict]) -> Portfolio:
    """Insert ``rows`` into a fresh portfolio and clear the identity map."""
    portfolio = Portfolio(name="Mon patrimoine")
    session.add(portfolio)
    for row in rows:
        session.add(
            Asset(
                portfolio=portfolio,
                currency="EUR",
                buy_date=date(2024, 1, 15),
                **row,
            )
        )
    await session.commit()
    session.expunge_all()
    return portfolio


@pytest_asyncio.fixture
async def add_assets(db_session: AsyncSession):
    """Callable inserting asset rows into the test database."""

    async def _add(rows: Iterable[dict]) -> Portfolio:
        return await _insert_assets(db_session, rows)

    return _add


@pytest_asyncio.fixture
async def sample_portfolio(db_session: AsyncSession) -> Portfolio:
    """Five holdings, one per asset type (total value 100 000)."""
    return await _insert_assets(
        db_session,
        [
            {
                "name": "LVMH",
                "ticker": "MC.PA",
                "type": AssetType.STOCK,
                "quantity": 40,
                "buy_price": 600,
                "current_price": 750,
                "updated_at": datetime(2026, 1, 5),
            },
            {
                "name": "iShares MSCI World",
                "ticker": "IWDA.AS",
                "type": AssetType.ETF,
                "quantity": 250,
                "buy_price": 80,
                "current_price": 100,
                "updated_at": datetime(2026, 1, 4),
            },
            {
                "name": "Bitcoin",
                "ticker": "BTC-USD",
                "type": AssetType.CRYPTO,
                "quantity": 0.2,
                "buy_price": 60000,
                "current_price": 50000,
                "updated_at": datetime(2026, 1, 3),
            },
            {
                "name": "SCPI Primovie",
                "ticker": "SCPI-PRIM",
                "type": AssetType.REAL_ESTATE,
                "quantity": 125,
                "buy_price": 200,
                "current_price": 200,
                "updated_at": datetime(2026, 1, 2),
            },
            {
                "name": "Livret A",
                "ticker": "LIVRET-A",
                "type": AssetType.SAVINGS,
                "quantity": 1,
                "buy_price": 10000,
                "current_price": 10000,
                "updated_at": datetime(2026, 1, 1),
            },
        ],
    )
