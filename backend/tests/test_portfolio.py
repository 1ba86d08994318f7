"""Portfolio summary and asset endpoint tests."""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from app.models.asset import AssetType
from app.services.settings_store import SettingsStore

NNBSP = "\u202f"
NBSP = "\u00a0"


@pytest.mark.asyncio
async def test_portfolio_summary_totals(client: AsyncClient, sample_portfolio):
    response = await client.get("/api/portfolio")
    assert response.status_code == 200
    data = response.json()

    assert data["totalValue"] == 100000
    assert data["totalCost"] == 91000
    assert data["totalGainLoss"] == 9000
    assert data["totalGainLossPercent"] == 9.89
    assert data["assetCount"] == 5


@pytest.mark.asyncio
async def test_portfolio_allocation_sorted_with_labels(client: AsyncClient, sample_portfolio):
    data = (await client.get("/api/portfolio")).json()

    allocation = data["allocation"]
    assert [a["type"] for a in allocation] == ["stock", "etf", "real_estate", "crypto", "savings"]
    assert allocation[0] == {
        "type": "stock",
        "label": "Actions",
        "value": 30000,
        "percent": 30.0,
        "color": "#818cf8",
    }
    assert sum(a["percent"] for a in allocation) == pytest.approx(100.0)


@pytest.mark.asyncio
async def test_portfolio_performers(client: AsyncClient, sample_portfolio):
    data = (await client.get("/api/portfolio")).json()

    assert [p["ticker"] for p in data["topPerformers"]] == ["MC.PA", "IWDA.AS", "SCPI-PRIM"]
    assert [p["ticker"] for p in data["worstPerformers"]] == ["BTC-USD", "LIVRET-A", "SCPI-PRIM"]
    btc = data["worstPerformers"][0]
    assert btc["gainLoss"] == pytest.approx(-2000)
    assert btc["gainLossPercent"] == pytest.approx(-16.6667, abs=1e-3)


@pytest.mark.asyncio
async def test_portfolio_history_ends_on_total(client: AsyncClient, sample_portfolio):
    data = (await client.get("/api/portfolio")).json()

    assert len(data["history"]) == 13
    assert data["history"][-1]["value"] == 100000


@pytest.mark.asyncio
async def test_portfolio_formatted_in_store_currency(
    client: AsyncClient, sample_portfolio, settings_store: SettingsStore
):
    data = (await client.get("/api/portfolio")).json()
    assert data["formatted"]["currency"] == "EUR"
    assert data["formatted"]["totalValue"] == f"100{NNBSP}000{NBSP}€"
    assert data["formatted"]["totalGainLossPercent"] == f"+9,89{NBSP}%"

    settings_store.set_currency("USD")
    data = (await client.get("/api/portfolio")).json()
    assert data["formatted"]["currency"] == "USD"
    assert data["formatted"]["totalValue"] == f"100{NNBSP}000{NBSP}$US"


@pytest.mark.asyncio
async def test_empty_portfolio(client: AsyncClient):
    data = (await client.get("/api/portfolio")).json()

    assert data["totalValue"] == 0
    assert data["totalGainLossPercent"] == 0
    assert data["allocation"] == []
    assert data["topPerformers"] == []
    assert data["worstPerformers"] == []
    assert len(data["history"]) == 13


@pytest.mark.asyncio
async def test_list_assets_enriched(client: AsyncClient, sample_portfolio):
    response = await client.get("/api/assets")
    assert response.status_code == 200
    assets = response.json()

    assert [a["ticker"] for a in assets] == [
        "MC.PA",
        "IWDA.AS",
        "BTC-USD",
        "SCPI-PRIM",
        "LIVRET-A",
    ]
    lvmh = assets[0]
    assert lvmh["type"] == "stock"
    assert lvmh["buyPrice"] == 600
    assert lvmh["totalValue"] == 30000
    assert lvmh["totalCost"] == 24000
    assert lvmh["gainLoss"] == 6000
    assert lvmh["gainLossPercent"] == pytest.approx(25.0)
    assert lvmh["portfolio"]["name"] == "Mon patrimoine"
    assert len(lvmh["sparklineData"]) == 20
    assert lvmh["sparklineData"][-1] == 750
    assert lvmh["historyData"][-1]["price"] == 750


@pytest.mark.asyncio
async def test_zero_cost_asset_has_zero_gain_percent(client: AsyncClient, add_assets):
    await add_assets(
        [
            {
                "name": "Airdrop",
                "ticker": "AIR",
                "type": AssetType.CRYPTO,
                "quantity": 100,
                "buy_price": 0,
                "current_price": 2,
            }
        ],
    )
    assets = (await client.get("/api/assets")).json()
    assert assets[0]["gainLossPercent"] == 0
    assert assets[0]["gainLoss"] == 200


@pytest.mark.asyncio
async def test_default_portfolio_created_once(db_session):
    from app.services.portfolio_service import portfolio_service

    first = await portfolio_service.get_or_create_default_portfolio(db_session)
    second = await portfolio_service.get_or_create_default_portfolio(db_session)

    assert first.id == second.id
    assert first.name == "Mon patrimoine"


@pytest.mark.asyncio
async def test_half_euro_totals_round_up(client: AsyncClient, add_assets):
    await add_assets(
        [
            {
                "name": "Livret A",
                "ticker": "LIVA",
                "type": AssetType.SAVINGS,
                "quantity": 1,
                "buy_price": 0.5,
                "current_price": 2.5,
            }
        ],
    )
    data = (await client.get("/api/portfolio")).json()
    assert data["totalValue"] == 3
    assert data["totalCost"] == 1
    assert data["totalGainLoss"] == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("column", ["quantity", "buy_price", "current_price"])
async def test_negative_amounts_rejected(db_session, add_assets, column):
    row = {
        "name": "LVMH",
        "ticker": "MC.PA",
        "type": AssetType.STOCK,
        "quantity": 1,
        "buy_price": 600,
        "current_price": 750,
    }
    row[column] = -1
    with pytest.raises(IntegrityError):
        await add_assets([row])
    await db_session.rollback()
