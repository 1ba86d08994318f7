"""Insights and investor profile endpoint tests."""

import pytest
from httpx import AsyncClient

from app.models.asset import AssetType


@pytest.mark.asyncio
async def test_insights_empty_portfolio(client: AsyncClient):
    response = await client.get("/api/insights")
    assert response.status_code == 200
    data = response.json()

    assert data["profile"] is None
    assert data["diversificationScore"] == 0
    assert data["allocations"] == []
    assert data["suggestions"] == []
    assert data["alerts"] == []
    assert data["riskIndicators"] == {
        "volatility": 0,
        "sharpeRatio": 0,
        "maxDrawdown": 0,
        "beta": 0,
    }
    assert data["totalPortfolioValue"] == 0


@pytest.mark.asyncio
async def test_insights_balanced_portfolio(client: AsyncClient, sample_portfolio):
    data = (await client.get("/api/insights")).json()

    assert data["diversificationScore"] == 100
    assert data["totalPortfolioValue"] == 100000
    assert data["suggestions"] == []
    assert data["alerts"] == []
    assert {a["type"]: a["percentage"] for a in data["allocations"]} == {
        "stock": 30.0,
        "etf": 25.0,
        "crypto": 10.0,
        "real_estate": 25.0,
        "savings": 10.0,
    }

    risk = data["riskIndicators"]
    assert risk["volatility"] == pytest.approx(16.1)
    assert risk["sharpeRatio"] == pytest.approx(0.56)
    assert risk["maxDrawdown"] == pytest.approx(40.25)
    assert risk["beta"] == pytest.approx(1.07)


@pytest.mark.asyncio
async def test_insights_concentrated_portfolio(client: AsyncClient, add_assets):
    await add_assets(
        [
            {
                "name": "Bitcoin",
                "ticker": "BTC-USD",
                "type": AssetType.CRYPTO,
                "quantity": 1,
                "buy_price": 40000,
                "current_price": 50000,
            }
        ]
    )
    data = (await client.get("/api/insights")).json()

    assert data["diversificationScore"] == 3
    assert data["suggestions"] == [
        {
            "assetType": "crypto",
            "currentPercent": 100.0,
            "targetPercent": 10,
            "action": "reduce",
            "label": "Crypto",
            "description": "Surexposition Crypto 100% -> reduire a 10%",
            "priority": "high",
        }
    ]
    assert data["alerts"] == [
        {
            "type": "crypto",
            "severity": "critical",
            "message": "Crypto represente 100.0% du portefeuille (max recommande: 15%)",
            "currentPercent": 100.0,
            "threshold": 15,
        }
    ]


@pytest.mark.asyncio
async def test_submit_profile(client: AsyncClient):
    response = await client.post(
        "/api/insights",
        json={
            "riskTolerance": "moderate",
            "investmentHorizon": "long",
            "experience": "beginner",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 47
    assert data["objectives"] == ""
    assert data["riskTolerance"] == "moderate"
    assert "id" in data
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_submit_profile_unknown_answers_score_50(client: AsyncClient):
    response = await client.post(
        "/api/insights",
        json={
            "riskTolerance": "yolo",
            "investmentHorizon": "forever",
            "experience": "none",
            "objectives": "Retraite",
        },
    )
    assert response.status_code == 200
    assert response.json()["score"] == 50
    assert response.json()["objectives"] == "Retraite"


@pytest.mark.asyncio
async def test_latest_profile_is_current(client: AsyncClient):
    await client.post(
        "/api/insights",
        json={"riskTolerance": "conservative", "investmentHorizon": "short", "experience": "beginner"},
    )
    await client.post(
        "/api/insights",
        json={"riskTolerance": "aggressive", "investmentHorizon": "very_long", "experience": "intermediate"},
    )

    data = (await client.get("/api/insights")).json()
    assert data["profile"]["riskTolerance"] == "aggressive"
    assert data["profile"]["score"] == 72


@pytest.mark.asyncio
async def test_submit_profile_missing_field(client: AsyncClient):
    response = await client.post("/api/insights", json={"riskTolerance": "moderate"})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "BAD_REQUEST"
    assert data["message"] == "Invalid parameters"
    assert data["details"]
