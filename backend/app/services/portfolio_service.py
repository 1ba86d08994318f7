"""Portfolio summary and per-asset metrics."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.asset import Asset
from app.models.portfolio import Portfolio
from app.services import chart_data
from app.services.insights_service import TARGET_ALLOCATION, type_key
from app.utils.formatting import format_currency, format_percent
from app.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

TYPE_COLORS = {
    "stock": "#818cf8",
    "etf": "#a78bfa",
    "crypto": "#f59e0b",
    "real_estate": "#34d399",
    "savings": "#60a5fa",
}
DEFAULT_COLOR = "#888"
PERFORMERS_COUNT = 3


@dataclass
class AllocationSlice:
    type: str
    label: str
    value: int
    percent: float
    color: str


@dataclass
class Performer:
    id: Any
    name: str
    ticker: str
    type: str
    total_value: float
    total_cost: float
    gain_loss: float
    gain_loss_percent: float


@dataclass
class FormattedTotals:
    currency: str
    total_value: str
    total_cost: str
    total_gain_loss: str
    total_gain_loss_percent: str


@dataclass
class PortfolioSummary:
    total_value: int
    total_cost: int
    total_gain_loss: int
    total_gain_loss_percent: float
    asset_count: int
    allocation: List[AllocationSlice]
    top_performers: List[Performer]
    worst_performers: List[Performer]
    history: List[Dict[str, Any]]
    formatted: FormattedTotals


def gain_loss_percent(total_value: float, total_cost: float) -> float:
    return (total_value - total_cost) / total_cost * 100 if total_cost > 0 else 0.0


def asset_metrics(asset: Asset) -> Dict[str, float]:
    """Derived value/cost/gain figures for one holding."""
    total_value = asset.total_value
    total_cost = asset.total_cost
    return {
        "total_value": total_value,
        "total_cost": total_cost,
        "gain_loss": total_value - total_cost,
        "gain_loss_percent": gain_loss_percent(total_value, total_cost),
    }


def summarize(
    assets: Sequence,
    currency: str = "EUR",
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> PortfolioSummary:
    total_value = 0.0
    total_cost = 0.0
    by_type: Dict[str, float] = {}
    performers = []

    for asset in assets:
        metrics = asset_metrics(asset)
        total_value += metrics["total_value"]
        total_cost += metrics["total_cost"]
        key = type_key(asset.type)
        by_type[key] = by_type.get(key, 0.0) + metrics["total_value"]
        performers.append(
            Performer(id=asset.id, name=asset.name, ticker=asset.ticker, type=key, **metrics)
        )

    allocation = [
        AllocationSlice(
            type=key,
            label=TARGET_ALLOCATION[key].label if key in TARGET_ALLOCATION else key,
            value=round_half_up(value),
            percent=round_half_up(value / total_value * 100, 1) if total_value > 0 else 0.0,
            color=TYPE_COLORS.get(key, DEFAULT_COLOR),
        )
        for key, value in by_type.items()
    ]
    allocation.sort(key=lambda s: s.value, reverse=True)

    performers.sort(key=lambda p: p.gain_loss_percent, reverse=True)
    total_gain_loss = total_value - total_cost
    total_pct = gain_loss_percent(total_value, total_cost)

    return PortfolioSummary(
        total_value=round_half_up(total_value),
        total_cost=round_half_up(total_cost),
        total_gain_loss=round_half_up(total_gain_loss),
        total_gain_loss_percent=round(total_pct, 2),
        asset_count=len(assets),
        allocation=allocation,
        top_performers=performers[:PERFORMERS_COUNT],
        worst_performers=performers[-PERFORMERS_COUNT:][::-1],
        history=chart_data.portfolio_history(total_value, today=today, rng=rng),
        formatted=FormattedTotals(
            currency=currency,
            total_value=format_currency(total_value, currency),
            total_cost=format_currency(total_cost, currency),
            total_gain_loss=format_currency(total_gain_loss, currency),
            total_gain_loss_percent=format_percent(total_pct, 2, signed=True),
        ),
    )


def enrich_asset(
    asset: Asset,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, Any]:
    """Asset columns plus metrics and chart series."""
    return {
        "id": asset.id,
        "name": asset.name,
        "ticker": asset.ticker,
        "type": type_key(asset.type),
        "quantity": asset.quantity,
        "buy_price": asset.buy_price,
        "current_price": asset.current_price,
        "currency": asset.currency,
        "category": asset.category,
        "buy_date": asset.buy_date,
        "portfolio_id": asset.portfolio_id,
        "portfolio": asset.portfolio,
        "created_at": asset.created_at,
        "updated_at": asset.updated_at,
        **asset_metrics(asset),
        "sparkline_data": chart_data.sparkline(asset.current_price, asset.buy_price, rng=rng),
        "history_data": chart_data.price_history(
            asset.current_price, asset.buy_price, today=today, rng=rng
        ),
    }


class PortfolioService:
    """Reads holdings for the single implicit portfolio."""

    async def list_assets(self, db: AsyncSession) -> List[Asset]:
        result = await db.execute(select(Asset).order_by(Asset.updated_at.desc()))
        return list(result.scalars().unique().all())

    async def get_summary(self, db: AsyncSession, currency: str = "EUR") -> PortfolioSummary:
        assets = await self.list_assets(db)
        return summarize(assets, currency=currency)

    async def get_enriched_assets(self, db: AsyncSession) -> List[Dict[str, Any]]:
        assets = await self.list_assets(db)
        return [enrich_asset(asset) for asset in assets]

    async def get_or_create_default_portfolio(self, db: AsyncSession) -> Portfolio:
        result = await db.execute(
            select(Portfolio).where(Portfolio.name == settings.DEFAULT_PORTFOLIO_NAME)
        )
        portfolio = result.scalar_one_or_none()
        if portfolio is None:
            portfolio = Portfolio(name=settings.DEFAULT_PORTFOLIO_NAME)
            db.add(portfolio)
            await db.flush()
            logger.info("Created default portfolio %r", portfolio.name)
        return portfolio


portfolio_service = PortfolioService()
