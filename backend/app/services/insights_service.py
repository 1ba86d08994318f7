"""Portfolio insights: allocation, diversification, rebalancing, alerts, risk.

The analytics here are pure functions over in-memory snapshots of the asset
list. ``InsightsService`` only adds the database reads around them.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.asset import Asset
from app.models.investor_profile import InvestorProfile
from app.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Reference tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TargetBand:
    min: float
    max: float
    target: float
    label: str


TARGET_ALLOCATION: Dict[str, TargetBand] = {
    "stock": TargetBand(min=20, max=40, target=30, label="Actions"),
    "etf": TargetBand(min=15, max=35, target=25, label="ETF"),
    "crypto": TargetBand(min=5, max=15, target=10, label="Crypto"),
    "real_estate": TargetBand(min=20, max=40, target=25, label="Immobilier"),
    "savings": TargetBand(min=5, max=20, target=10, label="Epargne"),
}

# Assumed annualized volatility per asset type
TYPE_VOLATILITY: Dict[str, float] = {
    "stock": 0.18,
    "etf": 0.12,
    "crypto": 0.60,
    "real_estate": 0.06,
    "savings": 0.02,
}
DEFAULT_VOLATILITY = 0.15
MARKET_VOLATILITY = 0.15
RISK_FREE_RATE_PCT = 3.0  # Livret A
DRAWDOWN_MULTIPLIER = 2.5

REBALANCE_THRESHOLD = 5
PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

RISK_SCORES = {"conservative": 20, "moderate": 50, "aggressive": 75, "very_aggressive": 95}
HORIZON_SCORES = {"short": 15, "medium": 40, "long": 70, "very_long": 90}
EXPERIENCE_SCORES = {"beginner": 20, "intermediate": 50, "advanced": 75, "expert": 95}
UNKNOWN_ANSWER_SCORE = 50


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass
class AssetSnapshot:
    """Minimal view of an asset; ORM ``Asset`` rows expose the same attributes."""

    type: str
    quantity: float
    buy_price: float
    current_price: float


@dataclass
class AssetAllocation:
    type: str
    total_value: float
    percentage: float
    count: int


@dataclass
class RebalanceSuggestion:
    asset_type: str
    current_percent: float
    target_percent: float
    action: str  # "reduce" | "increase"
    label: str
    description: str
    priority: str  # "high" | "medium" | "low"


@dataclass
class ExposureAlert:
    type: str
    severity: str  # "critical" | "warning" | "info"
    message: str
    current_percent: float
    threshold: float


@dataclass
class RiskIndicators:
    volatility: float = 0.0
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0
    beta: float = 0.0


@dataclass
class InsightsReport:
    diversification_score: int
    allocations: List[AssetAllocation]
    suggestions: List[RebalanceSuggestion]
    alerts: List[ExposureAlert]
    risk_indicators: RiskIndicators
    total_portfolio_value: float


# ---------------------------------------------------------------------------
# Pure analytics
# ---------------------------------------------------------------------------


def type_key(asset_type) -> str:
    """Plain string key for an asset type (enum member or string)."""
    if isinstance(asset_type, enum.Enum):
        return str(asset_type.value)
    return str(asset_type)


def aggregate(assets: Iterable) -> List[AssetAllocation]:
    """Group assets by type; percentages are relative to the grand total."""
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for asset in assets:
        key = type_key(asset.type)
        totals[key] = totals.get(key, 0.0) + asset.quantity * asset.current_price
        counts[key] = counts.get(key, 0) + 1

    grand_total = sum(totals.values())
    return [
        AssetAllocation(
            type=key,
            total_value=value,
            percentage=round_half_up(value / grand_total * 100, 1) if grand_total > 0 else 0,
            count=counts[key],
        )
        for key, value in totals.items()
    ]


def diversification_score(allocations: Sequence[AssetAllocation]) -> int:
    """Score 0-100 from the inverted Herfindahl-Hirschman index plus a type-count bonus."""
    if not allocations:
        return 0
    total_value = sum(a.total_value for a in allocations)
    if total_value <= 0:
        return 0

    n = len(allocations)
    hhi = sum((a.total_value / total_value) ** 2 for a in allocations)

    # HHI spans 1/n (even split) to 1 (single type); a single type has no spread at all
    if n == 1:
        base = 0.0
    else:
        base = (1 - hhi) / (1 - 1 / n) * 100

    bonus = min(n / 5, 1) * 15
    return round_half_up(max(0.0, min(100.0, base + bonus)))


def _current_percents(allocations: Sequence[AssetAllocation]):
    total_value = sum(a.total_value for a in allocations)
    if total_value <= 0:
        return
    for alloc in allocations:
        band = TARGET_ALLOCATION.get(alloc.type)
        if band is None:
            continue
        yield alloc, band, alloc.total_value / total_value * 100


def rebalance_suggestions(allocations: Sequence[AssetAllocation]) -> List[RebalanceSuggestion]:
    """Suggest moves for types drifting more than 5 points from their target."""
    suggestions = []
    for alloc, band, current in _current_percents(allocations):
        diff = current - band.target
        gap = abs(diff)
        if gap <= REBALANCE_THRESHOLD:
            continue

        action = "reduce" if diff > 0 else "increase"
        if gap > 15:
            priority = "high"
        elif gap > 10:
            priority = "medium"
        else:
            priority = "low"

        if action == "reduce":
            description = f"Surexposition {band.label} {current:.0f}% -> reduire a {band.target:g}%"
        else:
            description = f"Sous-exposition {band.label} {current:.0f}% -> augmenter a {band.target:g}%"

        suggestions.append(
            RebalanceSuggestion(
                asset_type=alloc.type,
                current_percent=round_half_up(current, 1),
                target_percent=band.target,
                action=action,
                label=band.label,
                description=description,
                priority=priority,
            )
        )

    suggestions.sort(key=lambda s: PRIORITY_ORDER[s.priority])
    return suggestions


def exposure_alerts(allocations: Sequence[AssetAllocation]) -> List[ExposureAlert]:
    """Flag types outside their recommended min/max band."""
    alerts = []
    for alloc, band, current in _current_percents(allocations):
        if current > band.max:
            alerts.append(
                ExposureAlert(
                    type=alloc.type,
                    severity="critical" if current > band.max + 10 else "warning",
                    message=(
                        f"{band.label} represente {current:.1f}% du portefeuille "
                        f"(max recommande: {band.max:g}%)"
                    ),
                    current_percent=round_half_up(current, 1),
                    threshold=band.max,
                )
            )
        elif current < band.min and alloc.total_value > 0:
            alerts.append(
                ExposureAlert(
                    type=alloc.type,
                    severity="info",
                    message=f"{band.label} sous-represente a {current:.1f}% (min recommande: {band.min:g}%)",
                    current_percent=round_half_up(current, 1),
                    threshold=band.min,
                )
            )
    return alerts


def risk_indicators(assets: Sequence) -> RiskIndicators:
    """Coarse risk heuristics from fixed per-type volatility assumptions."""
    if not assets:
        return RiskIndicators()

    total_value = sum(a.quantity * a.current_price for a in assets)
    if total_value <= 0:
        return RiskIndicators()

    weighted_volatility = 0.0
    portfolio_return = 0.0
    for asset in assets:
        weight = asset.quantity * asset.current_price / total_value
        vol = TYPE_VOLATILITY.get(type_key(asset.type), DEFAULT_VOLATILITY)
        asset_return = (
            (asset.current_price - asset.buy_price) / asset.buy_price if asset.buy_price > 0 else 0.0
        )
        weighted_volatility += weight * vol
        portfolio_return += weight * asset_return

    return_pct = portfolio_return * 100
    sharpe = (
        (return_pct - RISK_FREE_RATE_PCT) / (weighted_volatility * 100)
        if weighted_volatility > 0
        else 0.0
    )

    return RiskIndicators(
        volatility=round(weighted_volatility * 100, 2),
        sharpe_ratio=round(sharpe, 2),
        max_drawdown=round(weighted_volatility * DRAWDOWN_MULTIPLIER * 100, 2),
        beta=round(weighted_volatility / MARKET_VOLATILITY, 2),
    )


def profile_score(risk_tolerance: str, investment_horizon: str, experience: str) -> int:
    """Weighted questionnaire score; unrecognized answers count as 50."""
    return round_half_up(
        RISK_SCORES.get(risk_tolerance, UNKNOWN_ANSWER_SCORE) * 0.4
        + HORIZON_SCORES.get(investment_horizon, UNKNOWN_ANSWER_SCORE) * 0.3
        + EXPERIENCE_SCORES.get(experience, UNKNOWN_ANSWER_SCORE) * 0.3
    )


def build_insights(assets: Sequence) -> InsightsReport:
    allocations = aggregate(assets)
    total_value = sum(a.total_value for a in allocations)
    return InsightsReport(
        diversification_score=diversification_score(allocations),
        allocations=allocations,
        suggestions=rebalance_suggestions(allocations),
        alerts=exposure_alerts(allocations),
        risk_indicators=risk_indicators(assets),
        total_portfolio_value=round(total_value, 2),
    )


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class InsightsService:
    """Reads the portfolio snapshot and investor profile for insights."""

    async def get_insights(self, db: AsyncSession) -> tuple[InsightsReport, Optional[InvestorProfile]]:
        result = await db.execute(select(Asset))
        assets = result.scalars().all()
        profile = await self.get_current_profile(db)

        report = build_insights(assets)
        logger.debug(
            "Insights computed for %d assets (score=%d)", len(assets), report.diversification_score
        )
        return report, profile

    async def get_current_profile(self, db: AsyncSession) -> Optional[InvestorProfile]:
        result = await db.execute(
            select(InvestorProfile).order_by(InvestorProfile.created_at.desc()).limit(1)
        )
        return result.scalar_one_or_none()

    async def create_profile(
        self,
        db: AsyncSession,
        risk_tolerance: str,
        investment_horizon: str,
        experience: str,
        objectives: str = "",
    ) -> InvestorProfile:
        profile = InvestorProfile(
            risk_tolerance=risk_tolerance,
            investment_horizon=investment_horizon,
            experience=experience,
            objectives=objectives or "",
            score=profile_score(risk_tolerance, investment_horizon, experience),
        )
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        logger.info("Investor profile created (score=%d)", profile.score)
        return profile


insights_service = InsightsService()
