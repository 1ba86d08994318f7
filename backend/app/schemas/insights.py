"""Insights and investor profile schemas."""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class AssetAllocationResponse(CamelModel):
    type: str
    total_value: float
    percentage: float
    count: int


class RebalanceSuggestionResponse(CamelModel):
    asset_type: str
    current_percent: float
    target_percent: float
    action: Literal["reduce", "increase"]
    label: str
    description: str
    priority: Literal["high", "medium", "low"]


class AlertResponse(CamelModel):
    type: str
    severity: Literal["critical", "warning", "info"]
    message: str
    current_percent: float
    threshold: float


class RiskIndicatorsResponse(CamelModel):
    volatility: float
    sharpe_ratio: float
    max_drawdown: float
    beta: float


class InvestorProfileCreate(CamelModel):
    """Questionnaire answers."""

    risk_tolerance: str = Field(..., min_length=1, max_length=30)
    investment_horizon: str = Field(..., min_length=1, max_length=30)
    experience: str = Field(..., min_length=1, max_length=30)
    objectives: Optional[str] = ""


class InvestorProfileResponse(CamelModel):
    id: UUID
    risk_tolerance: str
    investment_horizon: str
    experience: str
    objectives: str
    score: int
    created_at: datetime


class InsightsResponse(CamelModel):
    profile: Optional[InvestorProfileResponse] = None
    diversification_score: int
    allocations: List[AssetAllocationResponse]
    suggestions: List[RebalanceSuggestionResponse]
    alerts: List[AlertResponse]
    risk_indicators: RiskIndicatorsResponse
    total_portfolio_value: float
