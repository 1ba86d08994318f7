"""Asset schemas."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from app.schemas.common import CamelModel


class PortfolioRef(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None


class PricePoint(CamelModel):
    date: str
    price: float


class AssetResponse(CamelModel):
    """Stored asset columns."""

    id: UUID
    name: str
    ticker: str
    type: str
    quantity: float
    buy_price: float
    current_price: float
    currency: str
    category: Optional[str] = None
    buy_date: Optional[date] = None
    portfolio_id: UUID
    created_at: datetime
    updated_at: datetime


class EnrichedAssetResponse(AssetResponse):
    """Asset with derived metrics and chart series."""

    portfolio: Optional[PortfolioRef] = None
    total_value: float
    total_cost: float
    gain_loss: float
    gain_loss_percent: float
    sparkline_data: List[float]
    history_data: List[PricePoint]
