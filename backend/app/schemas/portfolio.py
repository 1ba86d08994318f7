"""Portfolio summary schemas."""

from typing import List, Union
from uuid import UUID

from app.schemas.common import CamelModel


class AllocationSlice(CamelModel):
    type: str
    label: str
    value: int
    percent: float
    color: str


class Performer(CamelModel):
    id: Union[UUID, str]
    name: str
    ticker: str
    type: str
    total_value: float
    total_cost: float
    gain_loss: float
    gain_loss_percent: float


class MonthlyValue(CamelModel):
    month: str
    value: int


class FormattedTotals(CamelModel):
    currency: str
    total_value: str
    total_cost: str
    total_gain_loss: str
    total_gain_loss_percent: str


class PortfolioSummaryResponse(CamelModel):
    total_value: int
    total_cost: int
    total_gain_loss: int
    total_gain_loss_percent: float
    asset_count: int
    allocation: List[AllocationSlice]
    top_performers: List[Performer]
    worst_performers: List[Performer]
    history: List[MonthlyValue]
    formatted: FormattedTotals
