"""Compound simulator schemas."""

from typing import Annotated, List

from pydantic import Field

from app.schemas.common import CamelModel

# Numbers only: strings and booleans are rejected rather than coerced
StrictNumber = Annotated[float, Field(strict=True)]


class SimulationRequest(CamelModel):
    initial_amount: StrictNumber
    monthly_contribution: StrictNumber
    annual_rate: StrictNumber
    duration_years: StrictNumber


class YearlyDataPointResponse(CamelModel):
    year: int
    pessimistic: int
    average: int
    optimistic: int
    contributions: float


class MilestoneResponse(CamelModel):
    years: int
    pessimistic: int
    average: int
    optimistic: int
    total_contributions: int
    pessimistic_interest: float
    average_interest: float
    optimistic_interest: float


class ScenarioSummaryResponse(CamelModel):
    final_value: int
    interest_earned: float
    interest_ratio: float
    rate: float


class SimulationSummaryResponse(CamelModel):
    total_contributions: int
    pessimistic: ScenarioSummaryResponse
    average: ScenarioSummaryResponse
    optimistic: ScenarioSummaryResponse


class SimulationParamsResponse(CamelModel):
    initial_amount: float
    monthly_contribution: float
    annual_rate: float
    duration_years: int
    pessimistic_rate: float
    optimistic_rate: float


class SimulationResponse(CamelModel):
    yearly_data: List[YearlyDataPointResponse]
    milestones: List[MilestoneResponse]
    summary: SimulationSummaryResponse
    params: SimulationParamsResponse
