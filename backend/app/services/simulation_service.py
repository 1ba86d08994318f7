"""Compound-interest simulator with pessimistic / average / optimistic scenarios."""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Optional

from app.core.config import settings
from app.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

SCENARIO_SPREAD = 3.0  # percentage points around the average rate
MILESTONE_YEARS = (5, 10, 20, 30)
MAX_DURATION_YEARS = 50


class SimulationParamsError(ValueError):
    """Simulation inputs rejected before any computation."""


@dataclass
class SimulationParams:
    initial_amount: float
    monthly_contribution: float
    annual_rate: float
    duration_years: int

    def validate(self) -> None:
        values = (self.initial_amount, self.monthly_contribution, self.annual_rate, self.duration_years)
        for value in values:
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise SimulationParamsError("Invalid parameters")
        if self.duration_years != int(self.duration_years):
            raise SimulationParamsError("Duration must be a whole number of years")
        if min(values) < 0 or self.duration_years < 1:
            raise SimulationParamsError("Parameters must be positive")
        if self.duration_years > MAX_DURATION_YEARS:
            raise SimulationParamsError(f"Duration cannot exceed {MAX_DURATION_YEARS} years")


@dataclass
class YearlyDataPoint:
    year: int
    pessimistic: int
    average: int
    optimistic: int
    contributions: float


@dataclass
class Milestone:
    years: int
    pessimistic: int
    average: int
    optimistic: int
    total_contributions: int
    pessimistic_interest: float
    average_interest: float
    optimistic_interest: float


@dataclass
class ScenarioSummary:
    final_value: int
    interest_earned: float
    interest_ratio: float
    rate: float


@dataclass
class SimulationSummary:
    total_contributions: int
    pessimistic: ScenarioSummary
    average: ScenarioSummary
    optimistic: ScenarioSummary


@dataclass
class ProjectionParams:
    initial_amount: float
    monthly_contribution: float
    annual_rate: float
    duration_years: int
    pessimistic_rate: float
    optimistic_rate: float


@dataclass
class Projection:
    yearly_data: List[YearlyDataPoint]
    milestones: List[Milestone]
    summary: SimulationSummary
    params: ProjectionParams


def future_value(pv: float, pmt: float, annual_rate: float, years: float) -> float:
    """FV = PV(1+r)^n + PMT((1+r)^n - 1)/r with monthly compounding."""
    monthly_rate = annual_rate / 100 / 12
    months = years * 12

    if monthly_rate == 0:
        return pv + pmt * months

    compound_factor = (1 + monthly_rate) ** months
    return pv * compound_factor + pmt * ((compound_factor - 1) / monthly_rate)


def total_contributions(params: SimulationParams, years: int) -> float:
    """Money put in after ``years``: principal plus contributions, uncompounded."""
    return params.initial_amount + params.monthly_contribution * 12 * years


def scenario_rates(annual_rate: float) -> Dict[str, float]:
    return {
        "pessimistic": max(0.0, annual_rate - SCENARIO_SPREAD),
        "average": annual_rate,
        "optimistic": annual_rate + SCENARIO_SPREAD,
    }


def milestone_years(duration_years: int, include_final: bool) -> List[int]:
    years = [y for y in MILESTONE_YEARS if y <= duration_years]
    if include_final and duration_years not in years:
        years.append(duration_years)
    return years


def _interest_ratio(final_value: int, contributions: float) -> float:
    if contributions <= 0:
        return 0.0
    return round((final_value - contributions) / contributions * 100, 2)


def project(params: SimulationParams, include_final_milestone: Optional[bool] = None) -> Projection:
    """Project the investment under the three rate scenarios.

    Raises SimulationParamsError when the inputs are out of range or the
    projected values do not fit in a float.
    """
    params.validate()
    if include_final_milestone is None:
        include_final_milestone = settings.SIMULATOR_INCLUDE_FINAL_MILESTONE

    try:
        return _build_projection(params, include_final_milestone)
    except OverflowError as e:
        logger.info("Projection overflow at %.2f%% over %d years", params.annual_rate, params.duration_years)
        raise SimulationParamsError("Projection exceeds numeric range") from e


def _build_projection(params: SimulationParams, include_final_milestone: bool) -> Projection:
    rates = scenario_rates(params.annual_rate)

    def values_at(years: int) -> Dict[str, int]:
        return {
            name: round_half_up(future_value(params.initial_amount, params.monthly_contribution, rate, years))
            for name, rate in rates.items()
        }

    yearly_data = []
    for year in range(int(params.duration_years) + 1):
        values = values_at(year)
        yearly_data.append(
            YearlyDataPoint(year=year, contributions=total_contributions(params, year), **values)
        )

    milestones = []
    for years in milestone_years(int(params.duration_years), include_final_milestone):
        values = values_at(years)
        contributions = total_contributions(params, years)
        milestones.append(
            Milestone(
                years=years,
                total_contributions=round_half_up(contributions),
                pessimistic_interest=values["pessimistic"] - contributions,
                average_interest=values["average"] - contributions,
                optimistic_interest=values["optimistic"] - contributions,
                **values,
            )
        )

    final_contributions = total_contributions(params, params.duration_years)
    final_values = values_at(params.duration_years)
    scenarios = {
        name: ScenarioSummary(
            final_value=final_values[name],
            interest_earned=final_values[name] - final_contributions,
            interest_ratio=_interest_ratio(final_values[name], final_contributions),
            rate=rates[name],
        )
        for name in rates
    }

    logger.debug(
        "Projection over %d years at %.2f%%: average final value %d",
        params.duration_years,
        params.annual_rate,
        final_values["average"],
    )

    return Projection(
        yearly_data=yearly_data,
        milestones=milestones,
        summary=SimulationSummary(total_contributions=round_half_up(final_contributions), **scenarios),
        params=ProjectionParams(
            initial_amount=params.initial_amount,
            monthly_contribution=params.monthly_contribution,
            annual_rate=params.annual_rate,
            duration_years=params.duration_years,
            pessimistic_rate=rates["pessimistic"],
            optimistic_rate=rates["optimistic"],
        ),
    )
