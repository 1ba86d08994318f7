"""Compound-interest simulator endpoint."""

from fastapi import APIRouter, Request

from app.core.exceptions import BadRequestError
from app.core.rate_limit import RATE_LIMITS, limiter
from app.schemas.simulator import SimulationRequest, SimulationResponse
from app.services.simulation_service import SimulationParams, SimulationParamsError, project

router = APIRouter()


@router.post("", response_model=SimulationResponse)
@limiter.limit(RATE_LIMITS["simulator"])
async def simulate(request: Request, data: SimulationRequest):
    """Project an investment under pessimistic, average and optimistic rates."""
    params = SimulationParams(
        initial_amount=data.initial_amount,
        monthly_contribution=data.monthly_contribution,
        annual_rate=data.annual_rate,
        duration_years=data.duration_years,
    )
    try:
        return project(params)
    except SimulationParamsError as e:
        raise BadRequestError(message=str(e))
