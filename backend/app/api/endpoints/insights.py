"""Insights endpoints: portfolio analytics and investor questionnaire."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.rate_limit import RATE_LIMITS, limiter
from app.schemas.insights import InsightsResponse, InvestorProfileCreate, InvestorProfileResponse
from app.services.insights_service import insights_service

router = APIRouter()


@router.get("", response_model=InsightsResponse)
async def get_insights(db: AsyncSession = Depends(get_db)):
    """Diversification, rebalancing, alerts and risk for the whole portfolio."""
    report, profile = await insights_service.get_insights(db)
    return {
        "profile": InvestorProfileResponse.model_validate(profile) if profile else None,
        **asdict(report),
    }


@router.post("", response_model=InvestorProfileResponse)
@limiter.limit(RATE_LIMITS["profile_submit"])
async def submit_profile(
    request: Request,
    data: InvestorProfileCreate,
    db: AsyncSession = Depends(get_db),
):
    """Save questionnaire answers as a new investor profile."""
    return await insights_service.create_profile(
        db,
        risk_tolerance=data.risk_tolerance,
        investment_horizon=data.investment_horizon,
        experience=data.experience,
        objectives=data.objectives or "",
    )
