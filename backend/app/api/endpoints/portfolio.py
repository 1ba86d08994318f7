"""Portfolio summary endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.portfolio import PortfolioSummaryResponse
from app.services.portfolio_service import portfolio_service
from app.services.settings_store import SettingsStore, get_settings_store

router = APIRouter()


@router.get("", response_model=PortfolioSummaryResponse)
async def get_portfolio(
    db: AsyncSession = Depends(get_db),
    store: SettingsStore = Depends(get_settings_store),
):
    """Totals, allocation, best/worst performers and 12-month history."""
    return await portfolio_service.get_summary(db, currency=store.state.currency)
