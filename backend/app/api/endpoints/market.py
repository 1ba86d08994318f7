"""Market overview and news endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.market import MarketItemResponse, NewsItemResponse
from app.services.market_service import market_service
from app.services.news_service import news_service

router = APIRouter()


@router.get("/market", response_model=List[MarketItemResponse])
async def get_market(db: AsyncSession = Depends(get_db)):
    """Latest quote per ticker with a simulated intraday curve."""
    return await market_service.get_overview(db)


@router.get("/news", response_model=List[NewsItemResponse])
async def get_news(
    category: Optional[str] = Query(None, max_length=50, description="Catégorie (Toutes = tout)"),
    db: AsyncSession = Depends(get_db),
):
    return await news_service.get_news(db, category=category)
