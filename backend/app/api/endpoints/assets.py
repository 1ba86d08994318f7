"""Asset endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.asset import EnrichedAssetResponse
from app.services.portfolio_service import portfolio_service

router = APIRouter()


@router.get("", response_model=List[EnrichedAssetResponse])
async def list_assets(db: AsyncSession = Depends(get_db)):
    """All holdings, most recently updated first, with chart series."""
    return await portfolio_service.get_enriched_assets(db)
