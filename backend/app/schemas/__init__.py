"""Pydantic schemas."""

from app.schemas.asset import EnrichedAssetResponse
from app.schemas.insights import InsightsResponse, InvestorProfileCreate, InvestorProfileResponse
from app.schemas.market import MarketItemResponse, NewsItemResponse
from app.schemas.portfolio import PortfolioSummaryResponse
from app.schemas.preferences import ClientSettingsResponse, ClientSettingsUpdate
from app.schemas.simulator import SimulationRequest, SimulationResponse
from app.schemas.watchlist import WatchlistItemCreate, WatchlistItemResponse, WatchlistToggleResponse

__all__ = [
    "EnrichedAssetResponse",
    "InsightsResponse",
    "InvestorProfileCreate",
    "InvestorProfileResponse",
    "MarketItemResponse",
    "NewsItemResponse",
    "PortfolioSummaryResponse",
    "ClientSettingsResponse",
    "ClientSettingsUpdate",
    "SimulationRequest",
    "SimulationResponse",
    "WatchlistItemCreate",
    "WatchlistItemResponse",
    "WatchlistToggleResponse",
]
