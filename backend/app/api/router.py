"""API router."""

from fastapi import APIRouter

from app.api.endpoints import assets, insights, market, portfolio, settings, simulator, watchlist

api_router = APIRouter()

api_router.include_router(portfolio.router, prefix="/portfolio", tags=["Portfolio"])
api_router.include_router(assets.router, prefix="/assets", tags=["Assets"])
api_router.include_router(insights.router, prefix="/insights", tags=["Insights"])
api_router.include_router(simulator.router, prefix="/simulator", tags=["Simulator"])
api_router.include_router(market.router, tags=["Market"])
api_router.include_router(watchlist.router, prefix="/watchlist", tags=["Watchlist"])
api_router.include_router(settings.router, prefix="/settings", tags=["Settings"])
