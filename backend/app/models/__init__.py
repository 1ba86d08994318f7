"""SQLAlchemy models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models so Base.metadata.create_all() picks them up
from app.models.portfolio import Portfolio  # noqa: E402, F401
from app.models.asset import Asset  # noqa: E402, F401
from app.models.market_data import MarketData  # noqa: E402, F401
from app.models.news_item import NewsItem  # noqa: E402, F401
from app.models.watchlist_item import WatchlistItem  # noqa: E402, F401
from app.models.investor_profile import InvestorProfile  # noqa: E402, F401
