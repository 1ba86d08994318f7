"""Market and news schemas."""

from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from app.schemas.common import CamelModel


class IntradayPoint(CamelModel):
    time: str
    price: float


class MarketItemResponse(CamelModel):
    id: Union[UUID, str]
    ticker: str
    name: str
    type: str
    currency: str
    price: float
    change: float
    change_percent: float
    volume: float
    timestamp: datetime
    intraday_data: List[IntradayPoint]


class NewsItemResponse(CamelModel):
    id: Union[UUID, str]
    title: str
    description: Optional[str] = None
    url: str
    source: str
    category: str
    relevance_score: float
    image_url: Optional[str] = None
    published_at: datetime
