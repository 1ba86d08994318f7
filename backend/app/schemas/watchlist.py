"""Watchlist schemas."""

from datetime import datetime
from typing import Literal, Optional, Union
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class WatchlistItemCreate(CamelModel):
    ticker: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, max_length=20)


class WatchlistItemResponse(CamelModel):
    id: Union[UUID, str]
    ticker: str
    name: str
    type: str
    added_at: datetime


class WatchlistToggleResponse(CamelModel):
    action: Literal["added", "removed"]
    ticker: Optional[str] = None
    item: Optional[WatchlistItemResponse] = None
