"""Watchlist item model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Uuid

from app.models import Base


class WatchlistItem(Base):
    __tablename__ = "watchlist_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    ticker = Column(String(20), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False)
    added_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
