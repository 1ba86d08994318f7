"""Market data snapshot model."""

import uuid

from sqlalchemy import Column, DateTime, Float, String, Uuid
from sqlalchemy.sql import func

from app.models import Base


class MarketData(Base):
    __tablename__ = "market_data"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    ticker = Column(String(20), nullable=False, index=True)
    price = Column(Float, nullable=False)
    change = Column(Float, default=0.0, nullable=False)
    change_percent = Column(Float, default=0.0, nullable=False)
    volume = Column(Float, default=0.0, nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
