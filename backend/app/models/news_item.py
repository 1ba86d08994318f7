"""News item model."""

import uuid

from sqlalchemy import Column, DateTime, Float, String, Text, Uuid
from sqlalchemy.sql import func

from app.models import Base


class NewsItem(Base):
    __tablename__ = "news_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=True)
    url = Column(String(500), nullable=False)
    source = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    relevance_score = Column(Float, default=0.0, nullable=False)
    image_url = Column(String(500), nullable=True)
    published_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
