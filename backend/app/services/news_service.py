"""Curated news feed with demo data fallback."""

import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.news_item import NewsItem
from app.services.fallback import with_fallback
from app.services.fixtures import ALL_NEWS_CATEGORIES, MOCK_NEWS

logger = logging.getLogger(__name__)


def _category_filter(category: Optional[str]) -> Optional[str]:
    if not category or category == ALL_NEWS_CATEGORIES:
        return None
    return category


class NewsService:
    """Service for news items."""

    async def get_news(self, db: AsyncSession, category: Optional[str] = None) -> List[Any]:
        category = _category_filter(category)

        async def from_db():
            query = select(NewsItem).order_by(NewsItem.published_at.desc())
            if category:
                query = query.where(NewsItem.category == category)
            result = await db.execute(query)
            return result.scalars().all()

        def from_fixture():
            return [item for item in MOCK_NEWS if category is None or item["category"] == category]

        return await with_fallback(from_db, from_fixture, "news", session=db)


news_service = NewsService()
