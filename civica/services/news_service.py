"""
News lookup service.

Routes a news request to the right NewsAPI query and caches every article
it returns.

Responsibility: Coordinate the NewsAPI adapter and the article cache
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from ..adapters.newsapi import NewsAPIAdapter
from ..db.store import MemoryStore
from ..models.adapter_models import AdapterResponse
from ..models.news import NewsArticle, NewsCategory

logger = logging.getLogger(__name__)


@dataclass
class NewsResult:
    articles: List[NewsArticle] = field(default_factory=list)
    total: int = 0
    degraded: bool = False


class NewsService:
    """
    Civic news search.

    Example:
        service = NewsService(store, NewsAPIAdapter(api_key="..."), "San Antonio, Texas")
        result = await service.search(category="local")
    """

    def __init__(self, store: MemoryStore, newsapi: NewsAPIAdapter, default_location: str):
        self.store = store
        self.newsapi = newsapi
        self.default_location = default_location

    async def search(
        self,
        query: Optional[str] = None,
        category: Optional[NewsCategory | str] = None,
        page_size: int = 20,
        page: int = 1
    ) -> NewsResult:
        """
        Search news.

        ``category=local`` returns local coverage for the default location
        and ``category=explainer`` returns explainers; any other category
        filters the civic keyword search.
        """
        category_value = NewsCategory(category) if category else None

        if category_value == NewsCategory.LOCAL:
            response = await self.newsapi.fetch_local(self.default_location)
        elif category_value == NewsCategory.EXPLAINER:
            response = await self.newsapi.fetch_explainers()
        else:
            response = await self.newsapi.fetch(
                query=query,
                category=category_value.value if category_value else None,
                page_size=page_size,
                page=page,
            )
        return self._cache(response)

    async def breaking(self) -> NewsResult:
        return self._cache(await self.newsapi.fetch_breaking())

    async def local(self, location: Optional[str] = None) -> NewsResult:
        return self._cache(await self.newsapi.fetch_local(location or self.default_location))

    def _cache(self, response: AdapterResponse[NewsArticle]) -> NewsResult:
        articles = self.store.news.upsert_many(response.data)
        if response.is_fallback:
            logger.warning(f"NewsAPI degraded ({response.fallback_reason.value}), served {len(articles)} articles")
        return NewsResult(articles=articles, total=response.total, degraded=response.is_fallback)
