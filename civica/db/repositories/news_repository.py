"""
Repository for cached news articles.

Responsibility: NewsArticle upsert and category listing
"""

from typing import Iterable, List, Optional

from ..query import contains, newest_first
from ..table import MemoryTable, Page, paginate
from ...models.news import NewsArticle, NewsCategory

DEFAULT_NEWS_LIMIT = 20


class NewsRepository:
    def __init__(self, table: MemoryTable[NewsArticle]):
        self.table = table

    def get(self, article_id: str) -> Optional[NewsArticle]:
        return self.table.get(article_id)

    def list(
        self,
        category: Optional[NewsCategory | str] = None,
        query: Optional[str] = None,
        limit: int = DEFAULT_NEWS_LIMIT,
        offset: int = 0
    ) -> Page[NewsArticle]:
        """Articles newest first by published date (created date if unpublished)."""
        category_value = NewsCategory(category) if category else None

        def matches(article: NewsArticle) -> bool:
            if category_value and article.category != category_value:
                return False
            if query and not (contains(article.title, query) or contains(article.summary, query)):
                return False
            return True

        articles = newest_first(self.table.where(matches), NewsArticle.recency_key)
        return paginate(articles, limit, offset)

    def upsert(self, article: NewsArticle) -> NewsArticle:
        return self.table.put(article)

    def upsert_many(self, articles: Iterable[NewsArticle]) -> List[NewsArticle]:
        return self.table.put_many(articles)

    def delete(self, article_id: str) -> bool:
        return self.table.delete(article_id)
