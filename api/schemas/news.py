"""Response schemas for news endpoints."""

from typing import List

from civica.models.base import CivicaModel
from civica.models.news import NewsArticle


class ArticleListResponse(CivicaModel):
    articles: List[NewsArticle]
    total: int
    degraded: bool = False
