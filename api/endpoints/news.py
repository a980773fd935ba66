"""
News API endpoints.

Responsibility: Civic, breaking and local news endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_news_service
from api.schemas.news import ArticleListResponse
from civica.models.news import NewsCategory
from civica.services import NewsResult, NewsService

router = APIRouter()


def _to_response(result: NewsResult) -> ArticleListResponse:
    return ArticleListResponse(articles=result.articles, total=result.total, degraded=result.degraded)


@router.get("/news", response_model=ArticleListResponse)
async def search_news(
    query: Optional[str] = Query(None, description="Free-text search"),
    category: Optional[NewsCategory] = Query(None),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    page: int = Query(1, ge=1),
    service: NewsService = Depends(get_news_service)
):
    """
    Search civic news.

    ``category=local`` returns local coverage for the default location and
    ``category=explainer`` returns explainers.
    """
    result = await service.search(query=query, category=category, page_size=page_size, page=page)
    return _to_response(result)


@router.get("/news/breaking", response_model=ArticleListResponse)
async def breaking_news(service: NewsService = Depends(get_news_service)):
    return _to_response(await service.breaking())


@router.get("/news/local", response_model=ArticleListResponse)
async def local_news(
    location: Optional[str] = Query(None, description="City and state; defaults to the configured location"),
    service: NewsService = Depends(get_news_service)
):
    return _to_response(await service.local(location))
