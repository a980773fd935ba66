"""
NewsAPI adapter for civic and political news.

Queries the NewsAPI ``/everything`` endpoint with civic keyword queries.
Articles are keyed by a hash of their URL so repeated fetches upsert the
same cached rows.

Responsibility: Fetch and normalize news articles from NewsAPI
"""

from datetime import timedelta
from typing import Optional, Dict, Any, List, Callable
import httpx

from .base_adapter import BaseAdapter
from .fallback_data import fallback_explainers, fallback_local_news, fallback_news
from ..models.news import NewsArticle, NewsCategory
from ..models.adapter_models import AdapterResponse, FallbackReason
from ..utils.clock import parse_datetime, utcnow
from ..utils.dedupe import dedupe_by_key
from ..utils.hash_utils import canonical_url, url_id
from ..utils.text import categorize_article, extract_bill_references, extract_tags

CIVIC_KEYWORDS = (
    "bill", "legislation", "congress", "senate", "house",
    "government", "policy", "election", "voting", "civic",
)

BREAKING_QUERY = "Biden OR Trump OR Congress OR politics OR government OR election OR policy"
EXPLAINER_QUERY = (
    '("how does" OR "what is" OR "explained" OR "explainer") '
    "AND (politics OR government OR legislation)"
)

BREAKING_LIMIT = 10
BREAKING_MINIMUM = 3
BREAKING_WINDOW = timedelta(days=7)


def build_civic_query(query: Optional[str]) -> str:
    """
    Narrow a user query to civic coverage.

    Example: "water" -> "(water) AND (bill OR legislation OR congress)"
    """
    if not query:
        return " OR ".join(CIVIC_KEYWORDS)
    return f"({query}) AND ({' OR '.join(CIVIC_KEYWORDS[:3])})"


def build_local_query(location: str) -> str:
    return f'"{location}" AND (politics OR government OR city council OR mayor OR local)'


class NewsAPIAdapter(BaseAdapter[NewsArticle]):
    """
    Adapter for NewsAPI.

    A missing API key is treated as "not configured": every method serves
    its curated fallback set without attempting a request.

    Example:
        adapter = NewsAPIAdapter(api_key="...")
        response = await adapter.fetch(query="water", page_size=20)
        breaking = await adapter.fetch_breaking()
    """

    BASE_URL = "https://newsapi.org/v2"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = BASE_URL,
        max_retries: int = 3,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        retry_wait: Any = None
    ):
        super().__init__(
            source_name="newsapi",
            max_retries=max_retries,
            timeout_seconds=timeout_seconds,
            client=client,
            retry_wait=retry_wait
        )
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def fetch(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        page_size: int = 20,
        page: int = 1,
        **kwargs: Any
    ) -> AdapterResponse[NewsArticle]:
        """
        Search civic news.

        Args:
            query: Free-text search, narrowed with civic keywords
            category: Keep only articles categorized this way
            page_size: Articles per page
            page: 1-based page number

        Returns:
            AdapterResponse of NewsArticle with NewsAPI's ``totalResults``
        """
        wanted = NewsCategory(category) if category else None

        def fallback() -> List[NewsArticle]:
            articles = fallback_news()
            if wanted:
                articles = [a for a in articles if a.category == wanted]
            return articles

        return await self._search(
            {
                "q": build_civic_query(query),
                "pageSize": page_size,
                "page": max(page, 1),
            },
            fallback,
            category_filter=wanted,
        )

    async def fetch_breaking(self) -> AdapterResponse[NewsArticle]:
        """
        Political headlines from the last week, newest first.

        Tops up with fallback headlines when fewer than three come back.
        """
        since = (utcnow() - BREAKING_WINDOW).strftime("%Y-%m-%dT%H:%M:%S")
        response = await self._search(
            {"q": BREAKING_QUERY, "pageSize": 20, "from": since},
            fallback_news,
            empty_is_fallback=True,
        )
        if response.is_fallback:
            return response

        articles = response.data[:BREAKING_LIMIT]
        if len(articles) < BREAKING_MINIMUM:
            self.logger.info(f"Only {len(articles)} breaking articles, topping up with fallback")
            articles, _ = dedupe_by_key(
                [*articles, *fallback_news()],
                lambda article: canonical_url(article.url),
            )
            articles = articles[:BREAKING_LIMIT]
        response.data = articles
        response.total = len(articles)
        return response

    async def fetch_local(self, location: str) -> AdapterResponse[NewsArticle]:
        """Local government coverage for ``location``; every article is tagged local."""
        return await self._search(
            {"q": build_local_query(location), "pageSize": 10},
            lambda: fallback_local_news(location),
            force_category=NewsCategory.LOCAL,
            empty_is_fallback=True,
        )

    async def fetch_explainers(self) -> AdapterResponse[NewsArticle]:
        return await self._search(
            {"q": EXPLAINER_QUERY, "pageSize": 10},
            fallback_explainers,
            force_category=NewsCategory.EXPLAINER,
            empty_is_fallback=True,
        )

    def normalize(self, raw_data: Dict[str, Any]) -> NewsArticle:
        """
        Convert a NewsAPI article to a NewsArticle.

        Raises:
            ValueError: If title or URL is missing
        """
        if not isinstance(raw_data, dict):
            raise ValueError("NewsAPI article must be an object")
        title = (raw_data.get("title") or "").strip()
        url = (raw_data.get("url") or "").strip()
        if not title or not url:
            raise ValueError("Article is missing title or url")

        description = raw_data.get("description") or ""
        source = raw_data.get("source") or {}
        return NewsArticle(
            id=url_id(url),
            title=title,
            summary=description,
            content=raw_data.get("content") or "",
            url=url,
            source=(source.get("name") if isinstance(source, dict) else None) or "Unknown",
            author=raw_data.get("author"),
            published_at=parse_datetime(raw_data.get("publishedAt")),
            image_url=raw_data.get("urlToImage"),
            category=categorize_article(title, description),
            related_bills=extract_bill_references(title, description),
            tags=extract_tags(title, description),
        )

    async def _search(
        self,
        params: Dict[str, Any],
        fallback: Callable[[], List[NewsArticle]],
        category_filter: Optional[NewsCategory] = None,
        force_category: Optional[NewsCategory] = None,
        empty_is_fallback: bool = False
    ) -> AdapterResponse[NewsArticle]:
        start_time = utcnow()
        if not self.api_key:
            return self._build_fallback_response(fallback(), FallbackReason.NOT_CONFIGURED, start_time)

        query = {
            **params,
            "apiKey": self.api_key,
            "language": "en",
            "sortBy": "publishedAt",
        }
        self.logger.info(f"Searching news: q={params.get('q')!r}")

        try:
            payload = await self._get_json(f"{self.base_url}/everything", params=query)
        except (httpx.HTTPError, ValueError) as e:
            return self._build_fallback_response(fallback(), FallbackReason.UPSTREAM_ERROR, start_time, e)

        if (
            not isinstance(payload, dict)
            or payload.get("status") != "ok"
            or not isinstance(payload.get("articles"), list)
        ):
            message = payload.get("message") if isinstance(payload, dict) else None
            return self._build_fallback_response(
                fallback(),
                FallbackReason.MALFORMED_PAYLOAD,
                start_time,
                ValueError(message or "NewsAPI request failed"),
            )

        raw_articles = [
            a for a in payload["articles"]
            if isinstance(a, dict) and a.get("title") and a.get("url") and a.get("title") != "[Removed]"
        ]
        articles, errors = self._normalize_all(raw_articles)
        articles, duplicates = dedupe_by_key(articles, lambda article: article.id)
        if duplicates:
            self.logger.debug(f"Dropped {duplicates} duplicate articles")

        if force_category is not None:
            articles = [a.model_copy(update={"category": force_category}) for a in articles]
        if category_filter is not None:
            articles = [a for a in articles if a.category == category_filter]

        if not articles and empty_is_fallback:
            return self._build_fallback_response(fallback(), FallbackReason.EMPTY_RESULT, start_time)

        total = payload.get("totalResults")
        if category_filter is not None or not isinstance(total, int):
            total = len(articles)
        self.logger.info(f"Fetched {len(articles)} articles")
        return self._build_success_response(articles, errors, start_time, total=total)

