"""
News article domain model.

Responsibility: NewsArticle entity and category enum
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import Entity, OptionalUtcDatetime, UtcDatetime
from ..utils.clock import utcnow


class NewsCategory(str, Enum):
    BREAKING = "breaking"
    LOCAL = "local"
    NATIONAL = "national"
    EXPLAINER = "explainer"


class NewsArticle(Entity):
    """Civic news article, cached from NewsAPI or the fallback set."""

    title: str
    summary: Optional[str] = None
    content: Optional[str] = None
    url: str
    source: str
    author: Optional[str] = None
    published_at: OptionalUtcDatetime = None
    image_url: Optional[str] = None
    category: NewsCategory = NewsCategory.NATIONAL
    related_bills: List[str] = Field(
        default_factory=list,
        description="Bill references found in the text, e.g. ['H.R. 3684']"
    )
    tags: List[str] = Field(default_factory=list)
    created_at: UtcDatetime = Field(default_factory=utcnow)

    def recency_key(self):
        return self.published_at or self.created_at
