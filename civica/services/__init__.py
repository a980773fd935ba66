"""Services package for business logic and integrations"""

from .assistant import CivicaAssistant
from .bill_service import BillSearchResult, BillService
from .news_service import NewsResult, NewsService
from .translation_service import TranslationService, translate_static

__all__ = [
    "CivicaAssistant",
    "BillSearchResult",
    "BillService",
    "NewsResult",
    "NewsService",
    "TranslationService",
    "translate_static",
]
