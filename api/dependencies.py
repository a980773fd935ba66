"""
FastAPI dependencies.

Everything a route needs is read from ``app.state``, where ``create_app``
puts the store, settings, adapters and services. Tests swap any of them by
passing their own to ``create_app``.

Responsibility: Request-scoped access to application state
"""

from typing import Optional

from fastapi import Request

from civica.config import Settings
from civica.db.store import MemoryStore
from civica.services import BillService, CivicaAssistant, NewsService, TranslationService


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_bill_service(request: Request) -> BillService:
    return request.app.state.bill_service


def get_news_service(request: Request) -> NewsService:
    return request.app.state.news_service


def get_assistant(request: Request) -> CivicaAssistant:
    return request.app.state.assistant


def get_translation_service(request: Request) -> TranslationService:
    return request.app.state.translation_service


def client_ip(request: Request) -> Optional[str]:
    """
    Caller address used by the vote guards.

    The first ``X-Forwarded-For`` hop wins over the socket peer, since the
    service normally runs behind a proxy.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is not None:
        return request.client.host
    return None
