from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from tenacity import wait_none

from api.main import create_app
from civica.adapters import GovTrackBillsAdapter, NewsAPIAdapter
from civica.config import Settings, StoreConfig
from civica.db.store import MemoryStore
from civica.services import CivicaAssistant

Handler = Callable[[httpx.Request], httpx.Response]


def mock_client(handler: Handler) -> httpx.AsyncClient:
    """HTTP client that answers every request with ``handler`` instead of the network."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network disabled in tests", request=request)


def make_govtrack(handler: Handler = offline) -> GovTrackBillsAdapter:
    return GovTrackBillsAdapter(client=mock_client(handler), retry_wait=wait_none())


def make_newsapi(handler: Handler = offline, api_key: Optional[str] = "test-key") -> NewsAPIAdapter:
    return NewsAPIAdapter(api_key=api_key, client=mock_client(handler), retry_wait=wait_none())


def make_assistant(handler: Handler = offline, api_key: Optional[str] = "sk-test") -> CivicaAssistant:
    return CivicaAssistant(api_key=api_key, client=mock_client(handler))


def openai_reply(content: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def build_client(store: MemoryStore, **overrides) -> TestClient:
    """TestClient over an app wired to ``store`` with offline adapters unless overridden."""
    overrides.setdefault("settings", Settings(store=StoreConfig(seed_data=False)))
    overrides.setdefault("govtrack", make_govtrack())
    overrides.setdefault("newsapi", make_newsapi(api_key=None))
    overrides.setdefault("assistant", make_assistant(api_key=None))
    return TestClient(create_app(store=store, **overrides))


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def seeded_store() -> MemoryStore:
    return MemoryStore.seeded()


@pytest.fixture
def client(store: MemoryStore) -> TestClient:
    return build_client(store)
