import asyncio

import httpx

from civica.adapters import LegislatorDirectoryAdapter, TownHallAdapter
from civica.adapters.govtrack_bills import map_status
from civica.models.adapter_models import AdapterStatus, FallbackReason
from civica.models.bill import BillStatus
from civica.models.news import NewsCategory
from civica.utils.hash_utils import url_id
from tests.conftest import make_govtrack, make_newsapi, offline


GOVTRACK_BILL = {
    "id": 812345,
    "title": "H.R. 4829: Border Water Infrastructure Improvement Act",
    "bill_type": "house_bill",
    "current_status": "referred",
    "current_status_description": "Referred to the House Committee on Natural Resources",
    "current_status_date": "2025-03-01",
    "introduced_date": "2025-02-10",
    "link": "https://www.govtrack.us/congress/bills/119/hr4829",
    "sponsor": {"name": "Rep. Tony Gonzales [R-TX23]"},
    "subjects": ["Water", "Border", "Infrastructure", "Texas", "Public works", "Rural areas"],
}


def test_map_status_uses_first_matching_code() -> None:
    assert map_status("introduced") == BillStatus.INTRODUCED
    assert map_status("pass_over:house") == BillStatus.PASSED_HOUSE
    assert map_status("enacted_signed") == BillStatus.SIGNED
    assert map_status("prov_kill:veto") == BillStatus.VETOED
    assert map_status(None) == BillStatus.ACTIVE


def test_govtrack_fetch_normalizes_objects() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={
            "meta": {"total_count": 42},
            "objects": [GOVTRACK_BILL, {"id": None, "title": ""}],
        })

    response = asyncio.run(make_govtrack(handler).fetch(query="water", limit=5, offset=10))

    assert response.status == AdapterStatus.PARTIAL_SUCCESS
    assert response.total == 42
    assert len(response.errors) == 1
    bill = response.data[0]
    assert bill.id == "govtrack-812345"
    assert bill.status == BillStatus.IN_COMMITTEE
    assert bill.progress.committee is True
    assert bill.sponsor == "Rep. Tony Gonzales [R-TX23]"
    assert bill.categories == GOVTRACK_BILL["subjects"]
    assert bill.impact_tags == GOVTRACK_BILL["subjects"][:5]
    params = seen[0].url.params
    assert seen[0].url.path == "/api/v2/bill"
    assert (params["q"], params["limit"], params["offset"]) == ("water", "5", "10")


def test_govtrack_retries_transient_errors() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(503)
        return httpx.Response(200, json={"meta": {"total_count": 1}, "objects": [GOVTRACK_BILL]})

    response = asyncio.run(make_govtrack(handler).fetch())

    assert len(calls) == 3
    assert response.status == AdapterStatus.SUCCESS


def test_govtrack_does_not_retry_client_errors() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(400)

    response = asyncio.run(make_govtrack(handler).fetch())

    assert len(calls) == 1
    assert response.is_fallback
    assert response.errors[0].retryable is False


def test_govtrack_falls_back_when_unreachable() -> None:
    response = asyncio.run(make_govtrack(offline).fetch(query="water", limit=2))

    assert response.is_fallback
    assert response.fallback_reason == FallbackReason.UPSTREAM_ERROR
    assert response.errors[0].retryable is True
    assert 0 < len(response.data) <= 2
    assert response.total >= len(response.data)
    for bill in response.data:
        assert "water" in f"{bill.title} {bill.summary}".lower()


def test_govtrack_rejects_malformed_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"unexpected": True})

    response = asyncio.run(make_govtrack(handler).fetch())

    assert response.fallback_reason == FallbackReason.MALFORMED_PAYLOAD


def test_govtrack_fetch_by_id() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/bill/812345"):
            return httpx.Response(200, json=GOVTRACK_BILL)
        return httpx.Response(404)

    adapter = make_govtrack(handler)

    assert asyncio.run(adapter.fetch_by_id("govtrack-812345")).title.startswith("H.R. 4829")
    assert asyncio.run(adapter.fetch_by_id("govtrack-1")) is None


def test_newsapi_without_key_serves_fallback_without_requests() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    response = asyncio.run(make_newsapi(handler, api_key=None).fetch(query="water"))

    assert calls == []
    assert response.fallback_reason == FallbackReason.NOT_CONFIGURED
    assert response.data


def test_newsapi_normalizes_and_filters_articles() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={
            "status": "ok",
            "totalResults": 120,
            "articles": [
                {
                    "title": "Senate advances H.R. 3684 infrastructure package",
                    "description": "Funding for roads and broadband",
                    "url": "https://news.example.com/hr3684",
                    "source": {"name": "Example News"},
                    "publishedAt": "2025-03-02T15:00:00Z",
                },
                {"title": "Duplicate", "url": "https://news.example.com/hr3684/"},
                {"title": "[Removed]", "url": "https://removed.example.com"},
                {"title": "No link", "url": None},
            ],
        })

    response = asyncio.run(make_newsapi(handler).fetch(query="infrastructure"))

    assert response.status == AdapterStatus.SUCCESS
    assert response.total == 120
    assert len(response.data) == 1
    article = response.data[0]
    assert article.id == url_id("https://news.example.com/hr3684")
    assert article.related_bills == ["H.R. 3684"]
    assert article.source == "Example News"
    assert "infrastructure" in article.tags
    params = seen[0].url.params
    assert params["apiKey"] == "test-key"
    assert params["q"].startswith("(infrastructure)")


def test_newsapi_error_status_is_malformed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "error", "message": "apiKeyInvalid"})

    response = asyncio.run(make_newsapi(handler).fetch())

    assert response.fallback_reason == FallbackReason.MALFORMED_PAYLOAD
    assert "apiKeyInvalid" in response.errors[0].message


def test_breaking_news_is_topped_up_with_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok", "totalResults": 1, "articles": [
            {"title": "Congress averts shutdown", "url": "https://news.example.com/shutdown"},
        ]})

    response = asyncio.run(make_newsapi(handler).fetch_breaking())

    assert not response.is_fallback
    assert response.data[0].url == "https://news.example.com/shutdown"
    assert len(response.data) >= 3
    assert len({a.url for a in response.data}) == len(response.data)


def test_local_news_falls_back_when_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok", "totalResults": 0, "articles": []})

    response = asyncio.run(make_newsapi(handler).fetch_local("San Antonio, Texas"))

    assert response.fallback_reason == FallbackReason.EMPTY_RESULT
    assert response.data
    assert all(a.category == NewsCategory.LOCAL for a in response.data)


def test_local_news_is_tagged_local() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert '"Uvalde, Texas"' in request.url.params["q"]
        return httpx.Response(200, json={"status": "ok", "totalResults": 1, "articles": [
            {"title": "Breaking: school board vote", "url": "https://news.example.com/uvalde"},
        ]})

    response = asyncio.run(make_newsapi(handler).fetch_local("Uvalde, Texas"))

    assert [a.category for a in response.data] == [NewsCategory.LOCAL]


def test_legislator_directory_filters() -> None:
    adapter = LegislatorDirectoryAdapter()

    district = asyncio.run(adapter.fetch(state="tx", district="TX-23"))
    federal = asyncio.run(adapter.fetch(level="federal"))

    ids = {legislator.id for legislator in district.data}
    assert "tony-gonzales-tx23" in ids
    assert "pete-flores-tx19" not in ids
    assert district.fallback_reason == FallbackReason.STATIC_SOURCE
    assert {legislator.level for legislator in federal.data} == {"federal"}


def test_town_halls_filter_by_level_in_date_order() -> None:
    response = asyncio.run(TownHallAdapter().fetch(level="federal"))

    assert [event.id for event in response.data] == [
        "tony-gonzales-th-feb2025",
        "tony-gonzales-th-del-rio-mar2025",
    ]
