import asyncio
import json

import httpx
import pytest

from civica.errors import AssistantUnavailableError, ValidationError
from civica.services import TranslationService, translate_static
from tests.conftest import make_assistant, openai_reply


def test_disabled_assistant_is_unavailable() -> None:
    assistant = make_assistant(api_key=None)

    assert assistant.enabled is False
    with pytest.raises(AssistantUnavailableError):
        asyncio.run(assistant.chat("What is a filibuster?"))
    assert asyncio.run(assistant.translate("Vote", "es")) == "Vote"


def test_chat_sends_json_request_and_parses_reply() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return openai_reply(json.dumps({
            "response": "Un filibustero retrasa una votación.",
            "confidence": 1.7,
            "sources": ["senate.gov"],
        }))

    reply = asyncio.run(make_assistant(handler).chat("What is a filibuster?", language="es"))

    assert reply.response.startswith("Un filibustero")
    assert reply.confidence == 1.0
    assert reply.sources == ["senate.gov"]
    request = seen[0]
    body = json.loads(request.content)
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert body["response_format"] == {"type": "json_object"}
    assert "Respond in Spanish" in body["messages"][0]["content"]
    assert body["messages"][1] == {"role": "user", "content": "What is a filibuster?"}


def test_malformed_json_reply_is_unavailable() -> None:
    assistant = make_assistant(lambda request: openai_reply("not json"))

    with pytest.raises(AssistantUnavailableError):
        asyncio.run(assistant.chat("hello"))


def test_upstream_error_is_unavailable() -> None:
    assistant = make_assistant(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(AssistantUnavailableError):
        asyncio.run(assistant.summarize_bill("A bill to fund water systems"))
    assert asyncio.run(assistant.translate("Vote", "es")) == "Vote"


def test_summarize_bill_reads_camel_case_fields() -> None:
    assistant = make_assistant(lambda request: openai_reply(json.dumps({
        "summary": "Funds border water systems.",
        "keyProvisions": ["Grants for Del Rio", "Drought planning"],
        "potentialImpact": "Safer drinking water",
        "readingLevel": "9th grade",
    })))

    summary = asyncio.run(assistant.summarize_bill("H.R. 4829 text"))

    assert summary.key_provisions == ["Grants for Del Rio", "Drought planning"]
    assert summary.potential_impact == "Safer drinking water"


def test_contact_template_is_stripped() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return openai_reply("\n Dear [Representative Name],\n")

    template = asyncio.run(make_assistant(handler).contact_template("H.R. 1", "oppose"))

    assert template == "Dear [Representative Name],"
    assert "response_format" not in seen[0]
    assert "Express oppose for: H.R. 1" in seen[0]["messages"][1]["content"]


def test_static_translation_replaces_known_phrases() -> None:
    assert translate_static("Community Polls", "es") == "Encuestas de la Comunidad"
    assert translate_static("recent bills and more", "es") == "Proyectos de Ley Recientes and more"
    assert translate_static("Últimas Noticias", "en") == "Breaking News"
    assert translate_static("Overall", "es") == "Overall"


def test_translation_service_falls_back_to_phrase_table() -> None:
    assistant = make_assistant(lambda request: httpx.Response(503))

    result = asyncio.run(TranslationService(assistant).translate("Community Polls", "es"))

    assert result.translated_content == "Encuestas de la Comunidad"
    assert (result.source_language, result.target_language) == ("en", "es")


def test_translation_service_prefers_assistant() -> None:
    assistant = make_assistant(lambda request: openai_reply("Votar ahora"))

    result = asyncio.run(TranslationService(assistant).translate("Vote now", "es"))

    assert result.translated_content == "Votar ahora"


def test_translation_service_rejects_bad_input() -> None:
    service = TranslationService()

    with pytest.raises(ValidationError):
        asyncio.run(service.translate("", "es"))
    with pytest.raises(ValidationError):
        asyncio.run(service.translate("Vote", "fr"))
