"""
Civica AI assistant backed by OpenAI chat completions.

Talks to the ``/chat/completions`` endpoint over httpx. Chat and bill
summaries request ``response_format: json_object`` and are validated into
pydantic models. Without an API key the assistant is disabled: chat,
summaries and contact templates raise AssistantUnavailableError, while
translation returns its input unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..errors import AssistantUnavailableError
from ..models.assistant import BillSummary, ChatReply, Language

DEFAULT_MODEL = "gpt-4o"
DEFAULT_BASE_URL = "https://api.openai.com/v1"

LANGUAGE_NAMES = {"en": "English", "es": "Spanish"}

logger = logging.getLogger(__name__)


SUMMARY_SYSTEM_PROMPT = (
    "You are an expert in translating complex legislation into simple, "
    "accessible language for citizens."
)

SUMMARY_PROMPT = """Summarize the following bill in simple, clear {language}, at a 9th-grade reading level, including:
1. Purpose
2. Key Provisions
3. Potential Impact

Return the response as JSON in this format:
{{
  "summary": "Brief overview of the bill",
  "keyProvisions": ["provision 1", "provision 2", "provision 3"],
  "potentialImpact": "How this affects citizens",
  "readingLevel": "9th grade"
}}

Bill text:
{text}"""

CHAT_SYSTEM_PROMPT = """You are Civica, an AI assistant helping citizens understand legislation and civic processes.

Your role:
- Explain bills, laws, and civic processes in simple terms
- Provide accurate, non-partisan information
- Help users understand how government works
- Always cite your sources when referencing specific bills or data
- Respond in {language}
- Keep responses at a 9th-grade reading level

Context: {context}

Always respond in JSON format:
{{
  "response": "Your helpful response",
  "confidence": 0.95,
  "sources": ["source1", "source2"]
}}"""

TRANSLATE_SYSTEM_PROMPT = "You are a professional translator specializing in civic and political content."

TRANSLATE_PROMPT = """Translate the following text to {language}.
Maintain the same tone and meaning. Return only the translated text:

{text}"""

CONTACT_SYSTEM_PROMPT = "You are an expert in civic engagement and constituent communication."

CONTACT_PROMPT = """Generate a professional email template for a constituent to contact their representative about a bill.

Requirements:
- Write in {language}
- Express {position} for: {bill_title}
- Professional but personal tone
- Include placeholders for [Representative Name], [Your Name], [Your Address]
- About 150-200 words
- Include specific reasons and impact on constituents

Return only the email template text."""


def language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, "English")


class CivicaAssistant:
    """
    Chat, summarization, translation and letter drafting.

    Example:
        assistant = CivicaAssistant(api_key="sk-...")
        reply = await assistant.chat("What does H.R. 1 do?", language="es")
        await assistant.close()
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def enabled(self) -> bool:
        """Return ``True`` when an API key is configured."""
        return bool(self.api_key)

    def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Cleanup underlying HTTP client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _complete(self, messages: List[Dict[str, str]], *, json_mode: bool = False) -> str:
        """
        Run one chat completion and return the message content.

        Raises:
            AssistantUnavailableError: Not configured, HTTP failure or empty reply
        """
        if not self.enabled:
            raise AssistantUnavailableError("AI assistant is not configured")

        payload: Dict[str, Any] = {"model": self.model, "messages": messages}
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client_instance().post(self.endpoint, headers=headers, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "OpenAI API error (%s): %s",
                exc.response.status_code,
                exc.response.text[:200],
            )
            raise AssistantUnavailableError("AI assistant request failed") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise AssistantUnavailableError("AI assistant request failed") from exc

        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AssistantUnavailableError("AI assistant returned an empty response") from exc
        if not content:
            raise AssistantUnavailableError("AI assistant returned an empty response")
        return content

    async def _complete_json(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        content = await self._complete(messages, json_mode=True)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise AssistantUnavailableError("AI assistant returned malformed JSON") from exc
        if not isinstance(data, dict):
            raise AssistantUnavailableError("AI assistant returned malformed JSON")
        return data

    async def chat(self, message: str, context: str = "", language: Language = "en") -> ChatReply:
        """
        Answer a civic question.

        Raises:
            AssistantUnavailableError: Not configured or upstream failure
        """
        data = await self._complete_json([
            {
                "role": "system",
                "content": CHAT_SYSTEM_PROMPT.format(language=language_name(language), context=context),
            },
            {"role": "user", "content": message},
        ])
        try:
            return ChatReply.model_validate(data)
        except PydanticValidationError as exc:
            raise AssistantUnavailableError("AI assistant returned an incomplete answer") from exc

    async def summarize_bill(self, text: str, language: Language = "en") -> BillSummary:
        """
        Summarize bill text at a 9th-grade reading level.

        Raises:
            AssistantUnavailableError: Not configured or upstream failure
        """
        data = await self._complete_json([
            {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
            {"role": "user", "content": SUMMARY_PROMPT.format(language=language_name(language), text=text)},
        ])
        try:
            return BillSummary.model_validate(data)
        except PydanticValidationError as exc:
            raise AssistantUnavailableError("AI assistant returned an incomplete summary") from exc

    async def translate(self, text: str, target_language: Language) -> str:
        """Translate ``text``; returns it unchanged when translation fails."""
        if not text or not self.enabled:
            return text
        try:
            translated = await self._complete([
                {"role": "system", "content": TRANSLATE_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": TRANSLATE_PROMPT.format(language=language_name(target_language), text=text),
                },
            ])
        except AssistantUnavailableError as exc:
            logger.warning("Translation failed, returning original text: %s", exc.message)
            return text
        return translated.strip()

    async def contact_template(
        self,
        bill_title: str,
        position: str,
        language: Language = "en",
    ) -> str:
        """
        Draft a 150-200 word letter supporting or opposing a bill.

        Raises:
            AssistantUnavailableError: Not configured or upstream failure
        """
        content = await self._complete([
            {"role": "system", "content": CONTACT_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": CONTACT_PROMPT.format(
                    language=language_name(language),
                    position="support" if position == "support" else "oppose",
                    bill_title=bill_title,
                ),
            },
        ])
        return content.strip()
