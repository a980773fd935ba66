"""
Request/response schemas for the assistant endpoints.

Responsibility: Chat, translation and contact-template payloads
"""

from typing import Literal, Optional

from pydantic import Field

from civica.models.assistant import Language
from civica.models.base import CivicaModel


class ChatSessionCreate(CivicaModel):
    user_id: Optional[str] = None


class ChatRequest(CivicaModel):
    message: str = Field(min_length=1)
    session_id: Optional[str] = None
    language: Language = "en"
    context: Optional[str] = None


class TranslateRequest(CivicaModel):
    content: str = Field(min_length=1)
    target_language: Language
    context: Optional[str] = None


class ContactTemplateRequest(CivicaModel):
    bill_title: str = Field(min_length=1)
    position: Literal["support", "oppose"] = "support"
    language: Language = "en"


class ContactTemplateResponse(CivicaModel):
    template: str
