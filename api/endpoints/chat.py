"""
Assistant API endpoints.

Chat sessions keep the transcript; chat, translation and contact templates
go through the OpenAI-backed assistant.

Responsibility: Chat, translate and contact-template endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_assistant, get_store, get_translation_service
from api.schemas.chat import (
    ChatRequest,
    ChatSessionCreate,
    ContactTemplateRequest,
    ContactTemplateResponse,
    TranslateRequest,
)
from civica.db.store import MemoryStore
from civica.errors import NotFoundError
from civica.models.assistant import ChatReply, Translation
from civica.models.user import ChatMessage, ChatSession
from civica.services import CivicaAssistant, TranslationService

router = APIRouter()


@router.post("/chat/sessions", response_model=ChatSession, status_code=201)
async def create_chat_session(
    body: Optional[ChatSessionCreate] = None,
    store: MemoryStore = Depends(get_store)
):
    return store.chats.create(user_id=body.user_id if body else None)


@router.get("/chat/sessions/{session_id}", response_model=ChatSession)
async def get_chat_session(session_id: str, store: MemoryStore = Depends(get_store)):
    session = store.chats.get(session_id)
    if session is None:
        raise NotFoundError("Chat session", session_id)
    return session


@router.post("/chat", response_model=ChatReply)
async def chat(
    body: ChatRequest,
    store: MemoryStore = Depends(get_store),
    assistant: CivicaAssistant = Depends(get_assistant)
):
    """
    Ask the assistant a question.

    With a ``sessionId`` the question and answer are appended to that
    session's transcript.

    Raises:
        NotFoundError: 404 for an unknown session
        AssistantUnavailableError: 503 when the assistant is not configured
    """
    if body.session_id and store.chats.get(body.session_id) is None:
        raise NotFoundError("Chat session", body.session_id)

    reply = await assistant.chat(body.message, body.context or "", body.language)

    if body.session_id:
        store.chats.append_messages(body.session_id, [
            ChatMessage(role="user", content=body.message, language=body.language),
            ChatMessage(role="assistant", content=reply.response, language=body.language),
        ])
    return reply


@router.post("/translate", response_model=Translation)
async def translate(
    body: TranslateRequest,
    service: TranslationService = Depends(get_translation_service)
):
    return await service.translate(body.content, body.target_language, body.context)


@router.post("/contact-template", response_model=ContactTemplateResponse)
async def contact_template(
    body: ContactTemplateRequest,
    assistant: CivicaAssistant = Depends(get_assistant)
):
    """Draft a letter to a representative supporting or opposing a bill."""
    template = await assistant.contact_template(body.bill_title, body.position, body.language)
    return ContactTemplateResponse(template=template)
