"""
Repository for assistant chat sessions.

Responsibility: ChatSession create/get/append
"""

from typing import Iterable, Optional

from ..table import MemoryTable
from ...errors import NotFoundError
from ...models.user import ChatMessage, ChatSession


class ChatRepository:
    def __init__(self, table: MemoryTable[ChatSession]):
        self.table = table

    def create(self, user_id: Optional[str] = None) -> ChatSession:
        return self.table.put(ChatSession(user_id=user_id))

    def get(self, session_id: str) -> Optional[ChatSession]:
        return self.table.get(session_id)

    def append_messages(self, session_id: str, messages: Iterable[ChatMessage]) -> ChatSession:
        """
        Append to a session transcript and refresh ``updated_at``.

        Raises:
            NotFoundError: Unknown session
        """
        session = self.table.get(session_id)
        if session is None:
            raise NotFoundError("Chat session", session_id)
        return self.table.replace(session, messages=[*session.messages, *messages])
