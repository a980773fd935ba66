"""
User, bookmark and chat session models.

Responsibility: Account-scoped entities
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field

from .base import CivicaModel, Entity, Patch, TimestampedEntity, UtcDatetime
from ..utils.clock import utcnow


class UserLocation(CivicaModel):
    city: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class UserCreate(CivicaModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8)
    email: Optional[str] = None
    preferred_language: Literal["en", "es"] = "en"
    location: Optional[UserLocation] = None


class User(Entity):
    """Stored account. Never serialized with ``password_hash``."""

    username: str
    password_hash: str = Field(exclude=True)
    email: Optional[str] = None
    preferred_language: Literal["en", "es"] = "en"
    location: Optional[UserLocation] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)


class UserPatch(Patch):
    email: Optional[str] = None
    preferred_language: Optional[Literal["en", "es"]] = None
    location: Optional[UserLocation] = None


class BookmarkItemType(str, Enum):
    BILL = "bill"
    LEGISLATOR = "legislator"
    ARTICLE = "article"


class BookmarkCreate(CivicaModel):
    user_id: str
    item_type: BookmarkItemType
    item_id: str


class Bookmark(BookmarkCreate, Entity):
    created_at: UtcDatetime = Field(default_factory=utcnow)


class ChatMessage(CivicaModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: UtcDatetime = Field(default_factory=utcnow)
    language: Optional[str] = None


class ChatSession(TimestampedEntity):
    """Assistant conversation transcript. Messages are append-only."""

    user_id: Optional[str] = None
    messages: List[ChatMessage] = Field(default_factory=list)
