"""
Repository package for data access operations.

Implements repository pattern over the in-memory tables.
"""

from .bill_repository import BillRepository
from .bookmark_repository import BookmarkRepository
from .chat_repository import ChatRepository
from .event_repository import EventRepository
from .feedback_repository import FeedbackRepository
from .legislator_repository import LegislatorRepository
from .news_repository import NewsRepository
from .poll_repository import PollRepository
from .user_repository import UserRepository, hash_password, verify_password

__all__ = [
    "BillRepository",
    "BookmarkRepository",
    "ChatRepository",
    "EventRepository",
    "FeedbackRepository",
    "LegislatorRepository",
    "NewsRepository",
    "PollRepository",
    "UserRepository",
    "hash_password",
    "verify_password",
]
