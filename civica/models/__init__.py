"""
Models package for Civica.

This package contains all Pydantic models for:
- Adapter responses and metadata
- Domain entities (bills, legislators, news, polls, feedback, events, users)
- Create and patch payloads for those entities
"""

from .adapter_models import (
    AdapterStatus,
    AdapterError,
    AdapterMetrics,
    AdapterResponse,
    FallbackReason,
)
from .bill import Bill, BillPatch, BillProgress, BillStatus, Jurisdiction, VotingRecord
from .legislator import Legislator, LegislatorActivity, LegislatorPatch
from .news import NewsArticle, NewsCategory
from .poll import Poll, PollCreate, PollPatch, PollVote, PollOptionResult, PollResults
from .feedback import (
    FeedbackCategory,
    FeedbackComment,
    FeedbackCreate,
    FeedbackPatch,
    FeedbackPriority,
    FeedbackStatus,
    FeedbackSubmission,
    FeedbackVote,
    VoteType,
)
from .event import CivicEvent, EventLevel, EventRsvp, RsvpCreate, RsvpPatch, RsvpStatus
from .assistant import BillSummary, ChatReply, Language, Translation
from .user import (
    Bookmark,
    BookmarkCreate,
    BookmarkItemType,
    ChatMessage,
    ChatSession,
    User,
    UserCreate,
    UserLocation,
    UserPatch,
)

__all__ = [
    "AdapterStatus",
    "AdapterError",
    "AdapterMetrics",
    "AdapterResponse",
    "FallbackReason",
    "Bill",
    "BillPatch",
    "BillProgress",
    "BillStatus",
    "Jurisdiction",
    "VotingRecord",
    "Legislator",
    "LegislatorActivity",
    "LegislatorPatch",
    "NewsArticle",
    "NewsCategory",
    "Poll",
    "PollCreate",
    "PollPatch",
    "PollVote",
    "PollOptionResult",
    "PollResults",
    "FeedbackCategory",
    "FeedbackComment",
    "FeedbackCreate",
    "FeedbackPatch",
    "FeedbackPriority",
    "FeedbackStatus",
    "FeedbackSubmission",
    "FeedbackVote",
    "VoteType",
    "CivicEvent",
    "EventLevel",
    "EventRsvp",
    "RsvpCreate",
    "RsvpPatch",
    "RsvpStatus",
    "Bookmark",
    "BookmarkCreate",
    "BookmarkItemType",
    "ChatMessage",
    "ChatSession",
    "User",
    "UserCreate",
    "UserLocation",
    "UserPatch",
    "BillSummary",
    "ChatReply",
    "Language",
    "Translation",
]
