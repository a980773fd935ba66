"""API request and response schemas."""

from api.schemas.bills import BillListResponse, SummarizeRequest
from api.schemas.chat import (
    ChatRequest,
    ChatSessionCreate,
    ContactTemplateRequest,
    ContactTemplateResponse,
    TranslateRequest,
)
from api.schemas.events import EventListResponse, ReminderResponse, RsvpListResponse
from api.schemas.feedback import (
    CommentCreate,
    FeedbackDetailResponse,
    FeedbackListResponse,
    FeedbackVoteRequest,
)
from api.schemas.legislators import LegislatorListResponse
from api.schemas.news import ArticleListResponse
from api.schemas.polls import PollListResponse, VoteRequest
from api.schemas.users import LoginRequest

__all__ = [
    "BillListResponse",
    "SummarizeRequest",
    "ChatRequest",
    "ChatSessionCreate",
    "ContactTemplateRequest",
    "ContactTemplateResponse",
    "TranslateRequest",
    "EventListResponse",
    "ReminderResponse",
    "RsvpListResponse",
    "CommentCreate",
    "FeedbackDetailResponse",
    "FeedbackListResponse",
    "FeedbackVoteRequest",
    "LegislatorListResponse",
    "ArticleListResponse",
    "PollListResponse",
    "VoteRequest",
    "LoginRequest",
]
