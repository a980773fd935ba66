"""
Community feedback domain models.

Responsibility: Feedback submissions, votes and threaded comments
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CivicaModel, Entity, OptionalUtcDatetime, Patch, TimestampedEntity, UtcDatetime
from ..utils.clock import utcnow


class FeedbackCategory(str, Enum):
    BILL_FEEDBACK = "bill_feedback"
    GENERAL = "general"
    FEATURE_REQUEST = "feature_request"
    ISSUE_REPORT = "issue_report"


class FeedbackStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESPONDED = "responded"
    CLOSED = "closed"


class FeedbackPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class VoteType(str, Enum):
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class FeedbackCreate(CivicaModel):
    """Request body for a new submission."""

    title: str = Field(min_length=5)
    content: str = Field(min_length=20)
    category: FeedbackCategory = FeedbackCategory.GENERAL
    priority: FeedbackPriority = FeedbackPriority.MEDIUM
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    related_bill_id: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_public: bool = True


class FeedbackSubmission(FeedbackCreate, TimestampedEntity):
    """
    Stored submission.

    ``upvotes``/``downvotes`` are denormalized counters recomputed from the
    vote table on every vote insert.
    """

    status: FeedbackStatus = FeedbackStatus.PENDING
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    admin_response: Optional[str] = None
    responded_at: OptionalUtcDatetime = None


class FeedbackPatch(Patch):
    """Moderation fields."""
    status: Optional[FeedbackStatus] = None
    priority: Optional[FeedbackPriority] = None
    tags: Optional[List[str]] = None
    is_public: Optional[bool] = None
    admin_response: Optional[str] = None


class FeedbackVote(Entity):
    feedback_id: str
    vote_type: VoteType
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)


class FeedbackComment(Entity):
    feedback_id: str
    content: str = Field(min_length=1)
    user_id: Optional[str] = None
    parent_comment_id: Optional[str] = None
    is_official: bool = False
    created_at: UtcDatetime = Field(default_factory=utcnow)
