"""
Request/response schemas for community feedback endpoints.

Responsibility: Feedback listing, detail, vote and comment payloads
"""

from typing import List, Optional

from pydantic import Field

from civica.models.base import CivicaModel
from civica.models.feedback import FeedbackComment, FeedbackSubmission, VoteType


class FeedbackListResponse(CivicaModel):
    submissions: List[FeedbackSubmission]
    total: int


class FeedbackDetailResponse(CivicaModel):
    """A submission with its comment thread, oldest comment first."""

    submission: FeedbackSubmission
    comments: List[FeedbackComment]


class FeedbackVoteRequest(CivicaModel):
    vote_type: VoteType
    user_id: Optional[str] = None


class CommentCreate(CivicaModel):
    content: str = Field(min_length=1)
    user_id: Optional[str] = None
    parent_comment_id: Optional[str] = None
    is_official: bool = False
