"""
Community feedback API endpoints.

Responsibility: Feedback submission, moderation, voting and comment endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies import client_ip, get_store
from api.schemas.feedback import (
    CommentCreate,
    FeedbackDetailResponse,
    FeedbackListResponse,
    FeedbackVoteRequest,
)
from civica.db.store import MemoryStore
from civica.errors import NotFoundError
from civica.models.feedback import (
    FeedbackCategory,
    FeedbackComment,
    FeedbackCreate,
    FeedbackPatch,
    FeedbackStatus,
    FeedbackSubmission,
)

router = APIRouter()


@router.get("/feedback", response_model=FeedbackListResponse)
async def list_feedback(
    category: Optional[FeedbackCategory] = Query(None),
    status: Optional[FeedbackStatus] = Query(None),
    user_id: Optional[str] = Query(None, alias="userId"),
    is_public: Optional[bool] = Query(None, alias="isPublic"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: MemoryStore = Depends(get_store)
):
    page = store.feedback.list(
        category=category,
        status=status,
        user_id=user_id,
        is_public=is_public,
        limit=limit,
        offset=offset,
    )
    return FeedbackListResponse(submissions=page.items, total=page.total)


@router.post("/feedback", response_model=FeedbackSubmission, status_code=201)
async def create_feedback(body: FeedbackCreate, store: MemoryStore = Depends(get_store)):
    return store.feedback.create(body)


@router.get("/feedback/{feedback_id}", response_model=FeedbackDetailResponse)
async def get_feedback(feedback_id: str, store: MemoryStore = Depends(get_store)):
    submission = store.feedback.require(feedback_id)
    return FeedbackDetailResponse(
        submission=submission,
        comments=store.feedback.comments_for(feedback_id),
    )


@router.patch("/feedback/{feedback_id}", response_model=FeedbackSubmission)
async def update_feedback(
    feedback_id: str,
    body: FeedbackPatch,
    store: MemoryStore = Depends(get_store)
):
    """Moderate a submission: status, priority, visibility or an official response."""
    submission = store.feedback.update(feedback_id, body)
    if submission is None:
        raise NotFoundError("Feedback", feedback_id)
    return submission


@router.post("/feedback/{feedback_id}/vote", response_model=FeedbackSubmission)
async def vote_on_feedback(
    feedback_id: str,
    body: FeedbackVoteRequest,
    request: Request,
    store: MemoryStore = Depends(get_store)
):
    """
    Up- or down-vote a submission.

    Returns:
        The submission with recomputed tallies

    Raises:
        ConflictError: 409 when this voter already voted
    """
    return store.feedback.cast_vote(
        feedback_id,
        body.vote_type,
        user_id=body.user_id,
        ip_address=client_ip(request),
    )


@router.post("/feedback/{feedback_id}/comments", response_model=FeedbackComment, status_code=201)
async def add_comment(
    feedback_id: str,
    body: CommentCreate,
    store: MemoryStore = Depends(get_store)
):
    return store.feedback.add_comment(
        feedback_id,
        body.content,
        user_id=body.user_id,
        parent_comment_id=body.parent_comment_id,
        is_official=body.is_official,
    )
