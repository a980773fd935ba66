"""
Repository for community feedback, feedback votes and comments.

Responsibility: Feedback CRUD, moderation, voting and comment threads
"""

from typing import List, Optional
import logging

from ..query import equals_ci, newest_first, normalize_ip, oldest_first, voter_identity
from ..table import MemoryTable, Page, paginate
from ...errors import NotFoundError, ValidationError
from ...models.feedback import (
    FeedbackCategory,
    FeedbackComment,
    FeedbackCreate,
    FeedbackPatch,
    FeedbackStatus,
    FeedbackSubmission,
    FeedbackVote,
    VoteType,
)
from ...utils.clock import utcnow

logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_LIMIT = 10


class FeedbackRepository:
    """Repository for feedback submissions and their child records."""

    def __init__(
        self,
        submissions: MemoryTable[FeedbackSubmission],
        votes: MemoryTable[FeedbackVote],
        comments: MemoryTable[FeedbackComment]
    ):
        self.submissions = submissions
        self.votes = votes
        self.comments = comments

    def create(self, data: FeedbackCreate) -> FeedbackSubmission:
        submission = FeedbackSubmission(**data.model_dump())
        self.submissions.put(submission)
        logger.info(f"Received feedback {submission.id} ({submission.category.value})")
        return submission

    def get(self, feedback_id: str) -> Optional[FeedbackSubmission]:
        return self.submissions.get(feedback_id)

    def require(self, feedback_id: str) -> FeedbackSubmission:
        submission = self.submissions.get(feedback_id)
        if submission is None:
            raise NotFoundError("Feedback", feedback_id)
        return submission

    def list(
        self,
        category: Optional[FeedbackCategory | str] = None,
        status: Optional[FeedbackStatus | str] = None,
        user_id: Optional[str] = None,
        is_public: Optional[bool] = None,
        limit: int = DEFAULT_FEEDBACK_LIMIT,
        offset: int = 0
    ) -> Page[FeedbackSubmission]:
        category_value = FeedbackCategory(category) if category else None
        status_value = FeedbackStatus(status) if status else None

        def matches(submission: FeedbackSubmission) -> bool:
            if category_value and submission.category != category_value:
                return False
            if status_value and submission.status != status_value:
                return False
            if user_id and not equals_ci(submission.user_id, user_id):
                return False
            if is_public is not None and submission.is_public != is_public:
                return False
            return True

        submissions = newest_first(self.submissions.where(matches), lambda s: s.created_at)
        return paginate(submissions, limit, offset)

    def update(self, feedback_id: str, patch: FeedbackPatch) -> Optional[FeedbackSubmission]:
        """
        Apply a moderation patch.

        Setting ``admin_response`` stamps ``responded_at`` and moves the
        submission to ``responded`` unless the patch sets a status itself.
        """
        current = self.submissions.get(feedback_id)
        if current is None:
            return None
        changes = patch.changes()
        if changes.get("admin_response"):
            changes["responded_at"] = utcnow()
            changes.setdefault("status", FeedbackStatus.RESPONDED)
        return self.submissions.replace(current, **changes)

    def delete(self, feedback_id: str) -> bool:
        """Delete a submission with its votes and comments."""
        if not self.submissions.delete(feedback_id):
            return False
        self.votes.delete_where(lambda vote: vote.feedback_id == feedback_id)
        self.comments.delete_where(lambda comment: comment.feedback_id == feedback_id)
        return True

    def cast_vote(
        self,
        feedback_id: str,
        vote_type: VoteType | str,
        user_id: Optional[str] = None,
        ip_address: Optional[str] = None
    ) -> FeedbackSubmission:
        """
        Record an up/down vote and recompute the submission's tallies.

        Returns:
            The submission with refreshed ``upvotes``/``downvotes``

        Raises:
            NotFoundError: Unknown submission
            ValidationError: No voter identity
            ConflictError: This voter already voted on this submission
        """
        submission = self.require(feedback_id)
        address = normalize_ip(ip_address)
        identity = voter_identity(user_id, address)
        vote = FeedbackVote(
            feedback_id=feedback_id,
            vote_type=VoteType(vote_type),
            user_id=user_id,
            ip_address=address,
        )
        self.votes.insert_if_absent(
            (feedback_id, identity),
            vote,
            message="You have already voted on this feedback",
        )

        cast = self.votes.where(lambda v: v.feedback_id == feedback_id)
        upvotes = sum(1 for v in cast if v.vote_type == VoteType.UPVOTE)
        return self.submissions.replace(
            submission,
            upvotes=upvotes,
            downvotes=len(cast) - upvotes,
        )

    def add_comment(
        self,
        feedback_id: str,
        content: str,
        user_id: Optional[str] = None,
        parent_comment_id: Optional[str] = None,
        is_official: bool = False
    ) -> FeedbackComment:
        """
        Add a comment, optionally as a reply.

        Raises:
            NotFoundError: Unknown submission
            ValidationError: Parent is not a comment on the same submission
        """
        self.require(feedback_id)
        if parent_comment_id:
            parent = self.comments.get(parent_comment_id)
            if parent is None or parent.feedback_id != feedback_id:
                raise ValidationError("Parent comment does not belong to this feedback")
        comment = FeedbackComment(
            feedback_id=feedback_id,
            content=content,
            user_id=user_id,
            parent_comment_id=parent_comment_id,
            is_official=is_official,
        )
        return self.comments.put(comment)

    def comments_for(self, feedback_id: str) -> List[FeedbackComment]:
        """Comments on a submission, oldest first."""
        return oldest_first(
            self.comments.where(lambda comment: comment.feedback_id == feedback_id),
            lambda comment: comment.created_at,
        )
