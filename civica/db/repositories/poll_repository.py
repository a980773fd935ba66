"""
Repository for community polls and their votes.

Vote de-duplication is a single ``insert_if_absent`` on the key
(poll_id, voter identity), so two concurrent requests from the same voter
cannot both be recorded.

Responsibility: Poll CRUD, voting and result tallies
"""

from typing import List, Optional
import logging

from ..query import contains, equals_ci, newest_first, normalize_ip, voter_identity
from ..table import MemoryTable, Page, paginate
from ...errors import NotFoundError, ValidationError
from ...models.poll import Poll, PollCreate, PollOptionResult, PollPatch, PollResults, PollVote

logger = logging.getLogger(__name__)

DEFAULT_POLL_LIMIT = 10


class PollRepository:
    """
    Repository for polls.

    Example:
        repo = PollRepository(MemoryTable("poll"), MemoryTable("poll_vote"))
        poll = repo.create(PollCreate(title="Park hours", options=["Yes", "No"]))
        repo.cast_vote(poll.id, [0], ip_address="1.2.3.4")
        repo.results(poll.id)
    """

    def __init__(self, polls: MemoryTable[Poll], votes: MemoryTable[PollVote]):
        self.polls = polls
        self.votes = votes

    def create(self, data: PollCreate) -> Poll:
        poll = Poll(**data.model_dump())
        self.polls.put(poll)
        logger.info(f"Created poll {poll.id}: {poll.title}")
        return poll

    def get(self, poll_id: str) -> Optional[Poll]:
        return self.polls.get(poll_id)

    def require(self, poll_id: str) -> Poll:
        poll = self.polls.get(poll_id)
        if poll is None:
            raise NotFoundError("Poll", poll_id)
        return poll

    def list(
        self,
        category: Optional[str] = None,
        location: Optional[str] = None,
        district: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = DEFAULT_POLL_LIMIT,
        offset: int = 0
    ) -> Page[Poll]:
        """
        List polls newest first.

        Args:
            category: Exact category (case-insensitive)
            location: Substring of the poll location
            district: Exact district
            is_active: Filter on the active flag
            limit: Maximum results
            offset: Results to skip
        """
        def matches(poll: Poll) -> bool:
            if category and not equals_ci(poll.category, category):
                return False
            if location and not contains(poll.location, location):
                return False
            if district and not equals_ci(poll.district, district):
                return False
            if is_active is not None and poll.is_active != is_active:
                return False
            return True

        polls = newest_first(self.polls.where(matches), lambda poll: poll.created_at)
        return paginate(polls, limit, offset)

    def update(self, poll_id: str, patch: PollPatch) -> Optional[Poll]:
        return self.polls.patch(poll_id, patch)

    def delete(self, poll_id: str) -> bool:
        """Delete a poll and every vote cast on it."""
        if not self.polls.delete(poll_id):
            return False
        removed = self.votes.delete_where(lambda vote: vote.poll_id == poll_id)
        logger.info(f"Deleted poll {poll_id} and {removed} votes")
        return True

    def cast_vote(
        self,
        poll_id: str,
        selected_options: List[int],
        user_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> PollVote:
        """
        Record one ballot.

        Raises:
            NotFoundError: Unknown poll
            ValidationError: Poll closed, bad selection, or no voter identity
            ConflictError: This voter already voted on this poll
        """
        poll = self.require(poll_id)
        if not poll.is_open():
            raise ValidationError("Poll is closed")
        self._check_selection(poll, selected_options)

        address = normalize_ip(ip_address)
        identity = voter_identity(user_id, address)
        vote = PollVote(
            poll_id=poll_id,
            selected_options=selected_options,
            user_id=user_id,
            ip_address=address,
            user_agent=user_agent,
        )
        self.votes.insert_if_absent(
            (poll_id, identity),
            vote,
            message="You have already voted on this poll",
        )
        logger.debug(f"Recorded vote on poll {poll_id} from {identity}")
        return vote

    @staticmethod
    def _check_selection(poll: Poll, selected_options: List[int]) -> None:
        if not selected_options:
            raise ValidationError("Select at least one option")
        if len(set(selected_options)) != len(selected_options):
            raise ValidationError("Duplicate option selected")
        if not poll.allow_multiple_choice and len(selected_options) != 1:
            raise ValidationError("This poll accepts exactly one option")
        for index in selected_options:
            if index < 0 or index >= len(poll.options):
                raise ValidationError(f"Invalid option index: {index}")

    def votes_for(self, poll_id: str) -> List[PollVote]:
        return self.votes.where(lambda vote: vote.poll_id == poll_id)

    def results(self, poll_id: str) -> PollResults:
        """
        Tally selections per option.

        Percentages are of total selections, rounded to one decimal.

        Raises:
            NotFoundError: Unknown poll
        """
        poll = self.require(poll_id)
        ballots = self.votes_for(poll_id)

        counts = [0] * len(poll.options)
        for ballot in ballots:
            for index in ballot.selected_options:
                if 0 <= index < len(counts):
                    counts[index] += 1
        total = sum(counts)

        results = [
            PollOptionResult(
                option_index=index,
                option=option,
                count=counts[index],
                percentage=round(counts[index] / total * 100, 1) if total else 0.0,
            )
            for index, option in enumerate(poll.options)
        ]
        return PollResults(
            poll_id=poll_id,
            total_votes=total,
            total_voters=len(ballots),
            results=results,
        )
