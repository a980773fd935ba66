"""
Community poll domain models.

A poll's options are addressed by index; a vote is the list of selected
indices. Results are tallied from votes on read.

Responsibility: Poll, PollVote and poll result models
"""

from typing import List, Optional

from pydantic import Field, field_validator

from .base import CivicaModel, Entity, OptionalUtcDatetime, Patch, TimestampedEntity, UtcDatetime
from ..utils.clock import utcnow


class PollCreate(CivicaModel):
    """Request body for creating a poll."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    options: List[str] = Field(min_length=1, description="Answer choices, addressed by index")
    category: str = Field(default="local", description="local, state or national")
    location: Optional[str] = None
    district: Optional[str] = None
    allow_multiple_choice: bool = False
    is_active: bool = True
    end_date: OptionalUtcDatetime = None
    created_by: Optional[str] = None
    related_bill_id: Optional[str] = None

    @field_validator("options")
    @classmethod
    def options_not_blank(cls, v: List[str]) -> List[str]:
        cleaned = [option.strip() for option in v]
        if any(not option for option in cleaned):
            raise ValueError("Poll options must not be blank")
        return cleaned


class Poll(PollCreate, TimestampedEntity):
    """Stored poll."""

    def is_open(self, now=None) -> bool:
        """Active and not past its end date."""
        if not self.is_active:
            return False
        if self.end_date is None:
            return True
        return (now or utcnow()) <= self.end_date


class PollPatch(Patch):
    """Mutable poll fields. Options are fixed once created."""
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    district: Optional[str] = None
    is_active: Optional[bool] = None
    end_date: OptionalUtcDatetime = None


class PollVote(Entity):
    """One ballot. ``user_id`` or ``ip_address`` identifies the voter."""

    poll_id: str
    selected_options: List[int] = Field(min_length=1)
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)


class PollOptionResult(CivicaModel):
    option_index: int
    option: str
    count: int
    percentage: float


class PollResults(CivicaModel):
    """
    Tally for a poll.

    ``total_votes`` counts selections, so a multi-choice ballot adds one per
    selected option. ``total_voters`` counts ballots.
    """

    poll_id: str
    total_votes: int
    total_voters: int
    results: List[PollOptionResult]
