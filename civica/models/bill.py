"""
Bill domain model.

Represents a federal, state, local or district bill. Federal bills are
cached from GovTrack under ``govtrack-<id>`` keys; the rest come from the
curated dataset or are written directly.

Responsibility: Bill entity, enums and the mutable-field patch
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CivicaModel, Entity, OptionalUtcDatetime, Patch, UtcDatetime
from ..utils.clock import utcnow


class BillStatus(str, Enum):
    """Normalized lifecycle status"""
    INTRODUCED = "introduced"
    IN_COMMITTEE = "in_committee"
    PASSED_HOUSE = "passed_house"
    PASSED_SENATE = "passed_senate"
    SIGNED = "signed"
    VETOED = "vetoed"
    FAILED = "failed"
    ACTIVE = "active"


class Jurisdiction(str, Enum):
    """Scope of a bill"""
    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"
    DISTRICT = "district"


class BillProgress(CivicaModel):
    """Stage flags. Monotonic in practice but not enforced."""
    introduced: bool = True
    committee: bool = False
    passed_house: bool = False
    passed_senate: bool = False
    signed: bool = False


class VotingRecord(CivicaModel):
    """One chamber vote on the bill."""
    date: str
    chamber: str
    result: str
    votes_for: int = Field(default=0, ge=0)
    votes_against: int = Field(default=0, ge=0)


class Bill(Entity):
    """
    Unified bill model.

    Natural key: ``id`` (e.g. "govtrack-812345", "tx-hb1-89")
    """

    title: str
    summary: Optional[str] = None
    summary_es: Optional[str] = Field(
        default=None,
        description="Spanish summary, filled by the assistant on request"
    )
    status: BillStatus = BillStatus.INTRODUCED
    bill_type: str = Field(description="Bill prefix, e.g. 'H.R.', 'S.B.'")
    jurisdiction: Jurisdiction = Jurisdiction.FEDERAL
    sponsor: Optional[str] = None
    introduced_date: OptionalUtcDatetime = None
    last_action: Optional[str] = None
    last_action_date: OptionalUtcDatetime = None
    url: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    impact_tags: List[str] = Field(default_factory=list)
    progress: BillProgress = Field(default_factory=BillProgress)
    voting_history: List[VotingRecord] = Field(default_factory=list)
    updated_at: UtcDatetime = Field(default_factory=utcnow)

    def recency_key(self):
        """Most recent activity date, used for newest-first ordering."""
        return self.last_action_date or self.introduced_date


class BillPatch(Patch):
    """Fields of a bill that may change after it is stored."""
    title: Optional[str] = None
    summary: Optional[str] = None
    summary_es: Optional[str] = None
    status: Optional[BillStatus] = None
    sponsor: Optional[str] = None
    last_action: Optional[str] = None
    last_action_date: OptionalUtcDatetime = None
    url: Optional[str] = None
    categories: Optional[List[str]] = None
    impact_tags: Optional[List[str]] = None
    progress: Optional[BillProgress] = None
    voting_history: Optional[List[VotingRecord]] = None
