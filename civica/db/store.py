"""
In-memory store for Civica.

``MemoryStore`` owns one ``MemoryTable`` per entity type and the
repositories built over them. It is constructed explicitly and injected
into the application, so each test can use its own isolated store.

Responsibility: Table ownership, repository wiring and seed data
"""

from datetime import datetime, timedelta
from typing import List, Optional
import logging

from .repositories import (
    BillRepository,
    BookmarkRepository,
    ChatRepository,
    EventRepository,
    FeedbackRepository,
    LegislatorRepository,
    NewsRepository,
    PollRepository,
    UserRepository,
)
from .table import MemoryTable
from ..adapters.fallback_data import fallback_bills, tx23_events, tx23_legislators
from ..models.poll import Poll
from ..utils.clock import utcnow

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    Container for all tables and repositories.

    Example:
        store = MemoryStore()              # empty
        store = MemoryStore.seeded()       # sample legislators, bills, events, polls
        store.polls.cast_vote(poll_id, [0], ip_address="1.2.3.4")
    """

    def __init__(self):
        self.bill_table = MemoryTable("bill")
        self.legislator_table = MemoryTable("legislator")
        self.news_table = MemoryTable("news_article")
        self.poll_table = MemoryTable("poll")
        self.poll_vote_table = MemoryTable("poll_vote")
        self.feedback_table = MemoryTable("feedback")
        self.feedback_vote_table = MemoryTable("feedback_vote")
        self.feedback_comment_table = MemoryTable("feedback_comment")
        self.event_table = MemoryTable("civic_event")
        self.rsvp_table = MemoryTable("event_rsvp")
        self.user_table = MemoryTable("user")
        self.bookmark_table = MemoryTable("bookmark")
        self.chat_table = MemoryTable("chat_session")

        self.bills = BillRepository(self.bill_table)
        self.legislators = LegislatorRepository(self.legislator_table)
        self.news = NewsRepository(self.news_table)
        self.polls = PollRepository(self.poll_table, self.poll_vote_table)
        self.feedback = FeedbackRepository(
            self.feedback_table,
            self.feedback_vote_table,
            self.feedback_comment_table
        )
        self.events = EventRepository(self.event_table, self.rsvp_table)
        self.users = UserRepository(self.user_table)
        self.bookmarks = BookmarkRepository(self.bookmark_table)
        self.chats = ChatRepository(self.chat_table)

    @classmethod
    def seeded(cls) -> "MemoryStore":
        """Build a store preloaded with the TX-23 sample data."""
        store = cls()
        store.seed()
        return store

    def seed(self) -> None:
        now = utcnow()
        self.legislators.upsert_many(tx23_legislators())
        self.bills.upsert_many(fallback_bills(now))
        self.events.upsert_many(tx23_events(now))
        for poll in sample_polls(now):
            self.poll_table.put(poll)
        logger.info(
            f"Seeded store: {len(self.legislator_table)} legislators, "
            f"{len(self.bill_table)} bills, {len(self.event_table)} events, "
            f"{len(self.poll_table)} polls"
        )


def sample_polls(now: Optional[datetime] = None) -> List[Poll]:
    """Community polls tied to the curated TX-23 bills."""
    now = now or utcnow()
    return [
        Poll(
            id="poll-border-water",
            title="Should Congress fund the Border Water Infrastructure Improvement Act?",
            description="H.R. 4829 would upgrade water systems in Del Rio, Eagle Pass and Uvalde.",
            options=["Yes, fully fund it", "Fund a smaller pilot", "No", "Need more information"],
            category="national",
            location="San Antonio, Texas",
            district="TX-23",
            related_bill_id="hr4829-119",
            created_at=now - timedelta(days=6),
            updated_at=now - timedelta(days=6),
        ),
        Poll(
            id="poll-broadband-priorities",
            title="Which communities should broadband expansion reach first?",
            description="The Texas Broadband Expansion Act targets underserved rural areas.",
            options=["Border communities", "Ranching areas", "Small towns", "Tribal lands"],
            category="state",
            location="Texas",
            district="TX-23",
            allow_multiple_choice=True,
            related_bill_id="tx-hb4-89",
            created_at=now - timedelta(days=3),
            updated_at=now - timedelta(days=3),
        ),
        Poll(
            id="poll-sa-bond-package",
            title="Do you support San Antonio's $2.8B bond package?",
            options=["Support", "Oppose", "Undecided"],
            category="local",
            location="San Antonio, Texas",
            end_date=now + timedelta(days=30),
            created_at=now - timedelta(days=1),
            updated_at=now - timedelta(days=1),
        ),
    ]
