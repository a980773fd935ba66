"""
Civic event and RSVP domain models.

Responsibility: Town halls, hearings, meetings and their RSVPs
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CivicaModel, OptionalUtcDatetime, Patch, TimestampedEntity, UtcDatetime


class EventLevel(str, Enum):
    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"


class RsvpStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    WAITLIST = "waitlist"


class CivicEvent(TimestampedEntity):
    """
    Town hall, hearing or meeting.

    ``current_attendees`` is the count of confirmed RSVPs and is maintained
    by the event repository, not by callers.
    """

    title: str
    description: Optional[str] = None
    event_type: str = Field(description="town_hall, hearing, meeting")
    date: UtcDatetime
    end_date: OptionalUtcDatetime = None
    location: Optional[str] = None
    address: Optional[str] = None
    virtual_url: Optional[str] = None
    organizer: Optional[str] = None
    organizer_contact: Optional[str] = None
    level: EventLevel = EventLevel.LOCAL
    max_attendees: Optional[int] = Field(default=None, ge=1)
    current_attendees: int = Field(default=0, ge=0)
    requires_rsvp: bool = False
    rsvp_deadline: OptionalUtcDatetime = None
    related_bills: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    status: str = "scheduled"
    language: str = Field(default="en", description="en, es or both")
    accessibility_info: Optional[str] = None
    agenda: Optional[str] = None
    url: Optional[str] = None

    def has_capacity(self) -> bool:
        return self.max_attendees is None or self.current_attendees < self.max_attendees


class RsvpCreate(CivicaModel):
    """Request body for an RSVP."""
    attendee_name: str = Field(min_length=1)
    attendee_email: str = Field(min_length=3)
    attendee_phone: Optional[str] = None
    preferred_language: str = "en"
    accessibility_needs: Optional[str] = None
    questions: Optional[str] = None
    user_id: Optional[str] = None


class EventRsvp(RsvpCreate, TimestampedEntity):
    event_id: str
    status: RsvpStatus = RsvpStatus.CONFIRMED
    reminder_sent: bool = False
    check_in_time: OptionalUtcDatetime = None


class RsvpPatch(Patch):
    status: Optional[RsvpStatus] = None
    accessibility_needs: Optional[str] = None
    questions: Optional[str] = None
