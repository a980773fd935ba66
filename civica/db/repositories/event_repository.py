"""
Repository for civic events and RSVPs.

The event's ``current_attendees`` counter is owned here: every RSVP
operation that moves an RSVP into or out of ``confirmed`` adjusts it.
Active RSVPs (confirmed or waitlisted) hold the unique key
(event_id, lowercased email); cancelling releases it.

Responsibility: Event listing/upsert and the RSVP lifecycle
"""

from datetime import datetime
from typing import Iterable, List, Optional
import logging

from ..query import contains, equals_ci
from ..table import MemoryTable, Page, paginate
from ...errors import NotFoundError, ValidationError
from ...models.event import CivicEvent, EventLevel, EventRsvp, RsvpCreate, RsvpPatch, RsvpStatus
from ...utils.clock import as_utc, utcnow

logger = logging.getLogger(__name__)

DEFAULT_EVENT_LIMIT = 20


def _rsvp_key(event_id: str, email: str) -> tuple:
    return (event_id, email.strip().lower())


class EventRepository:
    """
    Repository for events and their RSVPs.

    Example:
        repo = EventRepository(MemoryTable("event"), MemoryTable("rsvp"))
        rsvp = repo.create_rsvp(event.id, RsvpCreate(attendeeName="Ana", attendeeEmail="ana@example.org"))
        repo.cancel_rsvp(rsvp.id)
    """

    def __init__(self, events: MemoryTable[CivicEvent], rsvps: MemoryTable[EventRsvp]):
        self.events = events
        self.rsvps = rsvps

    def get(self, event_id: str) -> Optional[CivicEvent]:
        return self.events.get(event_id)

    def require(self, event_id: str) -> CivicEvent:
        event = self.events.get(event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    def list(
        self,
        level: Optional[EventLevel | str] = None,
        location: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: int = DEFAULT_EVENT_LIMIT,
        offset: int = 0
    ) -> Page[CivicEvent]:
        """
        List events in chronological order.

        Args:
            level: Exact level
            location: Substring of location or address
            start_date: Only events on or after this instant
            end_date: Only events on or before this instant
            limit: Maximum results
            offset: Results to skip
        """
        level_value = EventLevel(level) if level else None
        start = as_utc(start_date)
        end = as_utc(end_date)

        def matches(event: CivicEvent) -> bool:
            if level_value and event.level != level_value:
                return False
            if location and not (contains(event.location, location) or contains(event.address, location)):
                return False
            if start and event.date < start:
                return False
            if end and event.date > end:
                return False
            return True

        events = sorted(self.events.where(matches), key=lambda event: event.date)
        return paginate(events, limit, offset)

    def upsert(self, event: CivicEvent) -> CivicEvent:
        """
        Insert or replace an event.

        Replacing keeps the stored ``current_attendees`` since that counter
        reflects RSVPs recorded here.
        """
        existing = self.events.get(event.id)
        if existing is not None:
            event = event.model_copy(update={"current_attendees": existing.current_attendees})
        return self.events.put(event)

    def upsert_many(self, events: Iterable[CivicEvent]) -> List[CivicEvent]:
        return [self.upsert(event) for event in events]

    def delete(self, event_id: str) -> bool:
        """Delete an event and all of its RSVPs."""
        if not self.events.delete(event_id):
            return False
        self.rsvps.delete_where(lambda rsvp: rsvp.event_id == event_id)
        return True

    # RSVPs

    def create_rsvp(self, event_id: str, data: RsvpCreate) -> EventRsvp:
        """
        RSVP to an event.

        Confirmed while the event has capacity, waitlisted after.

        Raises:
            NotFoundError: Unknown event
            ValidationError: Event takes no RSVPs or the deadline passed
            ConflictError: Email already holds an active RSVP for the event
        """
        event = self.require(event_id)
        if not event.requires_rsvp:
            raise ValidationError("This event does not take RSVPs")
        if event.rsvp_deadline is not None and utcnow() > event.rsvp_deadline:
            raise ValidationError("The RSVP deadline has passed")

        status = RsvpStatus.CONFIRMED if event.has_capacity() else RsvpStatus.WAITLIST
        rsvp = EventRsvp(event_id=event_id, status=status, **data.model_dump())
        self.rsvps.insert_if_absent(
            _rsvp_key(event_id, rsvp.attendee_email),
            rsvp,
            message="This email already has an RSVP for this event",
        )
        if status == RsvpStatus.CONFIRMED:
            self._adjust_attendees(event_id, 1)
        logger.info(f"RSVP {rsvp.id} for event {event_id} is {status.value}")
        return rsvp

    def get_rsvp(self, rsvp_id: str) -> Optional[EventRsvp]:
        return self.rsvps.get(rsvp_id)

    def require_rsvp(self, rsvp_id: str) -> EventRsvp:
        rsvp = self.rsvps.get(rsvp_id)
        if rsvp is None:
            raise NotFoundError("RSVP", rsvp_id)
        return rsvp

    def rsvps_for_event(self, event_id: str, status: Optional[RsvpStatus | str] = None) -> List[EventRsvp]:
        """RSVPs for an event, optionally only those in one status."""
        self.require(event_id)
        wanted = RsvpStatus(status) if status else None
        return self.rsvps.where(
            lambda rsvp: rsvp.event_id == event_id and (wanted is None or rsvp.status == wanted)
        )

    def rsvps_for_user(self, user_id: str) -> List[EventRsvp]:
        return self.rsvps.where(lambda rsvp: equals_ci(rsvp.user_id, user_id))

    def update_rsvp(self, rsvp_id: str, patch: RsvpPatch) -> Optional[EventRsvp]:
        """
        Patch an RSVP, keeping the event counter and email key consistent.

        Raises:
            ConflictError: Reactivating while another active RSVP holds the email
            ValidationError: The patch would leave the RSVP invalid
        """
        current = self.rsvps.get(rsvp_id)
        if current is None:
            return None
        updated = self.rsvps.merged(current, **patch.changes())
        new_status = updated.status

        key = _rsvp_key(current.event_id, current.attendee_email)
        if new_status != current.status:
            if new_status == RsvpStatus.CANCELLED:
                self.rsvps.release(key)
            elif current.status == RsvpStatus.CANCELLED:
                self.rsvps.bind(key, current.id, message="This email already has an RSVP for this event")

            if current.status == RsvpStatus.CONFIRMED:
                self._adjust_attendees(current.event_id, -1)
            elif new_status == RsvpStatus.CONFIRMED:
                self._adjust_attendees(current.event_id, 1)

        return self.rsvps.put(updated)

    def cancel_rsvp(self, rsvp_id: str) -> Optional[EventRsvp]:
        return self.update_rsvp(rsvp_id, RsvpPatch(status=RsvpStatus.CANCELLED))

    def check_in(self, rsvp_id: str) -> EventRsvp:
        """
        Stamp ``check_in_time``.

        Raises:
            NotFoundError: Unknown RSVP
            ValidationError: RSVP is cancelled
        """
        rsvp = self.require_rsvp(rsvp_id)
        if rsvp.status == RsvpStatus.CANCELLED:
            raise ValidationError("Cannot check in a cancelled RSVP")
        return self.rsvps.replace(rsvp, check_in_time=utcnow())

    def send_reminders(self, event_id: str) -> int:
        """
        Mark confirmed RSVPs that have not been reminded yet.

        Returns:
            Number of RSVPs marked
        """
        self.require(event_id)
        pending = self.rsvps.where(
            lambda rsvp: rsvp.event_id == event_id
            and rsvp.status == RsvpStatus.CONFIRMED
            and not rsvp.reminder_sent
        )
        for rsvp in pending:
            self.rsvps.replace(rsvp, reminder_sent=True)
        if pending:
            logger.info(f"Marked {len(pending)} reminders for event {event_id}")
        return len(pending)

    def _adjust_attendees(self, event_id: str, delta: int) -> None:
        event = self.events.get(event_id)
        if event is None:
            return
        self.events.replace(event, current_attendees=max(0, event.current_attendees + delta))
