"""Response schemas for event and RSVP endpoints."""

from typing import List

from civica.models.base import CivicaModel
from civica.models.event import CivicEvent, EventRsvp


class EventListResponse(CivicaModel):
    events: List[CivicEvent]
    total: int


class RsvpListResponse(CivicaModel):
    rsvps: List[EventRsvp]


class ReminderResponse(CivicaModel):
    sent: int
