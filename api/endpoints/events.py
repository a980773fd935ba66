"""
Civic event and RSVP API endpoints.

Responsibility: Town hall listing, RSVP lifecycle and reminder endpoints
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store
from api.schemas.events import EventListResponse, ReminderResponse, RsvpListResponse
from civica.db.store import MemoryStore
from civica.errors import NotFoundError
from civica.models.event import CivicEvent, EventLevel, EventRsvp, RsvpCreate, RsvpPatch, RsvpStatus

router = APIRouter()


@router.get("/events", response_model=EventListResponse)
async def list_events(
    level: Optional[EventLevel] = Query(None),
    location: Optional[str] = Query(None, description="Substring of location or address"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: MemoryStore = Depends(get_store)
):
    """Events in chronological order."""
    page = store.events.list(
        level=level,
        location=location,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return EventListResponse(events=page.items, total=page.total)


@router.get("/events/{event_id}", response_model=CivicEvent)
async def get_event(event_id: str, store: MemoryStore = Depends(get_store)):
    return store.events.require(event_id)


@router.post("/events/{event_id}/rsvp", response_model=EventRsvp, status_code=201)
async def create_rsvp(event_id: str, body: RsvpCreate, store: MemoryStore = Depends(get_store)):
    """
    RSVP to an event; confirmed while seats remain, waitlisted after.

    Raises:
        ValidationError: 400 if the event takes no RSVPs or the deadline passed
        ConflictError: 409 if the email already has an active RSVP
    """
    return store.events.create_rsvp(event_id, body)


@router.get("/events/{event_id}/rsvps", response_model=RsvpListResponse)
async def list_event_rsvps(
    event_id: str,
    status: Optional[RsvpStatus] = Query(None, description="confirmed, waitlist or cancelled; all when omitted"),
    store: MemoryStore = Depends(get_store)
):
    return RsvpListResponse(rsvps=store.events.rsvps_for_event(event_id, status))


@router.post("/events/{event_id}/reminders", response_model=ReminderResponse)
async def send_reminders(event_id: str, store: MemoryStore = Depends(get_store)):
    return ReminderResponse(sent=store.events.send_reminders(event_id))


@router.get("/users/{user_id}/rsvps", response_model=RsvpListResponse)
async def list_user_rsvps(user_id: str, store: MemoryStore = Depends(get_store)):
    return RsvpListResponse(rsvps=store.events.rsvps_for_user(user_id))


@router.patch("/rsvps/{rsvp_id}", response_model=EventRsvp)
async def update_rsvp(rsvp_id: str, body: RsvpPatch, store: MemoryStore = Depends(get_store)):
    rsvp = store.events.update_rsvp(rsvp_id, body)
    if rsvp is None:
        raise NotFoundError("RSVP", rsvp_id)
    return rsvp


@router.post("/rsvps/{rsvp_id}/cancel", response_model=EventRsvp)
async def cancel_rsvp(rsvp_id: str, store: MemoryStore = Depends(get_store)):
    rsvp = store.events.cancel_rsvp(rsvp_id)
    if rsvp is None:
        raise NotFoundError("RSVP", rsvp_id)
    return rsvp


@router.post("/rsvps/{rsvp_id}/check-in", response_model=EventRsvp)
async def check_in(rsvp_id: str, store: MemoryStore = Depends(get_store)):
    return store.events.check_in(rsvp_id)
