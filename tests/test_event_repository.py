from datetime import timedelta

import pytest

from civica.db.store import MemoryStore
from civica.errors import ConflictError, NotFoundError, ValidationError
from civica.models.event import CivicEvent, RsvpCreate, RsvpPatch, RsvpStatus
from civica.utils.clock import utcnow


def _make_event(store: MemoryStore, **fields) -> CivicEvent:
    fields.setdefault("requires_rsvp", True)
    event = CivicEvent(
        id=fields.pop("id", "town-hall"),
        title="Town Hall with Rep. Gonzales",
        event_type="town_hall",
        date=fields.pop("date", utcnow() + timedelta(days=7)),
        **fields
    )
    return store.events.upsert(event)


def _rsvp(name: str = "Maria Lopez", email: str = "maria@example.com") -> RsvpCreate:
    return RsvpCreate(attendee_name=name, attendee_email=email, preferred_language="es")


def test_rsvp_confirms_and_counts(store: MemoryStore) -> None:
    _make_event(store, max_attendees=10)

    rsvp = store.events.create_rsvp("town-hall", _rsvp())

    assert rsvp.status == RsvpStatus.CONFIRMED
    assert store.events.get("town-hall").current_attendees == 1


def test_full_event_waitlists(store: MemoryStore) -> None:
    _make_event(store, max_attendees=1)
    store.events.create_rsvp("town-hall", _rsvp())

    second = store.events.create_rsvp("town-hall", _rsvp("Juan", "juan@example.com"))

    assert second.status == RsvpStatus.WAITLIST
    assert store.events.get("town-hall").current_attendees == 1


def test_same_email_cannot_rsvp_twice(store: MemoryStore) -> None:
    _make_event(store)
    store.events.create_rsvp("town-hall", _rsvp())

    with pytest.raises(ConflictError):
        store.events.create_rsvp("town-hall", _rsvp(email="MARIA@example.com"))


def test_cancel_frees_seat_and_email(store: MemoryStore) -> None:
    _make_event(store, max_attendees=5)
    rsvp = store.events.create_rsvp("town-hall", _rsvp())

    cancelled = store.events.cancel_rsvp(rsvp.id)
    assert cancelled.status == RsvpStatus.CANCELLED
    assert store.events.get("town-hall").current_attendees == 0

    again = store.events.create_rsvp("town-hall", _rsvp())
    assert again.status == RsvpStatus.CONFIRMED
    assert store.events.get("town-hall").current_attendees == 1

    with pytest.raises(ConflictError):
        store.events.update_rsvp(rsvp.id, RsvpPatch(status=RsvpStatus.CONFIRMED))


def test_reactivating_cancelled_rsvp_counts_again(store: MemoryStore) -> None:
    _make_event(store)
    rsvp = store.events.create_rsvp("town-hall", _rsvp())
    store.events.cancel_rsvp(rsvp.id)

    restored = store.events.update_rsvp(rsvp.id, RsvpPatch(status=RsvpStatus.CONFIRMED))

    assert restored.status == RsvpStatus.CONFIRMED
    assert store.events.get("town-hall").current_attendees == 1


def test_null_status_patch_is_rejected_before_counting(store: MemoryStore) -> None:
    _make_event(store)
    rsvp = store.events.create_rsvp("town-hall", _rsvp())

    with pytest.raises(ValidationError):
        store.events.update_rsvp(rsvp.id, RsvpPatch(status=None))

    assert store.events.get_rsvp(rsvp.id).status == RsvpStatus.CONFIRMED
    assert store.events.get("town-hall").current_attendees == 1


def test_rsvps_for_event_filters_by_status(store: MemoryStore) -> None:
    _make_event(store, max_attendees=1)
    confirmed = store.events.create_rsvp("town-hall", _rsvp())
    store.events.create_rsvp("town-hall", _rsvp("Juan", "juan@example.com"))

    assert [r.id for r in store.events.rsvps_for_event("town-hall", "confirmed")] == [confirmed.id]
    assert len(store.events.rsvps_for_event("town-hall")) == 2


def test_counter_never_goes_negative(store: MemoryStore) -> None:
    _make_event(store)
    rsvp = store.events.create_rsvp("town-hall", _rsvp())
    store.event_table.replace(store.events.get("town-hall"), current_attendees=0)

    store.events.cancel_rsvp(rsvp.id)

    assert store.events.get("town-hall").current_attendees == 0


def test_rsvp_rules(store: MemoryStore) -> None:
    _make_event(store, id="open-meeting", requires_rsvp=False)
    _make_event(store, id="closed", rsvp_deadline=utcnow() - timedelta(hours=1))

    with pytest.raises(ValidationError):
        store.events.create_rsvp("open-meeting", _rsvp())
    with pytest.raises(ValidationError):
        store.events.create_rsvp("closed", _rsvp())
    with pytest.raises(NotFoundError):
        store.events.create_rsvp("missing", _rsvp())


def test_check_in_stamps_time_unless_cancelled(store: MemoryStore) -> None:
    _make_event(store)
    rsvp = store.events.create_rsvp("town-hall", _rsvp())

    assert store.events.check_in(rsvp.id).check_in_time is not None

    store.events.cancel_rsvp(rsvp.id)
    with pytest.raises(ValidationError):
        store.events.check_in(rsvp.id)


def test_reminders_mark_confirmed_rsvps_once(store: MemoryStore) -> None:
    _make_event(store, max_attendees=2)
    store.events.create_rsvp("town-hall", _rsvp("A", "a@example.com"))
    store.events.create_rsvp("town-hall", _rsvp("B", "b@example.com"))
    store.events.create_rsvp("town-hall", _rsvp("C", "c@example.com"))

    assert store.events.send_reminders("town-hall") == 2
    assert store.events.send_reminders("town-hall") == 0


def test_upsert_keeps_attendee_count(store: MemoryStore) -> None:
    event = _make_event(store)
    store.events.create_rsvp("town-hall", _rsvp())

    store.events.upsert(event.model_copy(update={"title": "Rescheduled Town Hall"}))

    stored = store.events.get("town-hall")
    assert stored.title == "Rescheduled Town Hall"
    assert stored.current_attendees == 1


def test_delete_cascades_to_rsvps(store: MemoryStore) -> None:
    _make_event(store)
    store.events.create_rsvp("town-hall", _rsvp())

    assert store.events.delete("town-hall") is True
    assert len(store.rsvp_table) == 0


def test_list_is_chronological_and_filtered(seeded_store: MemoryStore) -> None:
    page = seeded_store.events.list(level="local")

    dates = [event.date for event in page.items]
    assert dates == sorted(dates)
    assert page.total == 3
    assert all(event.level.value == "local" for event in page.items)

    soon = seeded_store.events.list(end_date=utcnow() + timedelta(days=15))
    assert {event.id for event in soon.items} == {
        "tony-gonzales-th-feb2025",
        "sa-city-council-housing-feb2025",
    }
