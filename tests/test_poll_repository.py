from datetime import timedelta

import pytest

from civica.db.store import MemoryStore
from civica.errors import ConflictError, NotFoundError, ValidationError
from civica.models.poll import PollCreate, PollPatch
from civica.utils.clock import utcnow


def _make_poll(store: MemoryStore, options=("A", "B"), **fields):
    return store.polls.create(PollCreate(title="Fund the library?", options=list(options), **fields))


def test_duplicate_ip_vote_conflicts_and_results_tally(store: MemoryStore) -> None:
    poll = _make_poll(store)
    store.polls.cast_vote(poll.id, [0], ip_address="1.2.3.4")

    with pytest.raises(ConflictError):
        store.polls.cast_vote(poll.id, [1], ip_address="1.2.3.4")

    results = store.polls.results(poll.id)
    assert results.total_votes == 1
    assert results.total_voters == 1
    assert [(r.count, r.percentage) for r in results.results] == [(1, 100.0), (0, 0.0)]


def test_same_user_conflicts_from_any_address(store: MemoryStore) -> None:
    poll = _make_poll(store)
    store.polls.cast_vote(poll.id, [0], user_id="u1", ip_address="1.2.3.4")

    with pytest.raises(ConflictError):
        store.polls.cast_vote(poll.id, [1], user_id="u1", ip_address="5.6.7.8")


def test_user_votes_are_not_blocked_by_shared_address(store: MemoryStore) -> None:
    poll = _make_poll(store)
    store.polls.cast_vote(poll.id, [0], user_id="u1", ip_address="1.2.3.4")
    store.polls.cast_vote(poll.id, [1], user_id="u2", ip_address="1.2.3.4")
    store.polls.cast_vote(poll.id, [1], ip_address="::ffff:1.2.3.4")

    with pytest.raises(ConflictError):
        store.polls.cast_vote(poll.id, [0], ip_address="1.2.3.4")

    assert store.polls.results(poll.id).total_voters == 3


def test_multi_choice_counts_each_selection(store: MemoryStore) -> None:
    poll = _make_poll(store, options=("A", "B", "C"), allow_multiple_choice=True)
    store.polls.cast_vote(poll.id, [0, 2], user_id="u1")
    store.polls.cast_vote(poll.id, [2], user_id="u2")

    results = store.polls.results(poll.id)

    assert results.total_votes == 3
    assert results.total_voters == 2
    assert sum(r.count for r in results.results) == results.total_votes
    assert [r.count for r in results.results] == [1, 0, 2]
    assert [r.percentage for r in results.results] == [33.3, 0.0, 66.7]


@pytest.mark.parametrize("selection", [[], [0, 1], [5], [-1]])
def test_invalid_single_choice_selection_is_rejected(store: MemoryStore, selection) -> None:
    poll = _make_poll(store)

    with pytest.raises(ValidationError):
        store.polls.cast_vote(poll.id, selection, user_id="u1")

    assert store.polls.votes_for(poll.id) == []


def test_duplicate_indices_rejected_on_multi_choice(store: MemoryStore) -> None:
    poll = _make_poll(store, allow_multiple_choice=True)

    with pytest.raises(ValidationError):
        store.polls.cast_vote(poll.id, [1, 1], user_id="u1")


def test_closed_polls_reject_votes(store: MemoryStore) -> None:
    inactive = _make_poll(store, is_active=False)
    expired = _make_poll(store, end_date=utcnow() - timedelta(days=1))

    for poll in (inactive, expired):
        with pytest.raises(ValidationError, match="Poll is closed"):
            store.polls.cast_vote(poll.id, [0], user_id="u1")


def test_vote_without_identity_is_rejected(store: MemoryStore) -> None:
    poll = _make_poll(store)

    with pytest.raises(ValidationError):
        store.polls.cast_vote(poll.id, [0])


def test_unknown_poll_raises_not_found(store: MemoryStore) -> None:
    with pytest.raises(NotFoundError):
        store.polls.results("missing")
    with pytest.raises(NotFoundError):
        store.polls.cast_vote("missing", [0], user_id="u1")


def test_delete_cascades_to_votes(store: MemoryStore) -> None:
    poll = _make_poll(store)
    store.polls.cast_vote(poll.id, [0], user_id="u1")

    assert store.polls.delete(poll.id) is True
    assert len(store.poll_vote_table) == 0
    assert store.polls.get(poll.id) is None


def test_list_filters_and_orders_newest_first(store: MemoryStore) -> None:
    older = _make_poll(store, category="local", district="TX-23")
    newer = _make_poll(store, category="local", district="TX-23")
    store.poll_table.replace(older, created_at=utcnow() - timedelta(days=2))
    _make_poll(store, category="state")

    page = store.polls.list(category="LOCAL", district="tx-23")

    assert page.total == 2
    assert [p.id for p in page.items] == [newer.id, older.id]


def test_update_changes_only_patched_fields(store: MemoryStore) -> None:
    poll = _make_poll(store, description="Library hours")

    updated = store.polls.update(poll.id, PollPatch(is_active=False))

    assert updated.is_active is False
    assert updated.description == "Library hours"
    assert updated.options == ["A", "B"]
