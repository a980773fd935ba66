import pytest

from civica.db.store import MemoryStore
from civica.errors import ConflictError, NotFoundError, ValidationError
from civica.models.feedback import FeedbackCreate, FeedbackPatch, FeedbackStatus, VoteType


def _make_feedback(store: MemoryStore, **fields):
    return store.feedback.create(FeedbackCreate(
        title="Add Spanish bill summaries",
        content="Summaries in Spanish would help my parents follow local bills.",
        **fields
    ))


def test_votes_recompute_tallies(store: MemoryStore) -> None:
    submission = _make_feedback(store)

    store.feedback.cast_vote(submission.id, "upvote", user_id="u1")
    updated = store.feedback.cast_vote(submission.id, VoteType.DOWNVOTE, user_id="u2")

    assert (updated.upvotes, updated.downvotes) == (1, 1)
    assert store.feedback.get(submission.id).upvotes == 1


def test_tallies_match_recorded_votes(store: MemoryStore) -> None:
    submission = _make_feedback(store)
    for index in range(5):
        vote_type = "upvote" if index % 2 == 0 else "downvote"
        updated = store.feedback.cast_vote(submission.id, vote_type, ip_address=f"10.0.0.{index}")
        recorded = store.feedback_vote_table.where(lambda v: v.feedback_id == submission.id)
        assert updated.upvotes + updated.downvotes == len(recorded)

    assert (updated.upvotes, updated.downvotes) == (3, 2)


def test_duplicate_feedback_vote_conflicts(store: MemoryStore) -> None:
    submission = _make_feedback(store)
    store.feedback.cast_vote(submission.id, "upvote", ip_address="1.2.3.4")

    with pytest.raises(ConflictError):
        store.feedback.cast_vote(submission.id, "downvote", ip_address="1.2.3.4")

    assert store.feedback.get(submission.id).downvotes == 0


def test_vote_on_unknown_feedback_raises(store: MemoryStore) -> None:
    with pytest.raises(NotFoundError):
        store.feedback.cast_vote("missing", "upvote", user_id="u1")


def test_reply_must_target_comment_on_same_feedback(store: MemoryStore) -> None:
    first = _make_feedback(store)
    second = _make_feedback(store)
    parent = store.feedback.add_comment(first.id, "Agreed!", user_id="u1")

    reply = store.feedback.add_comment(first.id, "Same here", parent_comment_id=parent.id)
    assert reply.parent_comment_id == parent.id

    with pytest.raises(ValidationError):
        store.feedback.add_comment(second.id, "Wrong thread", parent_comment_id=parent.id)
    with pytest.raises(ValidationError):
        store.feedback.add_comment(first.id, "Dangling", parent_comment_id="missing")

    assert [c.id for c in store.feedback.comments_for(first.id)] == [parent.id, reply.id]


def test_admin_response_marks_submission_responded(store: MemoryStore) -> None:
    submission = _make_feedback(store)

    updated = store.feedback.update(submission.id, FeedbackPatch(admin_response="Coming next release"))

    assert updated.status == FeedbackStatus.RESPONDED
    assert updated.responded_at is not None
    assert updated.title == submission.title


def test_explicit_status_wins_over_admin_response(store: MemoryStore) -> None:
    submission = _make_feedback(store)

    updated = store.feedback.update(
        submission.id,
        FeedbackPatch(admin_response="Duplicate of #12", status=FeedbackStatus.CLOSED),
    )

    assert updated.status == FeedbackStatus.CLOSED


def test_delete_cascades_votes_and_comments(store: MemoryStore) -> None:
    submission = _make_feedback(store)
    store.feedback.cast_vote(submission.id, "upvote", user_id="u1")
    store.feedback.add_comment(submission.id, "Thanks")

    assert store.feedback.delete(submission.id) is True
    assert len(store.feedback_vote_table) == 0
    assert len(store.feedback_comment_table) == 0


def test_list_filters_by_status_and_visibility(store: MemoryStore) -> None:
    public = _make_feedback(store, user_id="u1")
    _make_feedback(store, is_public=False)
    store.feedback.update(public.id, FeedbackPatch(status=FeedbackStatus.REVIEWED))

    page = store.feedback.list(status="reviewed", is_public=True)

    assert page.total == 1
    assert page.items[0].id == public.id
    assert store.feedback.list(user_id="U1").total == 1
