import json
from datetime import timedelta

import httpx

from civica.config import Settings, StoreConfig
from civica.db.store import MemoryStore
from civica.models.bill import Bill
from civica.models.event import CivicEvent
from civica.utils.clock import utcnow
from tests.conftest import build_client, make_assistant, openai_reply


def _create_poll(client, **fields) -> dict:
    payload = {"title": "Should the city expand bus routes?", "options": ["Yes", "No"], **fields}
    response = client.post("/api/polls", json=payload)
    assert response.status_code == 201
    return response.json()


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "civica-api"}


def test_duplicate_poll_vote_from_same_address_conflicts(client) -> None:
    poll = _create_poll(client)
    headers = {"X-Forwarded-For": "1.2.3.4, 10.0.0.1"}

    first = client.post(f"/api/polls/{poll['id']}/vote", json={"selectedOptions": [0]}, headers=headers)
    second = client.post(f"/api/polls/{poll['id']}/vote", json={"selectedOptions": [1]}, headers=headers)
    results = client.get(f"/api/polls/{poll['id']}/results").json()

    assert first.status_code == 201
    assert first.json()["ipAddress"] == "1.2.3.4"
    assert second.status_code == 409
    assert "error" in second.json()
    assert results["totalVotes"] == 1
    assert [r["percentage"] for r in results["results"]] == [100.0, 0.0]


def test_poll_vote_rejects_bad_option(client) -> None:
    poll = _create_poll(client)

    response = client.post(f"/api/polls/{poll['id']}/vote", json={"selectedOptions": [5], "userId": "u1"})

    assert response.status_code == 400


def test_poll_delete_then_404(client) -> None:
    poll = _create_poll(client)

    assert client.delete(f"/api/polls/{poll['id']}").status_code == 204
    assert client.get(f"/api/polls/{poll['id']}").json() == {"error": "Poll not found"}
    assert client.delete(f"/api/polls/{poll['id']}").status_code == 404


def test_poll_patch_cannot_null_required_fields(client) -> None:
    poll = _create_poll(client)

    response = client.patch(f"/api/polls/{poll['id']}", json={"title": None, "isActive": None})
    stored = client.get(f"/api/polls/{poll['id']}").json()
    vote = client.post(f"/api/polls/{poll['id']}/vote", json={"selectedOptions": [0], "userId": "u1"})

    assert response.status_code == 400
    assert (stored["title"], stored["isActive"]) == (poll["title"], True)
    assert vote.status_code == 201


def test_poll_patch_closes_poll(client) -> None:
    poll = _create_poll(client)

    patched = client.patch(f"/api/polls/{poll['id']}", json={"isActive": False, "description": None})
    vote = client.post(f"/api/polls/{poll['id']}/vote", json={"selectedOptions": [0], "userId": "u1"})

    assert patched.status_code == 200
    assert vote.json() == {"error": "Poll is closed"}


def test_feedback_patch_cannot_null_status(client) -> None:
    created = client.post("/api/feedback", json={
        "title": "Broken district map",
        "content": "The district map does not load on my phone.",
    }).json()

    response = client.patch(f"/api/feedback/{created['id']}", json={"status": None, "priority": None})
    stored = client.get(f"/api/feedback/{created['id']}").json()["submission"]

    assert response.status_code == 400
    assert (stored["status"], stored["priority"]) == ("pending", "medium")


def test_request_validation_is_400(client) -> None:
    response = client.post("/api/polls", json={"title": "Empty", "options": []})

    assert response.status_code == 400
    assert "options" in response.json()["error"]


def test_feedback_votes_from_two_users(client) -> None:
    created = client.post("/api/feedback", json={
        "title": "Add Spanish bill summaries",
        "content": "Summaries in Spanish would help my parents follow local bills.",
        "category": "feature_request",
    }).json()

    client.post(f"/api/feedback/{created['id']}/vote", json={"voteType": "upvote", "userId": "u1"})
    voted = client.post(f"/api/feedback/{created['id']}/vote", json={"voteType": "downvote", "userId": "u2"})
    again = client.post(f"/api/feedback/{created['id']}/vote", json={"voteType": "upvote", "userId": "u1"})

    assert (voted.json()["upvotes"], voted.json()["downvotes"]) == (1, 1)
    assert again.status_code == 409

    comment = client.post(f"/api/feedback/{created['id']}/comments", json={"content": "Agreed"})
    detail = client.get(f"/api/feedback/{created['id']}").json()
    assert comment.status_code == 201
    assert [c["content"] for c in detail["comments"]] == ["Agreed"]


def test_state_bills_on_empty_store(client) -> None:
    response = client.get("/api/bills", params={"jurisdiction": "state"})

    assert response.status_code == 200
    assert response.json() == {"bills": [], "total": 0, "degraded": False}


def test_federal_search_degrades_to_curated_bills(store: MemoryStore) -> None:
    client = build_client(store)

    body = client.get("/api/bills", params={"query": "water"}).json()

    assert body["degraded"] is True
    assert body["bills"]
    assert store.bills.get(body["bills"][0]["id"]) is not None


def test_unknown_status_on_state_search_is_400(client) -> None:
    response = client.get("/api/bills", params={"jurisdiction": "state", "status": "pending"})

    assert response.status_code == 400


def test_unknown_bill_is_404(client) -> None:
    response = client.get("/api/bills/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Bill not found"}


def test_summarize_without_assistant_is_503(store: MemoryStore) -> None:
    store.bills.upsert(Bill(id="hr1-119", title="Lower Energy Costs Act", bill_type="H.R."))
    client = build_client(store)

    response = client.post("/api/bills/hr1-119/summarize")

    assert response.status_code == 503


def test_spanish_summary_is_saved(store: MemoryStore) -> None:
    store.bills.upsert(Bill(id="hr1-119", title="Lower Energy Costs Act", bill_type="H.R."))
    assistant = make_assistant(lambda request: openai_reply(json.dumps({"summary": "Reduce costos de energía."})))
    client = build_client(store, assistant=assistant)

    response = client.post("/api/bills/hr1-119/summarize", json={"language": "es"})

    assert response.status_code == 200
    assert store.bills.get("hr1-119").summary_es == "Reduce costos de energía."


def test_chat_without_key_is_503(client) -> None:
    response = client.post("/api/chat", json={"message": "What is a town hall?"})

    assert response.status_code == 503
    assert response.json() == {"error": "AI assistant is not configured"}


def test_chat_unknown_session_is_404(client) -> None:
    response = client.post("/api/chat", json={"message": "Hi", "sessionId": "missing"})

    assert response.status_code == 404


def test_chat_appends_to_session(store: MemoryStore) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return openai_reply(json.dumps({"response": "A town hall is a public meeting.", "confidence": 0.9}))

    client = build_client(store, assistant=make_assistant(handler))
    session = client.post("/api/chat/sessions").json()

    reply = client.post("/api/chat", json={"message": "What is a town hall?", "sessionId": session["id"]})
    transcript = client.get(f"/api/chat/sessions/{session['id']}").json()

    assert reply.json()["response"] == "A town hall is a public meeting."
    assert [m["role"] for m in transcript["messages"]] == ["user", "assistant"]


def test_translate_uses_phrase_table_without_key(client) -> None:
    response = client.post("/api/translate", json={"content": "Breaking News", "targetLanguage": "es"})

    assert response.json() == {
        "translatedContent": "Últimas Noticias",
        "sourceLanguage": "en",
        "targetLanguage": "es",
    }


def test_news_serves_fallback_without_key(client) -> None:
    body = client.get("/api/news", params={"pageSize": 5}).json()
    local = client.get("/api/news/local").json()

    assert body["degraded"] is True
    assert body["articles"]
    assert all(article["category"] == "local" for article in local["articles"])


def test_rsvp_flow(store: MemoryStore) -> None:
    store.events.upsert(CivicEvent(
        id="town-hall",
        title="Town Hall with Rep. Gonzales",
        event_type="town_hall",
        date=utcnow() + timedelta(days=7),
        max_attendees=1,
        requires_rsvp=True,
    ))
    client = build_client(store)

    first = client.post("/api/events/town-hall/rsvp", json={
        "attendeeName": "Maria Lopez", "attendeeEmail": "maria@example.com", "userId": "u1",
    })
    second = client.post("/api/events/town-hall/rsvp", json={
        "attendeeName": "Juan Perez", "attendeeEmail": "juan@example.com",
    })
    duplicate = client.post("/api/events/town-hall/rsvp", json={
        "attendeeName": "Maria", "attendeeEmail": "Maria@Example.com",
    })

    assert first.json()["status"] == "confirmed"
    assert second.json()["status"] == "waitlist"
    assert duplicate.status_code == 409
    assert [r["id"] for r in client.get("/api/users/u1/rsvps").json()["rsvps"]] == [first.json()["id"]]

    waitlisted = client.get("/api/events/town-hall/rsvps", params={"status": "waitlist"}).json()
    assert [r["id"] for r in waitlisted["rsvps"]] == [second.json()["id"]]

    cancelled = client.post(f"/api/rsvps/{first.json()['id']}/cancel")
    assert cancelled.json()["status"] == "cancelled"
    assert client.get("/api/events/town-hall").json()["currentAttendees"] == 0
    confirmed = client.get("/api/events/town-hall/rsvps", params={"status": "confirmed"}).json()
    assert confirmed["rsvps"] == []


def test_users_and_bookmarks(client) -> None:
    created = client.post("/api/users", json={"username": "maria", "password": "correct horse"})
    taken = client.post("/api/users", json={"username": "MARIA", "password": "another pass"})

    assert created.status_code == 201
    assert "passwordHash" not in created.json()
    assert taken.status_code == 409

    login = client.post("/api/users/login", json={"username": "Maria", "password": "correct horse"})
    wrong = client.post("/api/users/login", json={"username": "maria", "password": "wrong pass"})
    assert login.json()["id"] == created.json()["id"]
    assert wrong.status_code == 401
    assert wrong.json() == {"error": "Invalid username or password"}

    user_id = created.json()["id"]
    bookmark = client.post("/api/bookmarks", json={"userId": user_id, "itemType": "bill", "itemId": "hr1-119"})
    assert bookmark.status_code == 201
    assert [b["itemId"] for b in client.get(f"/api/bookmarks/{user_id}").json()] == ["hr1-119"]
    assert client.delete(f"/api/bookmarks/{bookmark.json()['id']}").status_code == 204
    assert client.get(f"/api/bookmarks/{user_id}").json() == []


def test_startup_loads_directory_when_seeding(store: MemoryStore) -> None:
    client = build_client(store, settings=Settings(store=StoreConfig(seed_data=True)))

    with client:
        body = client.get("/api/legislators", params={"district": "TX-23", "level": "federal"}).json()
        events = client.get("/api/events", params={"level": "federal"}).json()

    assert body["legislators"][0]["id"] == "tony-gonzales-tx23"
    assert events["total"] == 2
    assert client.get("/api/legislators/nobody").status_code == 404
