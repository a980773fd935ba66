"""
Community poll API endpoints.

Responsibility: Poll CRUD, voting and results endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from api.dependencies import client_ip, get_store
from api.schemas.polls import PollListResponse, VoteRequest
from civica.db.store import MemoryStore
from civica.errors import NotFoundError
from civica.models.poll import Poll, PollCreate, PollPatch, PollResults, PollVote

router = APIRouter()


@router.get("/polls", response_model=PollListResponse)
async def list_polls(
    category: Optional[str] = Query(None, description="local, state or national"),
    location: Optional[str] = Query(None),
    district: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: MemoryStore = Depends(get_store)
):
    page = store.polls.list(
        category=category,
        location=location,
        district=district,
        is_active=is_active,
        limit=limit,
        offset=offset,
    )
    return PollListResponse(polls=page.items, total=page.total)


@router.post("/polls", response_model=Poll, status_code=201)
async def create_poll(body: PollCreate, store: MemoryStore = Depends(get_store)):
    return store.polls.create(body)


@router.get("/polls/{poll_id}", response_model=Poll)
async def get_poll(poll_id: str, store: MemoryStore = Depends(get_store)):
    return store.polls.require(poll_id)


@router.patch("/polls/{poll_id}", response_model=Poll)
async def update_poll(poll_id: str, body: PollPatch, store: MemoryStore = Depends(get_store)):
    poll = store.polls.update(poll_id, body)
    if poll is None:
        raise NotFoundError("Poll", poll_id)
    return poll


@router.delete("/polls/{poll_id}", status_code=204)
async def delete_poll(poll_id: str, store: MemoryStore = Depends(get_store)):
    """Delete a poll and every vote cast on it."""
    if not store.polls.delete(poll_id):
        raise NotFoundError("Poll", poll_id)
    return Response(status_code=204)


@router.get("/polls/{poll_id}/results", response_model=PollResults)
async def poll_results(poll_id: str, store: MemoryStore = Depends(get_store)):
    return store.polls.results(poll_id)


@router.post("/polls/{poll_id}/vote", response_model=PollVote, status_code=201)
async def vote_on_poll(
    poll_id: str,
    body: VoteRequest,
    request: Request,
    store: MemoryStore = Depends(get_store)
):
    """
    Cast a ballot.

    Anonymous voters are identified by client address.

    Raises:
        ConflictError: 409 when this voter already voted
        ValidationError: 400 for a closed poll or an invalid selection
    """
    return store.polls.cast_vote(
        poll_id,
        body.selected_options,
        user_id=body.user_id,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
