"""
Legislator API endpoints.

Reads the store, which the legislator directory fills at startup.

Responsibility: Legislator endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store
from api.schemas.legislators import LegislatorListResponse
from civica.db.store import MemoryStore
from civica.errors import NotFoundError
from civica.models.legislator import Legislator

router = APIRouter()


@router.get("/legislators", response_model=LegislatorListResponse)
async def list_legislators(
    state: Optional[str] = Query(None, description="Two-letter state code"),
    district: Optional[str] = Query(None, description="District code, e.g. TX-23"),
    level: Optional[str] = Query(None, description="federal, state or local"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: MemoryStore = Depends(get_store)
):
    page = store.legislators.list(
        state=state,
        district=district,
        level=level,
        limit=limit,
        offset=offset,
    )
    return LegislatorListResponse(legislators=page.items, total=page.total)


@router.get("/legislators/{legislator_id}", response_model=Legislator)
async def get_legislator(legislator_id: str, store: MemoryStore = Depends(get_store)):
    legislator = store.legislators.get(legislator_id)
    if legislator is None:
        raise NotFoundError("Legislator", legislator_id)
    return legislator
