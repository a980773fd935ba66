"""
Bills API endpoints.

Federal searches go through GovTrack and are cached; state, local and
district searches read the store.

Responsibility: Bill endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_bill_service
from api.schemas.bills import BillListResponse, SummarizeRequest
from civica.models.assistant import BillSummary
from civica.models.bill import Bill, Jurisdiction
from civica.services import BillService

router = APIRouter()


@router.get("/bills", response_model=BillListResponse)
async def list_bills(
    query: Optional[str] = Query(None, description="Free-text search"),
    status: Optional[str] = Query(None, description="Bill status"),
    jurisdiction: Optional[Jurisdiction] = Query(None, description="federal, state, local or district"),
    limit: int = Query(20, ge=1, le=100, description="Number of results"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
    service: BillService = Depends(get_bill_service)
):
    """
    Search bills.

    Returns:
        BillListResponse with the page and the total match count
    """
    result = await service.search(
        query=query,
        status=status,
        jurisdiction=jurisdiction,
        limit=limit,
        offset=offset,
    )
    return BillListResponse(bills=result.bills, total=result.total, degraded=result.degraded)


@router.get("/bills/{bill_id}", response_model=Bill)
async def get_bill(bill_id: str, service: BillService = Depends(get_bill_service)):
    """
    Get one bill.

    Raises:
        NotFoundError: 404 if the bill is unknown here and upstream
    """
    return await service.get(bill_id)


@router.post("/bills/{bill_id}/summarize", response_model=BillSummary)
async def summarize_bill(
    bill_id: str,
    body: Optional[SummarizeRequest] = None,
    service: BillService = Depends(get_bill_service)
):
    """Plain-language summary; Spanish summaries are saved on the bill."""
    language = body.language if body else "en"
    return await service.summarize(bill_id, language)
