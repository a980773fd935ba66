"""
GovTrack API adapter for fetching federal bills.

Pulls bills from the GovTrack v2 API (www.govtrack.us/api/v2). When the API
is unreachable or returns something unusable, the curated bill set is
served instead, filtered the same way the API would have been.

Responsibility: Fetch and normalize bills from the GovTrack JSON API
"""

from datetime import datetime
from typing import Optional, Dict, Any, List
import httpx

from .base_adapter import BaseAdapter
from .fallback_data import fallback_bills
from ..db.query import contains
from ..models.bill import Bill, BillProgress, BillStatus, Jurisdiction
from ..models.adapter_models import AdapterResponse, FallbackReason
from ..utils.clock import parse_datetime, utcnow


# Checked in order; first substring match wins.
STATUS_MAP = (
    ("introduced", BillStatus.INTRODUCED),
    ("referred", BillStatus.IN_COMMITTEE),
    ("reported", BillStatus.IN_COMMITTEE),
    ("passed_house", BillStatus.PASSED_HOUSE),
    ("passed:house", BillStatus.PASSED_HOUSE),
    ("pass_over:house", BillStatus.PASSED_HOUSE),
    ("passed_senate", BillStatus.PASSED_SENATE),
    ("passed:senate", BillStatus.PASSED_SENATE),
    ("pass_over:senate", BillStatus.PASSED_SENATE),
    ("enacted", BillStatus.SIGNED),
    ("veto", BillStatus.VETOED),
    ("fail", BillStatus.FAILED),
)

ID_PREFIX = "govtrack-"


def map_status(govtrack_status: Optional[str]) -> BillStatus:
    """
    Map a GovTrack ``current_status`` code onto a BillStatus.

    Example: "referred" -> BillStatus.IN_COMMITTEE; unknown -> ACTIVE
    """
    status = (govtrack_status or "").lower()
    for key, value in STATUS_MAP:
        if key in status:
            return value
    return BillStatus.ACTIVE


def derive_progress(govtrack_status: Optional[str]) -> BillProgress:
    status = (govtrack_status or "").lower()
    return BillProgress(
        introduced=True,
        committee="committee" in status or "referred" in status or "reported" in status,
        passed_house="passed_house" in status or ("house" in status and "pass" in status),
        passed_senate="passed_senate" in status or ("senate" in status and "pass" in status),
        signed="enacted" in status or "signed" in status,
    )


class GovTrackBillsAdapter(BaseAdapter[Bill]):
    """
    Adapter for fetching bills from GovTrack.

    Key features:
    - Free-text and status filtering passed straight to the API
    - Total match count from ``meta.total_count``
    - Retries transient failures, then falls back to the curated bill set

    Example:
        adapter = GovTrackBillsAdapter()
        response = await adapter.fetch(query="water", limit=20)
        bill = await adapter.fetch_by_id("govtrack-812345")
    """

    BASE_URL = "https://www.govtrack.us/api/v2"

    def __init__(
        self,
        base_url: str = BASE_URL,
        max_retries: int = 3,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        retry_wait: Any = None
    ):
        """Initialize GovTrack bills adapter"""
        super().__init__(
            source_name="govtrack",
            max_retries=max_retries,
            timeout_seconds=timeout_seconds,
            client=client,
            retry_wait=retry_wait
        )
        self.base_url = base_url.rstrip("/")

    async def fetch(
        self,
        query: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
        **kwargs: Any
    ) -> AdapterResponse[Bill]:
        """
        Search GovTrack bills.

        Args:
            query: Free-text search
            status: GovTrack ``current_status`` filter
            limit: Page size
            offset: Records to skip

        Returns:
            AdapterResponse of Bill; FALLBACK with curated bills on failure
        """
        start_time = utcnow()
        params: Dict[str, Any] = {
            "format": "json",
            "limit": limit,
            "offset": offset,
        }
        if query:
            params["q"] = query
        if status:
            params["current_status"] = status

        self.logger.info(f"Fetching bills: query={query!r}, status={status}, limit={limit}, offset={offset}")

        try:
            payload = await self._get_json(f"{self.base_url}/bill", params=params)
        except (httpx.HTTPError, ValueError) as e:
            return self._fallback(query, status, limit, offset, FallbackReason.UPSTREAM_ERROR, start_time, e)

        if not isinstance(payload, dict) or not isinstance(payload.get("objects"), list):
            return self._fallback(
                query, status, limit, offset, FallbackReason.MALFORMED_PAYLOAD, start_time,
                ValueError("GovTrack response has no 'objects' list")
            )

        bills, errors = self._normalize_all(payload["objects"])
        meta = payload.get("meta") or {}
        total = meta.get("total_count")
        self.logger.info(f"Fetched {len(bills)} bills ({len(errors)} failed)")
        return self._build_success_response(
            bills,
            errors,
            start_time,
            total=total if isinstance(total, int) else len(bills)
        )

    async def fetch_by_id(self, bill_id: str) -> Optional[Bill]:
        """
        Fetch one bill by GovTrack id.

        Args:
            bill_id: "govtrack-812345" or the bare numeric id

        Returns:
            Bill, or None when unknown or the API is unavailable
        """
        raw_id = bill_id[len(ID_PREFIX):] if bill_id.startswith(ID_PREFIX) else bill_id
        if not raw_id:
            return None
        try:
            payload = await self._get_json(f"{self.base_url}/bill/{raw_id}", params={"format": "json"})
            return self.normalize(payload)
        except httpx.HTTPStatusError as e:
            if e.response.status_code != 404:
                self.logger.warning(f"GovTrack lookup for {bill_id} failed: {e}")
            return None
        except (httpx.HTTPError, ValueError, TypeError, KeyError, AttributeError) as e:
            self.logger.warning(f"GovTrack lookup for {bill_id} failed: {e}")
            return None

    def normalize(self, raw_data: Dict[str, Any]) -> Bill:
        """
        Convert a GovTrack bill object to a Bill.

        Raises:
            ValueError: If id or title is missing
        """
        if not isinstance(raw_data, dict):
            raise ValueError("GovTrack bill must be an object")
        govtrack_id = raw_data.get("id")
        title = raw_data.get("title") or raw_data.get("title_without_number")
        if govtrack_id is None or not title:
            raise ValueError("GovTrack bill is missing id or title")

        current_status = raw_data.get("current_status") or ""
        subjects = [s for s in (raw_data.get("subjects") or []) if isinstance(s, str)]
        sponsor = raw_data.get("sponsor") or {}

        return Bill(
            id=f"{ID_PREFIX}{govtrack_id}",
            title=title,
            summary=raw_data.get("summary") or "",
            status=map_status(current_status),
            bill_type=raw_data.get("bill_type") or "",
            jurisdiction=Jurisdiction.FEDERAL,
            sponsor=sponsor.get("name") if isinstance(sponsor, dict) else None,
            introduced_date=parse_datetime(raw_data.get("introduced_date")),
            last_action=raw_data.get("current_status_description") or current_status,
            last_action_date=parse_datetime(raw_data.get("current_status_date")),
            url=raw_data.get("link"),
            categories=subjects,
            impact_tags=subjects[:5],
            progress=derive_progress(current_status),
        )

    def _fallback(
        self,
        query: Optional[str],
        status: Optional[str],
        limit: int,
        offset: int,
        reason: FallbackReason,
        start_time: datetime,
        error: Optional[BaseException] = None
    ) -> AdapterResponse[Bill]:
        bills: List[Bill] = fallback_bills()
        if query:
            bills = [b for b in bills if contains(b.title, query) or contains(b.summary, query)]
        if status:
            try:
                wanted = BillStatus(status)
            except ValueError:
                wanted = map_status(status)
            bills = [b for b in bills if b.status == wanted]
        response = self._build_fallback_response(bills[offset:offset + limit], reason, start_time, error)
        response.total = len(bills)
        return response
