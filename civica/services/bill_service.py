"""
Bill lookup service.

Federal bills come from GovTrack and are cached into the store as they are
seen; state, local and district bills are read straight from the store.

Responsibility: Coordinate the GovTrack adapter, bill cache and assistant
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .assistant import CivicaAssistant
from ..adapters.govtrack_bills import ID_PREFIX, GovTrackBillsAdapter
from ..db.store import MemoryStore
from ..errors import AssistantUnavailableError, NotFoundError, ValidationError
from ..models.assistant import BillSummary, Language
from ..models.bill import Bill, BillPatch, BillStatus, Jurisdiction

logger = logging.getLogger(__name__)


@dataclass
class BillSearchResult:
    bills: List[Bill] = field(default_factory=list)
    total: int = 0
    degraded: bool = False


class BillService:
    """
    Search, fetch and summarize bills.

    Example:
        service = BillService(store, GovTrackBillsAdapter(), assistant)
        result = await service.search(query="water", jurisdiction="federal")
        bill = await service.get("govtrack-812345")
    """

    def __init__(
        self,
        store: MemoryStore,
        govtrack: GovTrackBillsAdapter,
        assistant: Optional[CivicaAssistant] = None
    ):
        self.store = store
        self.govtrack = govtrack
        self.assistant = assistant

    async def search(
        self,
        query: Optional[str] = None,
        status: Optional[str] = None,
        jurisdiction: Optional[Jurisdiction | str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> BillSearchResult:
        """
        Search bills for one jurisdiction.

        Args:
            query: Free-text search
            status: Status filter
            jurisdiction: federal (default), state, local or district
            limit: Page size
            offset: Records to skip

        Returns:
            BillSearchResult; ``degraded`` is set when GovTrack was
            unavailable and curated bills were served instead
        """
        scope = Jurisdiction(jurisdiction) if jurisdiction else Jurisdiction.FEDERAL

        if scope != Jurisdiction.FEDERAL:
            if status and status not in {s.value for s in BillStatus}:
                raise ValidationError(f"Unknown bill status: {status}")
            page = self.store.bills.list(
                query=query,
                status=status,
                jurisdiction=scope,
                limit=limit,
                offset=offset,
            )
            return BillSearchResult(bills=page.items, total=page.total)

        response = await self.govtrack.fetch(query=query, status=status, limit=limit, offset=offset)
        bills = self.store.bills.upsert_many(response.data)
        if response.is_fallback:
            logger.warning(
                f"GovTrack unavailable ({response.fallback_reason.value}), "
                f"serving {len(bills)} curated bills"
            )
        return BillSearchResult(bills=bills, total=response.total, degraded=response.is_fallback)

    async def get(self, bill_id: str) -> Bill:
        """
        Get a bill from the cache, looking GovTrack ids up upstream on a miss.

        Raises:
            NotFoundError: Unknown bill
        """
        bill = self.store.bills.get(bill_id)
        if bill is not None:
            return bill

        if bill_id.startswith(ID_PREFIX):
            bill = await self.govtrack.fetch_by_id(bill_id)
            if bill is not None:
                return self.store.bills.upsert(bill)

        raise NotFoundError("Bill", bill_id)

    async def summarize(self, bill_id: str, language: Language = "en") -> BillSummary:
        """
        Plain-language summary of a bill.

        Spanish summaries are kept on the bill as ``summary_es``.

        Raises:
            NotFoundError: Unknown bill
            AssistantUnavailableError: Assistant not configured or failing
        """
        bill = await self.get(bill_id)
        if self.assistant is None:
            raise AssistantUnavailableError("AI assistant is not configured")

        text = f"{bill.title}\n\n{bill.summary or ''}".strip()
        summary = await self.assistant.summarize_bill(text, language)

        if language == "es":
            self.store.bills.update(bill.id, BillPatch(summary_es=summary.summary))
            logger.info(f"Saved Spanish summary for {bill.id}")
        return summary
