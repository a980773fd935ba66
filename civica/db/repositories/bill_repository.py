"""
Repository for bill data operations.

Implements the repository pattern over the in-memory bill table with
filtered listing, upsert for cached GovTrack results, and patch updates.

Responsibility: Bill CRUD and query
"""

from typing import Iterable, List, Optional
import logging

from ..query import contains, newest_first
from ..table import MemoryTable, Page, paginate
from ...models.bill import Bill, BillPatch, BillStatus, Jurisdiction

logger = logging.getLogger(__name__)

DEFAULT_BILL_LIMIT = 20


class BillRepository:
    """
    Repository for bills.

    Example:
        repo = BillRepository(MemoryTable("bill"))
        repo.upsert(bill)
        page = repo.list(jurisdiction="state", limit=10)
    """

    def __init__(self, table: MemoryTable[Bill]):
        self.table = table

    def get(self, bill_id: str) -> Optional[Bill]:
        """Get bill by id; None when unknown."""
        return self.table.get(bill_id)

    def list(
        self,
        query: Optional[str] = None,
        status: Optional[BillStatus | str] = None,
        jurisdiction: Optional[Jurisdiction | str] = None,
        limit: int = DEFAULT_BILL_LIMIT,
        offset: int = 0
    ) -> Page[Bill]:
        """
        List bills matching every given filter, newest activity first.

        Args:
            query: Case-insensitive substring of title, summary or sponsor
            status: Exact status
            jurisdiction: Exact jurisdiction
            limit: Maximum results
            offset: Results to skip

        Returns:
            Page of bills plus the filtered total
        """
        status_value = BillStatus(status) if status else None
        jurisdiction_value = Jurisdiction(jurisdiction) if jurisdiction else None

        def matches(bill: Bill) -> bool:
            if query and not (
                contains(bill.title, query)
                or contains(bill.summary, query)
                or contains(bill.sponsor, query)
            ):
                return False
            if status_value and bill.status != status_value:
                return False
            if jurisdiction_value and bill.jurisdiction != jurisdiction_value:
                return False
            return True

        bills = newest_first(self.table.where(matches), Bill.recency_key)
        return paginate(bills, limit, offset)

    def upsert(self, bill: Bill) -> Bill:
        """Insert or replace by id. Idempotent."""
        return self.table.put(bill)

    def upsert_many(self, bills: Iterable[Bill]) -> List[Bill]:
        stored = self.table.put_many(bills)
        logger.debug(f"Cached {len(stored)} bills")
        return stored

    def update(self, bill_id: str, patch: BillPatch) -> Optional[Bill]:
        """Merge patch fields and refresh updated_at; None when unknown."""
        return self.table.patch(bill_id, patch)

    def delete(self, bill_id: str) -> bool:
        return self.table.delete(bill_id)
