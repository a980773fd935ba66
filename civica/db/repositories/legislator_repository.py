"""
Repository for legislator directory records.

Responsibility: Legislator CRUD and state/district lookup
"""

from typing import Iterable, List, Optional

from ..query import equals_ci
from ..table import MemoryTable, Page, paginate
from ...models.legislator import Legislator, LegislatorPatch

DEFAULT_LEGISLATOR_LIMIT = 10


class LegislatorRepository:
    """Legislators in insertion order; filters are exact (case-insensitive)."""

    def __init__(self, table: MemoryTable[Legislator]):
        self.table = table

    def get(self, legislator_id: str) -> Optional[Legislator]:
        return self.table.get(legislator_id)

    def list(
        self,
        state: Optional[str] = None,
        district: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = DEFAULT_LEGISLATOR_LIMIT,
        offset: int = 0
    ) -> Page[Legislator]:
        def matches(legislator: Legislator) -> bool:
            if state and not equals_ci(legislator.state, state):
                return False
            if district and not equals_ci(legislator.district, district):
                return False
            if level and not equals_ci(legislator.level, level):
                return False
            return True

        return paginate(self.table.where(matches), limit, offset)

    def upsert(self, legislator: Legislator) -> Legislator:
        return self.table.put(legislator)

    def upsert_many(self, legislators: Iterable[Legislator]) -> List[Legislator]:
        return self.table.put_many(legislators)

    def update(self, legislator_id: str, patch: LegislatorPatch) -> Optional[Legislator]:
        return self.table.patch(legislator_id, patch)

    def delete(self, legislator_id: str) -> bool:
        return self.table.delete(legislator_id)
