"""
In-memory entity table.

One MemoryTable holds every record of a single entity type, keyed by id in
insertion order. Stored records are pydantic models and are replaced on
write, never mutated in place.

None of these methods await, so on the asyncio event loop each call runs
to completion without interleaving with other requests.
``insert_if_absent`` relies on this to make check-then-insert atomic.

Responsibility: Keyed storage primitive shared by all repositories
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..errors import ConflictError, ValidationError
from ..models.base import Entity, Patch
from ..utils.clock import utcnow

T = TypeVar("T", bound=Entity)


@dataclass(slots=True)
class Page(Generic[T]):
    """A slice of a filtered, sorted collection plus the pre-slice count."""

    items: List[T] = field(default_factory=list)
    total: int = 0


def _describe(error: PydanticValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        message = detail.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid update"


def paginate(items: List[T], limit: int, offset: int = 0) -> Page[T]:
    """
    Slice an already filtered and sorted list.

    Raises:
        ValueError: If limit < 0 or offset < 0
    """
    if limit < 0 or offset < 0:
        raise ValueError("limit and offset must be non-negative")
    return Page(items=items[offset:offset + limit], total=len(items))


class MemoryTable(Generic[T]):
    """
    Insertion-ordered table of entities with a unique-key index.

    Example:
        table = MemoryTable[Bill]("bill")
        table.put(bill)
        table.get(bill.id)
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[str, T] = {}
        self._unique: Dict[Hashable, str] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._rows

    def get(self, entity_id: str) -> Optional[T]:
        return self._rows.get(entity_id)

    def values(self) -> List[T]:
        """Snapshot of all rows in insertion order."""
        return list(self._rows.values())

    def where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row for row in self._rows.values() if predicate(row)]

    def put(self, entity: T) -> T:
        """Insert or replace by id. Replacing keeps the original position."""
        self._rows[entity.id] = entity
        return entity

    def put_many(self, entities: Iterable[T]) -> List[T]:
        return [self.put(entity) for entity in entities]

    def insert_if_absent(self, key: Hashable, entity: T, *, message: str) -> T:
        """
        Insert ``entity`` only if no row already holds ``key``.

        Raises:
            ConflictError: If ``key`` is taken by an existing row
        """
        self.bind(key, entity.id, message=message)
        self._rows[entity.id] = entity
        return entity

    def bind(self, key: Hashable, entity_id: str, *, message: str) -> None:
        """
        Point a unique key at an existing or about-to-be-stored row.

        Raises:
            ConflictError: If another live row already holds ``key``
        """
        holder = self._unique.get(key)
        if holder is not None and holder != entity_id and holder in self._rows:
            raise ConflictError(message)
        self._unique[key] = entity_id

    def release(self, key: Hashable) -> None:
        """Free a unique key so a new row may claim it."""
        self._unique.pop(key, None)

    def patch(self, entity_id: str, patch: Patch) -> Optional[T]:
        """
        Merge the explicitly-set fields of ``patch`` into the stored row.

        Refreshes ``updated_at`` on entities that carry one.

        Returns:
            The updated entity, or None if ``entity_id`` is unknown
        """
        current = self._rows.get(entity_id)
        if current is None:
            return None
        return self.replace(current, **patch.changes())

    def replace(self, current: T, **changes) -> T:
        """Store a validated copy of ``current`` with ``changes`` applied."""
        updated = self.merged(current, **changes)
        self._rows[current.id] = updated
        return updated

    def merged(self, current: T, **changes) -> T:
        """
        Build a copy of ``current`` with ``changes`` applied, without storing it.

        The result is validated as a whole, so a patch cannot null out a
        required field or store a value of the wrong type.

        Raises:
            ValidationError: If the merged record is invalid
        """
        model = type(current)
        if "updated_at" in model.model_fields:
            changes.setdefault("updated_at", utcnow())
        values = {name: getattr(current, name) for name in model.model_fields}
        try:
            return model.model_validate({**values, **changes})
        except PydanticValidationError as e:
            raise ValidationError(_describe(e)) from e

    def delete(self, entity_id: str) -> bool:
        removed = self._rows.pop(entity_id, None)
        if removed is None:
            return False
        stale = [key for key, holder in self._unique.items() if holder == entity_id]
        for key in stale:
            del self._unique[key]
        return True

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        doomed = [row.id for row in self._rows.values() if predicate(row)]
        for entity_id in doomed:
            self.delete(entity_id)
        return len(doomed)
