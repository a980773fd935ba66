"""
Utility helpers for deduplicating fetched records.

Responsibility: Drop duplicate records by a key function and report how
many were removed.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def dedupe_by_key(
    records: Iterable[T],
    key_fn: Callable[[T], Optional[K]],
) -> Tuple[List[T], int]:
    """
    Keep the first record for each key, preserving order.

    Records whose key is None are dropped without counting as duplicates.

    Args:
        records: Records in priority order
        key_fn: Function used to compute the deduplication key

    Returns:
        Tuple of (unique_records, duplicate_count).
    """
    seen: set = set()
    unique: List[T] = []
    duplicates = 0

    for record in records:
        key = key_fn(record)
        if key is None:
            continue
        if key in seen:
            duplicates += 1
            continue
        seen.add(key)
        unique.append(record)

    return unique, duplicates
