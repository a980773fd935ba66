"""
Filtering and ordering helpers used by repository ``list`` methods.

Responsibility: Text match, identity keys and recency ordering
"""

import ipaddress
from datetime import datetime
from typing import Callable, Iterable, List, Optional, TypeVar

from ..errors import ValidationError
from ..utils.clock import EPOCH, as_utc

T = TypeVar("T")


def contains(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring match; None never matches."""
    return haystack is not None and needle.lower() in haystack.lower()


def equals_ci(value: Optional[str], expected: str) -> bool:
    return value is not None and value.strip().lower() == expected.strip().lower()


def newest_first(items: Iterable[T], date_of: Callable[[T], Optional[datetime]]) -> List[T]:
    """
    Sort by date descending; undated rows sort last.

    Ties keep insertion order, so pagination over an unchanged table is
    stable.
    """
    return sorted(items, key=lambda row: as_utc(date_of(row)) or EPOCH, reverse=True)


def oldest_first(items: Iterable[T], date_of: Callable[[T], Optional[datetime]]) -> List[T]:
    return sorted(items, key=lambda row: as_utc(date_of(row)) or EPOCH)


def normalize_ip(ip_address: Optional[str]) -> Optional[str]:
    """
    Canonical form of a client address.

    IPv4-mapped IPv6 addresses collapse to IPv4 so "::ffff:1.2.3.4" and
    "1.2.3.4" are the same voter. Unparseable values are kept verbatim.
    """
    if not ip_address:
        return None
    raw = ip_address.strip()
    try:
        parsed = ipaddress.ip_address(raw)
    except ValueError:
        return raw.lower()
    if isinstance(parsed, ipaddress.IPv6Address) and parsed.ipv4_mapped is not None:
        return str(parsed.ipv4_mapped)
    return str(parsed)


def voter_identity(user_id: Optional[str], ip_address: Optional[str]) -> str:
    """
    Identity a vote is de-duplicated on.

    Authenticated voters are keyed by user id only; the client address is
    used only when no user id is given.

    Raises:
        ValidationError: If neither a user id nor an address is available
    """
    if user_id:
        return f"user:{user_id}"
    address = normalize_ip(ip_address)
    if address:
        return f"ip:{address}"
    raise ValidationError("A user id or client address is required to vote")
