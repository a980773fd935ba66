"""
Utilities package for Civica.

This package contains reusable helpers for:
- UTC timestamps and date parsing
- Content hashing and stable ids
- Record deduplication

Keyword extraction lives in ``civica.utils.text`` and is imported directly.
"""

from .clock import EPOCH, as_utc, parse_datetime, utcnow
from .hash_utils import calculate_hash, canonical_url, url_id
from .dedupe import dedupe_by_key

__all__ = [
    "EPOCH",
    "as_utc",
    "parse_datetime",
    "utcnow",
    "calculate_hash",
    "canonical_url",
    "url_id",
    "dedupe_by_key",
]
