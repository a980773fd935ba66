"""Utility helpers for generating deterministic content hashes.

Upstream news articles carry no stable id, so cached articles are keyed
by a hash of their canonical URL. Re-fetching the same article therefore
upserts the cached row instead of duplicating it.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any
from urllib.parse import urlsplit, urlunsplit


def _normalized_json(payload: Any) -> str:
    """Serialize payload to a deterministic JSON string."""
    return json.dumps(
        payload,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
    )


def calculate_hash(payload: Any) -> str:
    """Produce a SHA-256 hash for the given payload."""
    normalized = _normalized_json(payload)
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def canonical_url(url: str) -> str:
    """Lowercase scheme and host, drop the fragment and any trailing slash."""
    parts = urlsplit(url.strip())
    path = parts.path.rstrip("/") or "/"
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def url_id(url: str, prefix: str = "news") -> str:
    """
    Stable entity id for a URL.

    Example: url_id("https://example.com/a") -> "news-3b0f8d2c9a41e6f7"
    """
    return f"{prefix}-{calculate_hash(canonical_url(url))[:16]}"
