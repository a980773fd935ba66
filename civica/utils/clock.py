"""Timestamp helpers. All stored datetimes are timezone-aware UTC."""

from datetime import UTC, datetime
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes so mixed inputs stay comparable."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO date or datetime string from an upstream API.

    Example: "2023-01-15" -> datetime(2023, 1, 15, tzinfo=UTC)
    """
    if not value:
        return None
    try:
        if "T" in value or " " in value.strip():
            return as_utc(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
        return datetime.strptime(value.strip(), "%Y-%m-%d").replace(tzinfo=UTC)
    except (ValueError, AttributeError):
        return None
