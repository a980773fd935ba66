"""
Adapter response models.

Defines the unified response structure returned by every external data
adapter. A response is either authoritative (data came from the upstream
API, possibly empty) or a fallback (upstream failed and the adapter's
static dataset was substituted). Callers check ``is_fallback`` instead of
catching exceptions.

Responsibility: Data transfer objects for adapter operations
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field


class AdapterStatus(str, Enum):
    """
    Status of an adapter operation.
    """
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"  # Some records failed to normalize
    FALLBACK = "fallback"  # Upstream failed; static dataset returned


class FallbackReason(str, Enum):
    """Why an adapter served fallback data."""
    NOT_CONFIGURED = "not_configured"  # e.g. missing API key
    UPSTREAM_ERROR = "upstream_error"  # timeout, non-2xx, connection failure
    MALFORMED_PAYLOAD = "malformed_payload"
    EMPTY_RESULT = "empty_result"  # upstream returned nothing usable
    STATIC_SOURCE = "static_source"  # adapter has no live upstream


class AdapterError(BaseModel):
    """
    Structured error information from adapter operations.
    """
    timestamp: datetime = Field(description="When the error occurred (UTC)")
    error_type: str = Field(description="Exception class name or error category")
    message: str = Field(description="Human-readable error message")
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (URL, record ID, etc.)"
    )
    retryable: bool = Field(
        default=False,
        description="Whether this error can be retried"
    )


class AdapterMetrics(BaseModel):
    """
    Operational metrics for adapter execution.
    """
    records_attempted: int = Field(ge=0)
    records_succeeded: int = Field(ge=0)
    records_failed: int = Field(ge=0)
    duration_seconds: float = Field(ge=0.0)


T = TypeVar('T')


class AdapterResponse(BaseModel, Generic[T]):
    """
    Unified response wrapper for all adapter operations.

    Generic type T is the normalized entity (Bill, NewsArticle, ...).
    ``total`` is the upstream's total match count where it reports one,
    otherwise the number of records in ``data``.
    """
    status: AdapterStatus = Field(description="Operation status")
    data: List[T] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    errors: List[AdapterError] = Field(default_factory=list)
    fallback_reason: Optional[FallbackReason] = None
    metrics: AdapterMetrics
    source: str = Field(description="Adapter/source identifier")
    fetch_timestamp: datetime = Field(description="When data was fetched (UTC)")

    @property
    def is_fallback(self) -> bool:
        return self.status == AdapterStatus.FALLBACK
