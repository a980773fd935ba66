"""
Base adapter interface for all data sources.

Defines the contract that all adapters (GovTrack, NewsAPI, directories)
must implement. Ensures consistent error handling, retries, and response
format across all data sources.

Responsibility: Abstract base class defining adapter contract
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, TypeVar, Any, Dict, List, Optional
import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from ..models.adapter_models import (
    AdapterResponse,
    AdapterStatus,
    AdapterError,
    AdapterMetrics,
    FallbackReason,
)
from ..utils.clock import utcnow


# Generic type for normalized data models
T = TypeVar('T')


def is_transient_error(error: BaseException) -> bool:
    """Timeouts, connection failures, 5xx and 429 are worth retrying."""
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status >= 500 or status == 429
    return isinstance(error, httpx.TransportError)


class BaseAdapter(ABC, Generic[T]):
    """
    Abstract base class for all data source adapters.

    Every adapter MUST:
    1. Implement fetch() method to retrieve data
    2. Implement normalize() method to convert raw data to domain models
    3. Return AdapterResponse with normalized data or its fallback dataset
    4. Log all operations for observability

    Subclasses should NOT:
    - Raise exceptions from fetch() (serve fallback data instead)
    - Make synchronous blocking calls (use async/await)
    - Store state between fetch() calls (each call should be independent)
    """

    def __init__(
        self,
        source_name: str,
        max_retries: int = 3,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        retry_wait: Any = None
    ):
        """
        Initialize base adapter.

        Args:
            source_name: Identifier for this adapter (e.g., "govtrack")
            max_retries: Attempts for transient HTTP errors
            timeout_seconds: Request timeout in seconds
            client: Shared HTTP client; one is created on first use if omitted
            retry_wait: tenacity wait strategy between attempts
        """
        self.source_name = source_name
        self.max_retries = max(1, max_retries)
        self.timeout_seconds = timeout_seconds
        self.retry_wait = retry_wait or wait_exponential(min=1, max=10)

        self._client = client
        self._owns_client = client is None

        # Set up logger
        self.logger = logging.getLogger(f"adapter.{source_name}")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_seconds,
                headers={
                    "User-Agent": "Civica/1.0",
                    "Accept": "application/json"
                },
                follow_redirects=True
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    async def fetch(self, **kwargs: Any) -> AdapterResponse[T]:
        """
        Fetch data from the source.

        Args:
            **kwargs: Source-specific parameters (e.g., query, limit)

        Returns:
            AdapterResponse containing normalized records, errors, and metrics
        """
        pass

    @abstractmethod
    def normalize(self, raw_data: Any) -> T:
        """
        Normalize raw source data into unified domain model.

        Args:
            raw_data: Raw record from the source (JSON dict)

        Returns:
            Normalized domain model instance

        Raises:
            ValueError: If raw_data cannot be normalized (caught by fetch())
        """
        pass

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a JSON document, retrying transient failures.

        Raises:
            httpx.HTTPError: After the final attempt, or on non-transient errors
            ValueError: If the body is not JSON
        """
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception(is_transient_error),
            reraise=True
        ):
            with attempt:
                self.logger.debug(f"GET {url}")
                response = await self.client.get(url, params=params)
                response.raise_for_status()
                return response.json()

    def _normalize_all(self, raw_records: List[Any]) -> tuple[List[T], List[AdapterError]]:
        """Normalize each record, collecting per-record failures."""
        records: List[T] = []
        errors: List[AdapterError] = []
        for raw in raw_records:
            try:
                records.append(self.normalize(raw))
            except (ValueError, TypeError, KeyError, AttributeError) as e:
                self.logger.warning(f"Failed to normalize record: {e}")
                errors.append(self._error(e, retryable=False))
        return records, errors

    def _error(self, error: BaseException, retryable: Optional[bool] = None, **context: Any) -> AdapterError:
        return AdapterError(
            timestamp=utcnow(),
            error_type=type(error).__name__,
            message=str(error),
            context={"adapter": self.source_name, **context},
            retryable=is_transient_error(error) if retryable is None else retryable
        )

    def _build_success_response(
        self,
        data: List[T],
        errors: List[AdapterError],
        start_time: datetime,
        total: Optional[int] = None
    ) -> AdapterResponse[T]:
        """
        Build a successful AdapterResponse.

        Helper method to construct response with calculated metrics.
        """
        end_time = utcnow()
        duration = (end_time - start_time).total_seconds()

        # Determine status
        if not errors:
            status = AdapterStatus.SUCCESS
        else:
            status = AdapterStatus.PARTIAL_SUCCESS

        return AdapterResponse(
            status=status,
            data=data,
            total=len(data) if total is None else max(total, 0),
            errors=errors,
            metrics=AdapterMetrics(
                records_attempted=len(data) + len(errors),
                records_succeeded=len(data),
                records_failed=len(errors),
                duration_seconds=max(duration, 0.0)
            ),
            source=self.source_name,
            fetch_timestamp=end_time
        )

    def _build_fallback_response(
        self,
        data: List[T],
        reason: FallbackReason,
        start_time: datetime,
        error: Optional[BaseException] = None
    ) -> AdapterResponse[T]:
        """
        Build a FALLBACK AdapterResponse carrying the static dataset.

        Used when the upstream cannot be used (no key, unavailable, bad payload).
        """
        end_time = utcnow()
        duration = (end_time - start_time).total_seconds()

        errors = [self._error(error)] if error is not None else []
        if error is not None:
            self.logger.warning(f"Serving fallback data ({reason.value}): {error}")
        else:
            self.logger.info(f"Serving fallback data ({reason.value})")

        return AdapterResponse(
            status=AdapterStatus.FALLBACK,
            data=data,
            total=len(data),
            errors=errors,
            fallback_reason=reason,
            metrics=AdapterMetrics(
                records_attempted=0,
                records_succeeded=len(data),
                records_failed=0,
                duration_seconds=max(duration, 0.0)
            ),
            source=self.source_name,
            fetch_timestamp=end_time
        )
