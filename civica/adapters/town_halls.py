"""
Static town hall and civic event adapter.

Serves upcoming town halls, hearings and community forums around TX-23.
Dates are relative to the time of the call, so events are always upcoming.

Responsibility: Filtered access to the curated civic event calendar
"""

from datetime import datetime
from typing import Optional, Any, List

from .base_adapter import BaseAdapter
from .fallback_data import tx23_events
from ..db.query import contains
from ..models.event import CivicEvent, EventLevel
from ..models.adapter_models import AdapterResponse, FallbackReason
from ..utils.clock import as_utc, utcnow


class TownHallAdapter(BaseAdapter[CivicEvent]):
    """
    Example:
        adapter = TownHallAdapter()
        response = await adapter.fetch(level="local")
    """

    def __init__(self):
        super().__init__(source_name="town_halls")

    async def fetch(
        self,
        level: Optional[str] = None,
        location: Optional[str] = None,
        event_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        **kwargs: Any
    ) -> AdapterResponse[CivicEvent]:
        """Events matching every given filter, soonest first."""
        start_time = utcnow()
        events: List[CivicEvent] = tx23_events(start_time)
        if level:
            wanted = EventLevel(level)
            events = [e for e in events if e.level == wanted]
        if location:
            events = [e for e in events if contains(e.location, location) or contains(e.address, location)]
        if event_type:
            events = [e for e in events if e.event_type == event_type]
        if start_date:
            events = [e for e in events if e.date >= as_utc(start_date)]
        if end_date:
            events = [e for e in events if e.date <= as_utc(end_date)]
        events.sort(key=lambda event: event.date)
        return self._build_fallback_response(events, FallbackReason.STATIC_SOURCE, start_time)

    def normalize(self, raw_data: Any) -> CivicEvent:
        return CivicEvent.model_validate(raw_data)
