"""
Static legislator directory adapter.

Serves the curated directory of officials representing TX-23: the U.S.
representative and senators, the governor, the district's state senator
and the San Antonio mayor. There is no live upstream, so every response
is a FALLBACK tagged ``static_source``.

Responsibility: Filtered access to the curated legislator directory
"""

from typing import Optional, Any, List

from .base_adapter import BaseAdapter
from .fallback_data import tx23_legislators
from ..db.query import equals_ci
from ..models.legislator import Legislator
from ..models.adapter_models import AdapterResponse, FallbackReason
from ..utils.clock import utcnow


class LegislatorDirectoryAdapter(BaseAdapter[Legislator]):
    """
    Example:
        adapter = LegislatorDirectoryAdapter()
        response = await adapter.fetch(state="TX", level="federal")
    """

    def __init__(self):
        super().__init__(source_name="legislator_directory")

    async def fetch(
        self,
        state: Optional[str] = None,
        district: Optional[str] = None,
        level: Optional[str] = None,
        **kwargs: Any
    ) -> AdapterResponse[Legislator]:
        """
        Directory entries matching every given filter.

        ``district`` matches either the entry's district or, for statewide
        offices with no district, any district in the same state.
        """
        start_time = utcnow()
        legislators: List[Legislator] = tx23_legislators()
        if state:
            legislators = [o for o in legislators if equals_ci(o.state, state)]
        if district:
            legislators = [o for o in legislators if o.district is None or equals_ci(o.district, district)]
        if level:
            legislators = [o for o in legislators if equals_ci(o.level, level)]
        return self._build_fallback_response(legislators, FallbackReason.STATIC_SOURCE, start_time)

    def normalize(self, raw_data: Any) -> Legislator:
        return Legislator.model_validate(raw_data)
