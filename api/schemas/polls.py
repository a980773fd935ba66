"""Request/response schemas for poll endpoints."""

from typing import List, Optional

from civica.models.base import CivicaModel
from civica.models.poll import Poll


class PollListResponse(CivicaModel):
    polls: List[Poll]
    total: int


class VoteRequest(CivicaModel):
    selected_options: List[int]
    user_id: Optional[str] = None
