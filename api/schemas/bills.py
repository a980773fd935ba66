"""
Request/response schemas for bill endpoints.

Responsibility: Bill list and summary payloads
"""

from typing import List

from civica.models.assistant import Language
from civica.models.base import CivicaModel
from civica.models.bill import Bill


class BillListResponse(CivicaModel):
    """Page of bills. ``degraded`` is set when curated data stood in for GovTrack."""

    bills: List[Bill]
    total: int
    degraded: bool = False


class SummarizeRequest(CivicaModel):
    language: Language = "en"
