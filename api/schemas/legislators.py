"""Response schemas for legislator endpoints."""

from typing import List

from civica.models.base import CivicaModel
from civica.models.legislator import Legislator


class LegislatorListResponse(CivicaModel):
    legislators: List[Legislator]
    total: int
