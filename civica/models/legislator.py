"""
Legislator domain model.

Covers federal and state legislators as well as executive and local
officials (governor, mayor), which is why ``district`` is optional.

Responsibility: Legislator entity and patch
"""

from typing import Dict, List, Optional

from pydantic import Field

from .base import CivicaModel, Entity, Patch, UtcDatetime
from ..utils.clock import utcnow


class LegislatorActivity(CivicaModel):
    """Recent action shown on the legislator card."""
    action: str
    bill: str
    date: str


class Legislator(Entity):
    """Elected official record."""

    name: str
    title: str = Field(description="Office title, e.g. 'U.S. Senator', 'Mayor'")
    party: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = Field(
        default=None,
        description="District code; None for statewide or executive offices"
    )
    level: Optional[str] = Field(default=None, description="federal, state or local")
    office: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None
    biography: Optional[str] = None
    years_in_office: Optional[int] = Field(default=None, ge=0)
    bills_sponsored: int = Field(default=0, ge=0)
    recent_activity: List[LegislatorActivity] = Field(default_factory=list)
    social_media: Dict[str, str] = Field(default_factory=dict)
    updated_at: UtcDatetime = Field(default_factory=utcnow)


class LegislatorPatch(Patch):
    party: Optional[str] = None
    district: Optional[str] = None
    office: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None
    biography: Optional[str] = None
    years_in_office: Optional[int] = Field(default=None, ge=0)
    bills_sponsored: Optional[int] = Field(default=None, ge=0)
    recent_activity: Optional[List[LegislatorActivity]] = None
    social_media: Optional[Dict[str, str]] = None
