"""
Structured replies from the AI assistant.

Responsibility: Chat, bill summary and translation result models
"""

from typing import List, Literal

from pydantic import Field, field_validator

from .base import CivicaModel

Language = Literal["en", "es"]


class ChatReply(CivicaModel):
    """Assistant answer to a chat message."""

    response: str
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    sources: List[str] = Field(default_factory=list)

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v):
        try:
            return min(max(float(v), 0.0), 1.0)
        except (TypeError, ValueError):
            return 0.0


class BillSummary(CivicaModel):
    """Plain-language bill summary at a 9th-grade reading level."""

    summary: str
    key_provisions: List[str] = Field(default_factory=list)
    potential_impact: str = ""
    reading_level: str = "9th grade"


class Translation(CivicaModel):
    translated_content: str
    source_language: Language
    target_language: Language
