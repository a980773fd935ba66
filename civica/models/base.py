"""
Shared pydantic base classes for Civica entities.

Entities serialize with camelCase aliases (``summaryEs``, ``publishedAt``)
because that is what the web client consumes, and accept either spelling
on input.

Responsibility: Base model config and common field types
"""

from datetime import datetime
from typing import Annotated, Optional
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..utils.clock import as_utc, utcnow

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def new_id() -> str:
    """Generate an entity id for records created locally."""
    return str(uuid4())


class CivicaModel(BaseModel):
    """Base for every entity and request/response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Entity(CivicaModel):
    """A stored record identified by a string id."""

    id: str = Field(default_factory=new_id)


class TimestampedEntity(Entity):
    """Entity with creation and last-update timestamps."""

    created_at: UtcDatetime = Field(default_factory=utcnow)
    updated_at: UtcDatetime = Field(default_factory=utcnow)


class Patch(CivicaModel):
    """
    Partial update for an entity.

    Subclasses list exactly the mutable fields. Only fields explicitly set
    by the caller are merged; unknown fields are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def changes(self) -> dict:
        """Return the explicitly-set fields keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


OptionalUtcDatetime = Optional[UtcDatetime]
