"""
Domain error taxonomy for Civica.

Every error raised by the store, services or route layer derives from
CivicaError and carries the HTTP status it maps to. The API layer turns
these into ``{"error": "<message>"}`` responses.

Responsibility: Exception classes shared by storage, services and API
"""

from typing import Optional


class CivicaError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(CivicaError):
    """Malformed request or a write that breaks an entity rule."""

    status_code = 400


class NotFoundError(CivicaError):
    """Unknown entity id."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(CivicaError):
    """A unique key (vote identity, username, RSVP email) is already taken."""

    status_code = 409


class AssistantUnavailableError(CivicaError):
    """The AI assistant is not configured or the upstream call failed."""

    status_code = 503


class AuthenticationError(CivicaError):
    """Unknown username or wrong password."""

    status_code = 401
