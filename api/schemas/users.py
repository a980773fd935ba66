"""Request schemas for account endpoints."""

from pydantic import Field

from civica.models.base import CivicaModel


class LoginRequest(CivicaModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
