"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Union
from pydantic import BaseModel, Field


class Language(str, Enum):
    """Supported interface languages."""
    EN = "en"
    SW = "sw"


class AuthenticatedIdentity(BaseModel):
    """
    The caller of a request, as resolved by the auth gate.

    This is a read-only projection of the stored user, re-fetched on every
    request and handed to route handlers via dependency injection. It is
    never persisted or shared between requests.
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    language: Language = Field(default=Language.EN, description="Preferred language")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Anonymous(BaseModel):
    """A caller without a usable token."""

    model_config = {"frozen": True}


ANONYMOUS = Anonymous()

# Result of the optional auth gate
Identity = Union[AuthenticatedIdentity, Anonymous]
