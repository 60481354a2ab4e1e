"""
Shared infrastructure for the Chakula backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Request identity types

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ChakulaError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
)
from .models import ANONYMOUS, Anonymous, AuthenticatedIdentity, Identity, Language

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ChakulaError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConfigurationError",
    "ExternalServiceError",
    "ANONYMOUS",
    "Anonymous",
    "AuthenticatedIdentity",
    "Identity",
    "Language",
]
