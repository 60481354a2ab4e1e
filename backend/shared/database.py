"""
Supabase client for the user directory.

The accounts API authenticates callers itself, so it reads and writes the
``users`` table with a single service-role client shared by all requests.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset.
            The API reports this as a 500 and logs the missing setting.
    """
    global _client

    if _client is None:
        settings = get_settings()
        missing = [
            name
            for name, value in (
                ("SUPABASE_URL", settings.supabase_url),
                ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Supabase configuration missing: {', '.join(missing)}",
                code="SUPABASE_CONFIG_MISSING",
                details={"missing": missing},
            )
        logger.info(f"Connecting user directory to {settings.supabase_url}")
        _client = create_client(settings.supabase_url, settings.supabase_service_role_key)

    return _client


def reset_client_cache() -> None:
    """Drop the cached client so the next call rebuilds it from settings."""
    global _client
    _client = None
