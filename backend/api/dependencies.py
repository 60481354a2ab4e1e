"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the auth
components. Each component is exposed through a dependency function, so
tests can replace any of them with ``app.dependency_overrides``.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports (avoids importing Supabase at module load)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAccountService, IUserDirectory
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._hasher: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None
        self._users: "IUserDirectory | None" = None
        self._accounts: "IAccountService | None" = None

    @property
    def hasher(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token service. Fails if JWT_SECRET is unset."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            settings = get_settings()
            self._tokens = TokenService(
                settings.jwt_secret,
                expiry=timedelta(days=settings.jwt_expiry_days),
            )
        return self._tokens

    @property
    def users(self) -> "IUserDirectory":
        """Get the user directory backed by Supabase."""
        if self._users is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._users = UserRepository(get_supabase_client())
        return self._users

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._accounts is None:
            from modules.auth.service import AccountService
            self._accounts = AccountService(
                directory=self.users,
                hasher=self.hasher,
                tokens=self.tokens,
            )
        return self._accounts

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different configuration.
        """
        self._hasher = None
        self._tokens = None
        self._users = None
        self._accounts = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_password_hasher() -> "PasswordHasher":
    """FastAPI dependency for the password hasher."""
    return get_container().hasher


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_user_directory() -> "IUserDirectory":
    """FastAPI dependency for the user directory."""
    return get_container().users


def get_account_service() -> "IAccountService":
    """FastAPI dependency for the account service."""
    return get_container().accounts
