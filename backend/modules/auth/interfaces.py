"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory fakes and swapping
the user store without touching the account logic.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import (
    AuthResult,
    ChangePasswordRequest,
    LoginRequest,
    NewUser,
    RegisterRequest,
    UpdateProfileRequest,
    User,
    UserProfile,
)


@runtime_checkable
class IUserDirectory(Protocol):
    """
    Narrow contract the auth core needs from the user store.

    Implementations must enforce email uniqueness themselves and raise
    DuplicateEmailError when an insert collides.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None if no such user exists."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (normalized) email, or None."""
        ...

    def create(self, new_user: NewUser) -> User:
        """
        Insert a user and return the stored record.

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        ...

    def update_profile(self, user_id: int, changes: dict[str, Any]) -> Optional[User]:
        """Apply profile changes; returns the updated user or None if missing."""
        ...

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        """Replace the stored hash; returns False if the user is missing."""
        ...


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations exposed over HTTP.

    Every method takes already-parsed request models and raises module
    exceptions on failure; translating them to responses is the API
    layer's job.
    """

    async def register(self, request: RegisterRequest) -> AuthResult:
        """
        Create an account and issue its first token.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResult:
        """
        Verify credentials and issue a token.

        Raises:
            InvalidCredentialsError: For an unknown email or wrong password
        """
        ...

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Get the caller's profile.

        Raises:
            AccountNotFoundError: If the user no longer exists
        """
        ...

    async def update_profile(self, user_id: int, request: UpdateProfileRequest) -> UserProfile:
        """
        Update the caller's profile fields.

        Raises:
            AccountNotFoundError: If the user no longer exists
        """
        ...

    async def change_password(self, user_id: int, request: ChangePasswordRequest) -> None:
        """
        Replace the caller's password after checking the current one.

        Raises:
            PasswordsRequiredError, PasswordTooShortError,
            WrongCurrentPasswordError, AccountNotFoundError
        """
        ...
