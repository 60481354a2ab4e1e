"""
Account service implementation.

Orchestrates the password hasher, token service and user directory for
registration, login, profile access and password changes.
"""

import asyncio
import logging

from .exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    InvalidCredentialsError,
    PasswordsRequiredError,
    PasswordTooShortError,
    WrongCurrentPasswordError,
)
from .interfaces import IAccountService, IUserDirectory
from .models import (
    MIN_PASSWORD_LENGTH,
    AuthResult,
    ChangePasswordRequest,
    LoginRequest,
    NewUser,
    RegisterRequest,
    UpdateProfileRequest,
    UserProfile,
)
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Implementation of the account operations.

    Request models arrive already validated, so every storage call happens
    after input checks. bcrypt and directory calls are blocking, so they run
    in worker threads and the event loop stays free.
    """

    def __init__(
        self,
        directory: IUserDirectory,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._directory = directory
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> AuthResult:
        """
        Create an account and issue its first token.

        The existence check and the insert are not atomic; the directory's
        unique constraint catches a concurrent registration and raises the
        same DuplicateEmailError.
        """
        email = str(request.email)
        if await asyncio.to_thread(self._directory.get_by_email, email) is not None:
            logger.warning(f"Registration rejected, email already registered: {email}")
            raise DuplicateEmailError(email)

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)
        user = await asyncio.to_thread(
            self._directory.create,
            NewUser(
                email=email,
                password_hash=password_hash,
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
                language=request.language,
            ),
        )

        token = self._tokens.issue(user.id)
        logger.info(f"Registered user {user.id}")
        return AuthResult(user=user.to_profile(), token=token)

    async def login(self, request: LoginRequest) -> AuthResult:
        """Verify credentials and issue a token."""
        email = str(request.email)
        user = await asyncio.to_thread(self._directory.get_by_email, email)
        if user is None:
            logger.warning(f"Login failed for {email}: no such user")
            raise InvalidCredentialsError()

        valid = await asyncio.to_thread(self._hasher.verify, request.password, user.password_hash)
        if not valid:
            logger.warning(f"Login failed for {email}: wrong password")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"Login successful for user {user.id}")
        return AuthResult(user=user.to_profile(), token=token)

    async def get_profile(self, user_id: int) -> UserProfile:
        """Get the caller's profile."""
        user = await asyncio.to_thread(self._directory.get_by_id, user_id)
        if user is None:
            raise AccountNotFoundError(user_id)
        return user.to_profile()

    async def update_profile(self, user_id: int, request: UpdateProfileRequest) -> UserProfile:
        """Write the fields present in ``request`` to the caller's profile."""
        user = await asyncio.to_thread(
            self._directory.update_profile, user_id, request.changes()
        )
        if user is None:
            raise AccountNotFoundError(user_id)
        logger.info(f"Updated profile for user {user_id}")
        return user.to_profile()

    async def change_password(self, user_id: int, request: ChangePasswordRequest) -> None:
        """
        Replace the caller's password.

        Tokens issued before the change are not revoked; they remain valid
        until they expire.
        """
        if not request.current_password or not request.new_password:
            raise PasswordsRequiredError()
        if len(request.new_password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)

        user = await asyncio.to_thread(self._directory.get_by_id, user_id)
        if user is None:
            raise AccountNotFoundError(user_id)

        valid = await asyncio.to_thread(
            self._hasher.verify, request.current_password, user.password_hash
        )
        if not valid:
            logger.warning(f"Password change rejected for user {user_id}: wrong current password")
            raise WrongCurrentPasswordError()

        new_hash = await asyncio.to_thread(self._hasher.hash, request.new_password)
        updated = await asyncio.to_thread(self._directory.update_password_hash, user_id, new_hash)
        if not updated:
            raise AccountNotFoundError(user_id)
        logger.info(f"Password changed for user {user_id}")
