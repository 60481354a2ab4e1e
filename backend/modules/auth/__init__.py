"""
Authentication module.

Handles password hashing, access tokens, the user directory, and the
account operations (register, login, profile, password change).

Public API:
- IAccountService / IUserDirectory: Interfaces for account operations and storage
- PasswordHasher: bcrypt hashing
- TokenService: JWT issuance and verification
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAccountService, IUserDirectory
from .models import (
    AuthResult,
    ChangePasswordRequest,
    LoginRequest,
    NewUser,
    RegisterRequest,
    TokenClaims,
    UpdateProfileRequest,
    User,
    UserProfile,
)
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    DuplicateEmailError,
    AccountNotFoundError,
    PasswordsRequiredError,
    PasswordTooShortError,
    WrongCurrentPasswordError,
    UserDirectoryError,
)

__all__ = [
    # Interfaces
    "IAccountService",
    "IUserDirectory",
    # Components
    "PasswordHasher",
    "TokenService",
    # Models
    "AuthResult",
    "ChangePasswordRequest",
    "LoginRequest",
    "NewUser",
    "RegisterRequest",
    "TokenClaims",
    "UpdateProfileRequest",
    "User",
    "UserProfile",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "DuplicateEmailError",
    "AccountNotFoundError",
    "PasswordsRequiredError",
    "PasswordTooShortError",
    "WrongCurrentPasswordError",
    "UserDirectoryError",
]
