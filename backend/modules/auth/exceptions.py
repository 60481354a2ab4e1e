"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which translate each ``code`` into an HTTP status and a
localized message pair.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not match."""

    def __init__(
        self,
        message: str = "Invalid authentication token",
        code: str = "INVALID_TOKEN",
    ):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token has passed its expiry time."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Access token required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Used for both an unknown email and a wrong password so callers cannot
    tell which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            f"User with this email already exists: {email}",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class AccountNotFoundError(NotFoundError):
    """Raised when an account operation targets a missing user."""

    def __init__(self, user_id: int):
        super().__init__(
            f"Account not found: {user_id}",
            code="ACCOUNT_NOT_FOUND",
            details={"user_id": user_id},
        )


class PasswordsRequiredError(ValidationError):
    """Raised when a password change omits either password."""

    def __init__(self):
        super().__init__(
            "Current password and new password are required",
            code="PASSWORDS_REQUIRED",
        )


class PasswordTooShortError(ValidationError):
    """Raised when a new password is below the minimum length."""

    def __init__(self, min_length: int):
        super().__init__(
            f"New password must be at least {min_length} characters long",
            code="PASSWORD_TOO_SHORT",
            details={"min_length": min_length},
        )


class WrongCurrentPasswordError(ValidationError):
    """Raised when the current password given for a change does not match."""

    def __init__(self):
        super().__init__("Current password is incorrect", code="WRONG_CURRENT_PASSWORD")


class UserDirectoryError(ExternalServiceError):
    """Raised when the user store fails or returns an unexpected result."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="user_directory",
            code="DIRECTORY_ERROR",
            details={"original_error": original_error},
        )
