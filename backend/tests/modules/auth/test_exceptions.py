import pytest

from modules.auth.exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    PasswordsRequiredError,
    PasswordTooShortError,
    UserDirectoryError,
    UserNotFoundError,
    WrongCurrentPasswordError,
)
from shared.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class TestAuthExceptions:
    @pytest.mark.parametrize(
        "error, code, base",
        [
            (InvalidTokenError(), "INVALID_TOKEN", AuthenticationError),
            (ExpiredTokenError(), "TOKEN_EXPIRED", InvalidTokenError),
            (MissingTokenError(), "MISSING_TOKEN", AuthenticationError),
            (UserNotFoundError(7), "USER_NOT_FOUND", AuthenticationError),
            (InvalidCredentialsError(), "INVALID_CREDENTIALS", AuthenticationError),
            (DuplicateEmailError("a@x.com"), "DUPLICATE_EMAIL", ValidationError),
            (AccountNotFoundError(7), "ACCOUNT_NOT_FOUND", NotFoundError),
            (PasswordsRequiredError(), "PASSWORDS_REQUIRED", ValidationError),
            (PasswordTooShortError(6), "PASSWORD_TOO_SHORT", ValidationError),
            (WrongCurrentPasswordError(), "WRONG_CURRENT_PASSWORD", ValidationError),
            (UserDirectoryError("boom"), "DIRECTORY_ERROR", ExternalServiceError),
        ],
    )
    def test_code_and_base(self, error, code, base):
        assert error.code == code
        assert isinstance(error, base)

    def test_missing_token_message(self):
        assert MissingTokenError().message == "Access token required"

    def test_invalid_token_custom_message(self):
        """The decoder's reason can be carried as the message."""
        error = InvalidTokenError("Signature verification failed")
        assert error.message == "Signature verification failed"
        assert error.code == "INVALID_TOKEN"

    def test_invalid_credentials_does_not_name_account(self):
        """The login failure must not reveal which part was wrong."""
        error = InvalidCredentialsError()
        assert error.details == {}
        assert error.message == "Invalid email or password"

    def test_password_too_short_details(self):
        assert PasswordTooShortError(6).details == {"min_length": 6}

    def test_user_directory_error_details(self):
        error = UserDirectoryError("Failed to fetch", original_error="timeout")
        assert error.details == {"original_error": "timeout", "service": "user_directory"}
