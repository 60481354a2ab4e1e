"""
Authentication module data models.

These models define the stored user record, its public projections, the
token claims, and the request bodies accepted by the account endpoints.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AuthenticatedIdentity, Language

MIN_PASSWORD_LENGTH = 6

# Column widths of the users table
MAX_NAME_LENGTH = 100
MAX_PHONE_LENGTH = 32


def _normalize_email(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _require_name(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    return value.strip()


class User(BaseModel):
    """
    A row of the ``users`` table.

    Only the repository and the account service handle this model; it is
    the one place the password hash lives.
    """

    id: int
    email: str
    password_hash: str = Field(..., repr=False)
    first_name: str
    last_name: str
    phone: Optional[str] = None
    language: Language = Language.EN
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_profile(self) -> "UserProfile":
        return UserProfile(**self.model_dump(exclude={"password_hash"}))

    def to_identity(self) -> AuthenticatedIdentity:
        return AuthenticatedIdentity(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            language=self.language,
        )


class UserProfile(BaseModel):
    """Public projection of a user, safe to return to clients."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    phone: Optional[str] = Field(None, description="Phone number")
    language: Language = Field(default=Language.EN, description="Preferred language")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class NewUser(BaseModel):
    """Fields the directory needs to insert a user."""

    email: str
    password_hash: str = Field(..., repr=False)
    first_name: str
    last_name: str
    phone: Optional[str] = None
    language: Language = Language.EN


class TokenClaims(BaseModel):
    """Decoded access token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    @property
    def user_id(self) -> int:
        return int(self.sub)


class AuthResult(BaseModel):
    """Outcome of a successful registration or login."""

    user: UserProfile
    token: str


# -----------------------------------------------------------------------------
# Request bodies
# -----------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    first_name: str = Field(..., max_length=MAX_NAME_LENGTH)
    last_name: str = Field(..., max_length=MAX_NAME_LENGTH)
    phone: Optional[str] = Field(None, max_length=MAX_PHONE_LENGTH)
    language: Language = Language.EN

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return _require_name(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return _require_name(v, "Last name")


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)


class UpdateProfileRequest(BaseModel):
    """
    Request to update profile fields.

    Only fields present in the body are written. Sending ``phone: null``
    clears the phone number; names and language cannot be cleared.
    """

    first_name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)
    last_name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)
    phone: Optional[str] = Field(None, max_length=MAX_PHONE_LENGTH)
    language: Optional[Language] = None

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: Optional[str]) -> str:
        return _require_name(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: Optional[str]) -> str:
        return _require_name(v, "Last name")

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: Optional[Language]) -> Language:
        if v is None:
            raise ValueError("Language must be either en or sw")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, ready for storage."""
        return self.model_dump(mode="json", exclude_unset=True)


class ChangePasswordRequest(BaseModel):
    """
    Request to change the caller's password.

    Presence and length are checked by the account service so each failure
    gets its own error code.
    """

    current_password: Optional[str] = None
    new_password: Optional[str] = None
