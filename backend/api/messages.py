"""
Localized response messages.

The core modules only know result and error codes. This table turns a code
into the HTTP status and the English/Swahili message pair sent to clients.
"""

from typing import Any, NamedTuple, Optional

from fastapi.responses import JSONResponse

from .models.responses import ApiResponse, FieldError


class MessagePair(NamedTuple):
    en: str
    sw: str


class ErrorEntry(NamedTuple):
    status_code: int
    message: MessagePair


INTERNAL_ERROR = "INTERNAL_ERROR"
VALIDATION_FAILED = "VALIDATION_FAILED"

_USER_NOT_FOUND = MessagePair("User not found", "Mtumiaji hakupatikana")
_INVALID_TOKEN = MessagePair("Invalid or expired token", "Tokeni si sahihi au imeisha muda")

ERRORS: dict[str, ErrorEntry] = {
    VALIDATION_FAILED: ErrorEntry(
        400, MessagePair("Validation failed", "Uthibitisho umeshindwa")
    ),
    "DUPLICATE_EMAIL": ErrorEntry(
        400,
        MessagePair(
            "User with this email already exists",
            "Mtumiaji wa barua pepe hii tayari yupo",
        ),
    ),
    "INVALID_CREDENTIALS": ErrorEntry(
        401, MessagePair("Invalid email or password", "Barua pepe au nenosiri si sahihi")
    ),
    "MISSING_TOKEN": ErrorEntry(
        401, MessagePair("Access token required", "Tokeni ya ufikiaji inahitajika")
    ),
    "INVALID_TOKEN": ErrorEntry(403, _INVALID_TOKEN),
    "TOKEN_EXPIRED": ErrorEntry(403, _INVALID_TOKEN),
    "USER_NOT_FOUND": ErrorEntry(401, _USER_NOT_FOUND),
    "ACCOUNT_NOT_FOUND": ErrorEntry(404, _USER_NOT_FOUND),
    "PASSWORDS_REQUIRED": ErrorEntry(
        400,
        MessagePair(
            "Current password and new password are required",
            "Nenosiri la sasa na nenosiri jipya vinahitajika",
        ),
    ),
    "PASSWORD_TOO_SHORT": ErrorEntry(
        400,
        MessagePair(
            "New password must be at least 6 characters long",
            "Nenosiri jipya lazima liwe na angalau herufi 6",
        ),
    ),
    "WRONG_CURRENT_PASSWORD": ErrorEntry(
        400, MessagePair("Current password is incorrect", "Nenosiri la sasa si sahihi")
    ),
    INTERNAL_ERROR: ErrorEntry(
        500, MessagePair("Internal server error", "Hitilafu ya ndani ya seva")
    ),
}

SUCCESS: dict[str, MessagePair] = {
    "REGISTERED": MessagePair(
        "User registered successfully", "Mtumiaji amesajiliwa kwa mafanikio"
    ),
    "LOGGED_IN": MessagePair("Login successful", "Kuingia kumefanikiwa"),
    "PROFILE_FETCHED": MessagePair("Profile retrieved", "Wasifu umepatikana"),
    "PROFILE_UPDATED": MessagePair(
        "Profile updated successfully", "Wasifu umesasishwa kwa mafanikio"
    ),
    "PASSWORD_CHANGED": MessagePair(
        "Password changed successfully", "Nenosiri limebadilishwa kwa mafanikio"
    ),
}


def resolve_error(code: str) -> ErrorEntry:
    """Look up an error code; unknown codes are reported as internal errors."""
    return ERRORS.get(code, ERRORS[INTERNAL_ERROR])


def success_response(
    code: str,
    data: Optional[dict[str, Any]] = None,
    status_code: int = 200,
) -> JSONResponse:
    """Build the success envelope for a result code."""
    message = SUCCESS[code]
    body = ApiResponse(success=True, message=message.en, message_sw=message.sw, data=data)
    return JSONResponse(
        status_code=status_code,
        content=body.render(),
    )


def error_response(
    code: str,
    errors: Optional[list[FieldError]] = None,
) -> JSONResponse:
    """Build the failure envelope for an error code."""
    entry = resolve_error(code)
    body = ApiResponse(
        success=False,
        message=entry.message.en,
        message_sw=entry.message.sw,
        errors=errors,
    )
    return JSONResponse(
        status_code=entry.status_code,
        content=body.render(),
    )
