"""
Base exception classes for the Chakula backend.

Each module should define its own exceptions that inherit from these bases.
Every exception carries a stable ``code``; the API layer maps codes to
HTTP statuses and localized messages.
"""

from typing import Optional, Any


class ChakulaError(Exception):
    """
    Base exception for all Chakula errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and diagnostics."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ChakulaError):
    """Resource not found."""

    pass


class ValidationError(ChakulaError):
    """Input validation failed."""

    pass


class AuthenticationError(ChakulaError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConfigurationError(ChakulaError):
    """Required configuration is missing or invalid."""

    pass


class ExternalServiceError(ChakulaError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
