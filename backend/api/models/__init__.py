"""API models package."""

from .responses import ApiResponse, FieldError

__all__ = [
    "ApiResponse",
    "FieldError",
]
