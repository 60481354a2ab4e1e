"""
Response envelope models.

Every API response, success or failure, uses the same envelope with a
bilingual message pair.
"""

from pydantic import BaseModel
from typing import Any, Optional


class FieldError(BaseModel):
    """A single request validation problem."""

    field: str
    message: str


class ApiResponse(BaseModel):
    """Standard response envelope."""

    success: bool
    message: str
    message_sw: str
    data: Optional[dict[str, Any]] = None
    errors: Optional[list[FieldError]] = None

    def render(self) -> dict[str, Any]:
        """JSON-ready dict, omitting ``data``/``errors`` when unset."""
        exclude = {name for name in ("data", "errors") if getattr(self, name) is None}
        return self.model_dump(mode="json", exclude=exclude)
