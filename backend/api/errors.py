"""
Exception handlers.

Translates module exceptions and request validation failures into the
standard response envelope. Internal details are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import ChakulaError
from .messages import ERRORS, INTERNAL_ERROR, VALIDATION_FAILED, error_response
from .models.responses import FieldError

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    # drop the leading "body"/"query" marker
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body failed schema validation: 400 with per-field errors."""
    errors = [
        FieldError(field=_field_name(tuple(err.get("loc", ()))), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    return error_response(VALIDATION_FAILED, errors=errors)


async def handle_chakula_error(request: Request, exc: ChakulaError) -> JSONResponse:
    """Known domain error: status and message come from the code table."""
    if exc.code not in ERRORS:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.to_dict()}",
            exc_info=exc,
        )
        return error_response(INTERNAL_ERROR)
    return error_response(exc.code)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500; the traceback stays in the server log."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ChakulaError, handle_chakula_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
