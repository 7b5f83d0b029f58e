"""
Error handling for the API.

Every failure leaves the API as ``{"success": false, "error": <message>}``.
Expected failures are IMallError subclasses and carry their own status;
anything else becomes a 500 with a generic message and is logged here.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import IMallError, InternalError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = "Invalid request body"


def error_body(message: str) -> dict[str, Any]:
    """Build the uniform failure envelope."""
    return {"success": False, "error": message}


@contextmanager
def internal_error_boundary(message: str) -> Iterator[None]:
    """
    Convert unexpected exceptions into InternalError.

    Expected errors pass through untouched. The original exception is logged
    with its traceback; the client only ever sees ``message``.
    """
    try:
        yield
    except IMallError:
        raise
    except Exception as exc:
        logger.exception("%s: %s", message, type(exc).__name__)
        raise InternalError(message) from exc


async def imall_error_handler(request: Request, exc: IMallError) -> JSONResponse:
    """Render a domain error with its own status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.debug(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
        )

    headers: Optional[dict[str, str]] = None
    if exc.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first body validation failure as a 400."""
    return JSONResponse(
        status_code=400,
        content=error_body(first_validation_message(exc.errors())),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions that escaped every route boundary."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body(GENERIC_ERROR_MESSAGE))


def first_validation_message(errors: Any) -> str:
    """Turn the first entry of a pydantic error list into a short message."""
    if not errors:
        return INVALID_BODY_MESSAGE

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    if not location:
        return INVALID_BODY_MESSAGE
    return f"{'.'.join(location)}: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IMallError, imall_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
