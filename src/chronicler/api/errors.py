"""Exception handlers producing the ``{"success": false, ...}`` envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chronicler.api.schemas import ErrorResponse
from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.i18n import detect_language, error_message

logger = logging.getLogger(__name__)


def _envelope(
    request: Request,
    kind: ErrorKind,
    message: str,
    status_code: int | None = None,
    details: dict[str, object] | None = None,
) -> JSONResponse:
    language = detect_language(request.headers.get("accept-language"))
    body = ErrorResponse(
        error=error_message(kind, language),
        code=kind.code,
        message=message,
        details=details,
    )
    return JSONResponse(status_code=status_code or kind.http_status, content=body.model_dump(exclude_none=True))


async def chronicler_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ChroniclerError)
    logger.info("Rejected %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return _envelope(request, exc.kind, exc.message, details=exc.details)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg', 'invalid value')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return _envelope(request, ErrorKind.INVALID_FORMAT, message, status_code=400)


async def http_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code == 404:
        return _envelope(request, ErrorKind.NOT_FOUND, "Endpoint not found", status_code=404)
    kind = ErrorKind.INTERNAL_ERROR if exc.status_code >= 500 else ErrorKind.INVALID_FORMAT
    return _envelope(request, kind, str(exc.detail), status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(request, ErrorKind.INTERNAL_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ChroniclerError, chronicler_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
