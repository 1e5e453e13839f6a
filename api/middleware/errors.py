"""
Error handlers - render every failure as ``{"error": "<message>"}``.

Routes raise fastapi.HTTPException with the client-facing message as
detail. Anything unhandled becomes an opaque 500.
"""
import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "invalid JSON payload"
INTERNAL_ERROR = "internal server error"

# Messages for framework-raised errors whose detail is the HTTP phrase
DEFAULT_MESSAGES = {
    404: "not found",
    405: "method not allowed",
}


def error_response(status: int, message: str, headers=None) -> JSONResponse:
    """Build the JSON error body used by every endpoint."""
    return JSONResponse(status_code=status, content={"error": message}, headers=headers)


def _message_for(exc: StarletteHTTPException) -> str:
    if exc.status_code in DEFAULT_MESSAGES and _is_default_detail(exc):
        return DEFAULT_MESSAGES[exc.status_code]
    return str(exc.detail)


def _is_default_detail(exc: StarletteHTTPException) -> bool:
    return exc.detail == HTTPStatus(exc.status_code).phrase


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, _message_for(exc), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path/query/body parameters are client errors"""
    return error_response(400, INVALID_PAYLOAD)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log internally, never leak detail to the client"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
