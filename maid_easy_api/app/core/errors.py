"""
Error taxonomy and the top‑level exception boundary.

Handlers signal failures by raising one of the ``APIError`` subclasses
below.  ``register_exception_handlers`` installs FastAPI handlers that
turn them, request validation failures and any unexpected exception
into the JSON envelope ``{"message": ..., "errors": [...]}`` with the
HTTP status code carrying the classification.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        self.headers = headers
        super().__init__(self.message)


class ValidationError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation error"


class ConflictError(APIError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AuthenticationError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class InternalError(APIError):
    """Unexpected failure; ``detail`` is only shown in debug mode."""

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail


def error_body(message: str, errors: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = errors
    return body


def format_validation_errors(raw_errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs.

    The request section (``body``, ``path``, ``query``) is dropped from
    the location so clients see the field name they actually sent.
    """
    formatted = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in {"body", "path", "query", "header", "cookie"}:
            loc = loc[1:]
        formatted.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
    return formatted


def error_response(exc: APIError, debug: bool = False) -> JSONResponse:
    """Render ``exc`` as the JSON error envelope."""
    body = error_body(exc.message, exc.errors)
    detail = getattr(exc, "detail", None)
    if debug and detail:
        body["error"] = detail
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the error envelope handlers to ``app``.

    Request validation failures become ``ValidationError`` and any
    unexpected exception becomes ``InternalError``, so every error
    response is rendered from the same taxonomy.
    """

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc, settings.debug)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError(errors=format_validation_errors(list(exc.errors())))
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, error.errors)
        return error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(InternalError(detail=str(exc)), settings.debug)
