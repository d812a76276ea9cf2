"""Interface layer errors and the handlers that render them.

Domain errors raised anywhere below the routes surface here and are
mapped onto HTTP status codes, always wrapped in the response envelope.
"""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.config import Settings
from blog.domain.error import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from blog.interface.api.envelope import Envelope

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their bases
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_code_for(error: DomainError) -> int:
    """HTTP status code for a domain error (500 for unknown kinds)."""
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int, message: str, error: str | None = None
) -> JSONResponse:
    """Build an error envelope response."""
    body = Envelope(success=False, message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the "body"/"query"/"path" prefix, keep the field name
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    return f"{field}: {message}" if field else message


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install exception handlers on the application.

    Args:
        app: FastAPI application
        settings: Application settings (decides whether unexpected error
            messages are exposed)
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        code = status_code_for(exc)
        if code >= 500:
            return await handle_unexpected_error(request, exc)
        logfire.warn(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=code,
        )
        return error_response(code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _first_validation_message(exc)
        logfire.warn("Request validation failed", path=request.url.path, error=message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(status.HTTP_404_NOT_FOUND, "Route not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Something went wrong!",
            error=str(exc) if settings.exposes_errors else None,
        )
