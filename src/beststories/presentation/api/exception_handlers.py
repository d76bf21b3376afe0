"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from beststories.domain.shared import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from beststories.domain.stories import StoryNotFoundError, StorySourceError

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    # 502 Bad Gateway - upstream answered, but not with a usable story
    ErrorCode.STORY_NOT_FOUND: status.HTTP_502_BAD_GATEWAY,
    # 503 Service Unavailable - upstream unreachable
    ErrorCode.UPSTREAM_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(StorySourceError)
    async def story_source_exception_handler(
        request: Request,
        exc: StorySourceError,
    ) -> JSONResponse:
        """Upstream failures are not our bug, so they get a generic message."""
        logger.warning(
            "Story source error on %s %s: %s (details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
        )
        return _create_error_response(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message="Hacker News is currently unavailable. Please try again later.",
            code=ErrorCode.UPSTREAM_UNAVAILABLE.value,
        )

    @app.exception_handler(StoryNotFoundError)
    async def story_not_found_exception_handler(
        request: Request,
        exc: StoryNotFoundError,
    ) -> JSONResponse:
        logger.warning(
            "Story %d vanished upstream on %s %s",
            exc.story_id,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_502_BAD_GATEWAY,
            message=exc.message,
            code=ErrorCode.STORY_NOT_FOUND.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
