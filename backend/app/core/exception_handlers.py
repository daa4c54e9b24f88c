"""Exception handlers for converting custom exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backend.app.core.exceptions import (
    IdeaTrackerException,
    ValidationFailedError,
    ResourceNotFoundError,
    ConflictError,
    UnauthorizedError,
    ForbiddenError,
)

logger = logging.getLogger(__name__)

_REQUEST_PARTS = {"body", "path", "query", "header", "cookie"}


def _error_body(message: str, error_type: str, field: str | None = None) -> dict:
    return {
        "message": message,
        "type": error_type,
        **({"field": field} if field else {}),
    }


async def idea_tracker_exception_handler(request: Request, exc: IdeaTrackerException) -> JSONResponse:
    """
    Handle all idea tracker exceptions and convert to appropriate HTTP responses.

    Args:
        request: The incoming request
        exc: The exception that was raised

    Returns:
        JSONResponse with appropriate status code and error details
    """
    # Duplicate username and duplicate upvote are reported as 400 to clients
    if isinstance(exc, (ValidationFailedError, ConflictError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, ResourceNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, UnauthorizedError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, ForbiddenError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.message, exc.__class__.__name__, exc.field),
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first request validation error as ``{message, field}`` with status 400."""
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Invalid request", "ValidationFailedError"),
        )

    first = errors[0]
    message = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
    location = [str(part) for part in first.get("loc", ())]
    if location and location[0] in _REQUEST_PARTS:
        location = location[1:]
    field = ".".join(location) or None

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(message, "ValidationFailedError", field),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log unexpected store failures and hide their details from the caller."""
    logger.exception(f"[DB] Unexpected database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", "InternalError"),
    )


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(IdeaTrackerException, idea_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
