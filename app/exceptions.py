# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the service as the same envelope: {"message": "..."}.
# Infrastructure errors keep their cause in the server log only.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from app.responses import http_bad_request, http_error, http_internal_server_error

logger = logging.getLogger(__name__)


class WebStarterException(Exception):
    """
    Base exception for the web starter.

    All custom exceptions inherit from this class. `message` is safe to
    show to clients; anything sensitive belongs in the log instead.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(WebStarterException):
    """Raised when a user ID doesn't exist or can't be parsed."""

    def __init__(self, user_id: str):
        # 400 rather than 404 is kept for client compatibility
        super().__init__(
            message=f"User not found for id {user_id}",
            status_code=400,
        )
        self.user_id = user_id


class DuplicateEmailError(WebStarterException):
    """Raised when creating a user whose email is taken (or can't be checked)."""

    def __init__(self, email: str):
        super().__init__(message="Already exists", status_code=400)
        self.email = email


class InvalidUpdateError(WebStarterException):
    """Raised when an update request carries nothing to apply."""

    def __init__(self, message: str = "Invalid parameters"):
        super().__init__(message=message, status_code=400)


# =============================================================================
# Infrastructure Exceptions
# =============================================================================

class DatabaseError(WebStarterException):
    """Raised when a MongoDB operation fails."""

    def __init__(self, message: str = "Database query error"):
        super().__init__(message=message, status_code=500)


class CacheError(WebStarterException):
    """Raised when a Redis operation fails."""

    def __init__(self, message: str = "Cache error"):
        super().__init__(message=message, status_code=500)


class TemplateRenderError(WebStarterException):
    """Raised when a Jinja2 template can't be rendered."""

    def __init__(self, template_name: str):
        super().__init__(message="Failed to render page", status_code=500)
        self.template_name = template_name


# =============================================================================
# Exception Handlers
# =============================================================================

async def webstarter_exception_handler(
    request: Request,
    exc: WebStarterException
) -> Response:
    """Convert WebStarterException to the error envelope."""
    return http_error(exc.status_code, exc.message)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> Response:
    """
    Handle request validation errors.

    Malformed path parameters or bodies are a client error (400), never 422.
    """
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return http_bad_request("Invalid parameters")


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> Response:
    """Log unexpected exceptions and answer with a generic 500."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return http_internal_server_error("Internal server error")
