# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User document and request/response DTOs
# - home.py: Home page view model
# - response.py: Error envelope
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    USERS_COLLECTION,
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserIdResponse,
    UserResponse,
)
from .home import HomeData
from .response import ErrorResponse

__all__ = [
    # User
    "USERS_COLLECTION",
    "CreateUserRequest",
    "UpdateUserRequest",
    "User",
    "UserIdResponse",
    "UserResponse",
    # Home
    "HomeData",
    # Envelopes
    "ErrorResponse",
]
