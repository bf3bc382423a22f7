# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# REST resource mounted at /users:
# - GET    /users        list all users
# - GET    /users/{id}   get one user
# - POST   /users        create a user
# - PATCH  /users/{id}   partial update
# - DELETE /users/{id}   delete (idempotent)
#
# Handlers stay thin: UserService raises the domain exceptions and the
# handlers registered in app.main turn them into error envelopes.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse, Response

from app.dependencies import UserServiceDep
from app.responses import http_no_content, http_ok
from core.models.response import ErrorResponse
from core.models.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserIdResponse,
    UserResponse,
)

router = APIRouter()

# Path parameter shared by the item routes. Any string is accepted here;
# ids that aren't ObjectIds resolve to "not found" in the service.
UserIdPath = Annotated[str, Path(min_length=1, description="User ObjectId (24 hex chars)")]

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "User not found or invalid request"},
    500: {"model": ErrorResponse, "description": "Database error"},
}


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[UserResponse], responses=_ERROR_RESPONSES)
async def list_users(service: UserServiceDep) -> JSONResponse:
    """
    List all users.

    Returns an empty array when there are none.
    """
    users = await service.list_users()
    return http_ok(users)


@router.get("/{user_id}", response_model=UserResponse, responses=_ERROR_RESPONSES)
async def get_user(user_id: UserIdPath, service: UserServiceDep) -> JSONResponse:
    """Get a user by ID."""
    user = await service.get_user(user_id)
    return http_ok(user)


@router.post("", response_model=UserIdResponse, responses=_ERROR_RESPONSES)
async def create_user(request: CreateUserRequest, service: UserServiceDep) -> JSONResponse:
    """
    Create a new user.

    Fails with 400 if another user already has the same email.
    """
    user_id = await service.create_user(request)
    return http_ok(UserIdResponse(id=user_id))


@router.patch("/{user_id}", response_model=UserResponse, responses=_ERROR_RESPONSES)
async def update_user(
    user_id: UserIdPath,
    request: UpdateUserRequest,
    service: UserServiceDep,
) -> JSONResponse:
    """
    Update a user.

    Only the fields present in the body change. Returns the updated user.
    """
    user = await service.update_user(user_id, request)
    return http_ok(user)


@router.delete("/{user_id}", status_code=204, responses={500: _ERROR_RESPONSES[500]})
async def delete_user(user_id: UserIdPath, service: UserServiceDep) -> Response:
    """
    Delete a user.

    Always 204 unless the database fails, whether or not the user existed.
    """
    await service.delete_user(user_id)
    return http_no_content()
