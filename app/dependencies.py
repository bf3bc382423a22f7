# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The Redis client, MongoDB client and Jinja2 templates are created once in
# app.main.lifespan and stored on app.state; these providers hand them to
# route handlers using Depends(). Tests swap them via app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from redis.asyncio import Redis

from app.config import settings
from core.models.user import USERS_COLLECTION
from core.services.user_service import UserService


def get_redis(request: Request) -> Redis:
    """Shared asyncio Redis client."""
    return request.app.state.redis


def get_templates(request: Request) -> Jinja2Templates:
    """Shared Jinja2 template environment."""
    return request.app.state.templates


def get_mongo(request: Request) -> AsyncMongoClient:
    """Shared asyncio MongoDB client."""
    return request.app.state.mongo


def get_users_collection(
    client: Annotated[AsyncMongoClient, Depends(get_mongo)],
) -> AsyncCollection:
    """The `users` collection of the configured database."""
    return client[settings.MONGODB_DATABASE][USERS_COLLECTION]


def get_user_service(
    collection: Annotated[AsyncCollection, Depends(get_users_collection)],
) -> UserService:
    """
    Get a UserService bound to the users collection.

    The service is cheap to build; the underlying client is shared.
    """
    return UserService(collection)


# Type aliases for dependency injection
RedisDep = Annotated[Redis, Depends(get_redis)]
MongoDep = Annotated[AsyncMongoClient, Depends(get_mongo)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
