# =============================================================================
# lib/mongo_client.py - MongoDB Connection Factory
# =============================================================================
# Opens the asyncio MongoDB client used as the document store.
#
# Like the Redis client, it is created once at startup and shared by all
# requests. Pymongo's connection pool serializes nothing on our side.
#
# Usage:
#   from lib.mongo_client import connect_mongo
#   client = await connect_mongo(settings.MONGODB_URI, timeout_ms=5000)
#   users = client[settings.MONGODB_DATABASE]["users"]
# =============================================================================

from __future__ import annotations

import logging

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class MongoClientError(ApplicationError):
    """Raised when the MongoDB client can't be initialized."""

    def __init__(self, message: str, code: str = "MONGODB_CONNECT_FAILED"):
        super().__init__(
            message=message,
            code=code,
            suggestion="Check MONGODB_URI and that the MongoDB server is reachable",
        )


async def connect_mongo(uri: str, timeout_ms: int) -> AsyncMongoClient:
    """
    Create a MongoDB client and verify the deployment answers ping.

    Args:
        uri: MongoDB connection string
        timeout_ms: Server selection and connect timeout in milliseconds

    Returns:
        Connected AsyncMongoClient

    Raises:
        MongoClientError: If the deployment can't be reached
    """
    client: AsyncMongoClient = AsyncMongoClient(
        uri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        await client.close()
        raise MongoClientError(f"Failed to connect to MongoDB: {e}") from e

    logger.info("MongoDB client initialized successfully")
    return client


async def ensure_user_indexes(collection: AsyncCollection) -> None:
    """
    Create a unique index on email.

    Optional (MONGODB_CREATE_INDEXES). Fails if existing documents already
    share an email.
    """
    try:
        await collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
    except PyMongoError as e:
        raise MongoClientError(
            f"Failed to create unique email index: {e}",
            code="MONGODB_INDEX_FAILED",
        ) from e
    logger.info(f"Ensured unique email index on {collection.name}")
