# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - redis_client.py: asyncio Redis connection factory
# - mongo_client.py: asyncio MongoDB connection factory
# - utils.py: Shared utilities (error base class, ObjectId parsing, clock)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.redis_client import RedisClientError, connect_redis
from lib.mongo_client import MongoClientError, connect_mongo, ensure_user_indexes
from lib.utils import ApplicationError, parse_object_id, utc_now_iso

__all__ = [
    # Redis
    "RedisClientError",
    "connect_redis",
    # MongoDB
    "MongoClientError",
    "connect_mongo",
    "ensure_user_indexes",
    # Utils
    "ApplicationError",
    "parse_object_id",
    "utc_now_iso",
]
