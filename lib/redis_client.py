# =============================================================================
# lib/redis_client.py - Redis Connection Factory
# =============================================================================
# Opens the asyncio Redis client used as the application cache.
#
# The client is created once at startup (see app.main.lifespan) and shared by
# every request; redis-py's connection pool makes it safe for concurrent use.
#
# Usage:
#   from lib.redis_client import connect_redis
#   redis = await connect_redis(settings.REDIS_URL, timeout=5.0)
#   await redis.get("first_hit")
# =============================================================================

from __future__ import annotations

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class RedisClientError(ApplicationError):
    """Raised when the Redis client can't be initialized."""

    def __init__(self, message: str, url: str):
        super().__init__(
            message=message,
            code="REDIS_CONNECT_FAILED",
            suggestion="Check REDIS_URL and that the Redis server is reachable",
            details={"url": url},
        )


async def connect_redis(url: str, timeout: float) -> aioredis.Redis:
    """
    Create a Redis client and verify the server answers PING.

    Args:
        url: Redis connection URL (e.g. redis://localhost:6379/0)
        timeout: Connect and socket timeout in seconds

    Returns:
        Redis client returning str values (decode_responses=True)

    Raises:
        RedisClientError: If the server can't be reached
    """
    client = aioredis.from_url(
        url,
        decode_responses=True,
        socket_connect_timeout=timeout,
        socket_timeout=timeout,
    )
    try:
        await client.ping()
    except RedisError as e:
        await client.aclose()
        raise RedisClientError(f"Failed to connect to Redis: {e}", url) from e

    logger.info("Redis client initialized successfully")
    return client
