# =============================================================================
# core/services/first_hit_service.py - Home Page Cache Reads
# =============================================================================
# Cache-aside lookup of the "first hit" timestamp: the ISO 8601 instant of
# the first home page request since the cache was last empty.
#
# - Hit: the stored string is returned as-is
# - Miss or read error: now() is written under the key and returned
# - Write error: raised as CacheError so the request fails with a 500
#
# There is no locking. Concurrent first requests may each write the key;
# the last write wins.
# =============================================================================

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.exceptions import CacheError
from lib.utils import utc_now_iso

logger = logging.getLogger(__name__)

FIRST_HIT_KEY = "first_hit"
HOME_MESSAGE_KEY = "home_message"


class FirstHitService:
    """Reads the values shown on the home page from Redis."""

    @staticmethod
    async def resolve(redis: Redis) -> str:
        """
        Return the first-hit timestamp, creating it on a cache miss.

        Args:
            redis: Shared asyncio Redis client (decode_responses=True)

        Returns:
            ISO 8601 timestamp string

        Raises:
            CacheError: If the fresh timestamp can't be written
        """
        try:
            cached = await redis.get(FIRST_HIT_KEY)
        except RedisError as e:
            logger.warning(f"Failed to read {FIRST_HIT_KEY} from cache: {e}")
            cached = None

        if cached is not None:
            return cached

        first_hit = utc_now_iso()
        try:
            await redis.set(FIRST_HIT_KEY, first_hit)
        except RedisError as e:
            logger.error(f"Failed to write {FIRST_HIT_KEY} to cache: {e}")
            raise CacheError() from e

        logger.info(f"Recorded first hit at {first_hit}")
        return first_hit

    @staticmethod
    async def get_message(redis: Redis) -> str | None:
        """
        Return the optional home page message, or None if unset.

        Raises:
            CacheError: If the read fails
        """
        try:
            return await redis.get(HOME_MESSAGE_KEY)
        except RedisError as e:
            logger.error(f"Failed to read {HOME_MESSAGE_KEY} from cache: {e}")
            raise CacheError() from e
