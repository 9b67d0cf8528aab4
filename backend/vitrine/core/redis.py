"""Redis client for the analytics result cache."""

import logging

import redis.asyncio as redis
from fastapi import Request
from redis.exceptions import RedisError

from vitrine.core.config import settings

logger = logging.getLogger(__name__)

# Connection pool settings
SOCKET_TIMEOUT = 2.0  # seconds
SOCKET_CONNECT_TIMEOUT = 2.0  # seconds
RETRY_ON_TIMEOUT = True
MAX_CONNECTIONS = 10


def create_redis_client() -> redis.Redis:
    """Create a new Redis client that owns its connection pool.

    Used by the FastAPI lifespan to attach a managed client to ``app.state``.
    The caller is responsible for closing the returned client on shutdown;
    ``aclose()`` also disconnects the pool.
    """
    return redis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
        socket_timeout=SOCKET_TIMEOUT,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        retry_on_timeout=RETRY_ON_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
    )


async def get_redis_dep(request: Request) -> redis.Redis:
    """FastAPI dependency — returns the Redis client from ``app.state``."""
    return request.app.state.redis  # type: ignore[no-any-return]


async def safe_redis_ping(*, client: redis.Redis) -> bool:
    """Check connectivity. Returns False when Redis is unavailable."""
    try:
        return bool(await client.ping())
    except RedisError as e:
        logger.warning(f"Redis PING failed: {e}")
        return False


async def safe_redis_get(key: str, *, client: redis.Redis) -> str | None:
    """Get a key, treating any Redis failure as a miss."""
    try:
        value: str | None = await client.get(key)
        return value
    except RedisError as e:
        logger.warning(f"Redis GET failed for {key}: {e}")
        return None


async def safe_redis_setex(key: str, ttl: int, value: str, *, client: redis.Redis) -> bool:
    """Set key with expiration, with error handling.

    Returns:
        True if successful, False otherwise.
    """
    try:
        await client.setex(key, ttl, value)
        return True
    except RedisError as e:
        logger.warning(f"Redis SETEX failed for {key}: {e}")
        return False


async def safe_redis_incr(key: str, *, client: redis.Redis) -> int | None:
    """Increment a counter key. Returns the new value, or None when Redis is unavailable."""
    try:
        result: int = await client.incr(key)
        return result
    except RedisError as e:
        logger.warning(f"Redis INCR failed for {key}: {e}")
        return None
