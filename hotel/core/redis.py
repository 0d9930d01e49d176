import redis
from redis.exceptions import RedisError

from hotel.core.config import REDIS_URL
from hotel.core.errors import PersistenceError
from hotel.core.logging_config import get_logger

logger = get_logger()

_redis_client = None


def get_redis_client(redis_url: str | None = None):
    """Return a connected client, reusing the first one created.

    Raises PersistenceError when no URL is configured or the server is down,
    since the store cannot start without its slot backend.
    """
    global _redis_client

    if _redis_client is not None:
        return _redis_client

    redis_url = redis_url or REDIS_URL
    if not redis_url:
        raise PersistenceError("REDIS_URL is not configured")

    try:
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        client.ping()
    except RedisError as e:
        logger.error(f"Redis unavailable: {e}")
        raise PersistenceError(f"Redis unavailable: {e}") from e

    logger.info("Redis connected")
    _redis_client = client
    return _redis_client
