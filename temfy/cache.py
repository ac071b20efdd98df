"""Redis connection handle.

The service opens a Redis connection at startup and closes it on shutdown;
no request path reads or writes the cache yet.
"""

import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)


class RedisCache:
    """Owns the Redis client lifecycle and health check."""

    def __init__(self, url: str, enabled: bool = True, client: Optional[redis.Redis] = None):
        self._url = url
        self._enabled = enabled
        self._client = client

        if not self._enabled:
            logger.info("Redis is disabled, cache will not connect")

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def client(self) -> Optional[redis.Redis]:
        return self._client

    def connect(self) -> None:
        """Create the client and verify it with a PING.

        Raises:
            redis.RedisError: If the server cannot be reached
        """
        if not self._enabled:
            return
        if self._client is None:
            self._client = redis.Redis.from_url(
                self._url,
                decode_responses=True,
                socket_connect_timeout=5,
                health_check_interval=30,
            )
        try:
            self._client.ping()
        except redis.RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise
        logger.info("Redis connection established successfully")

    def ping(self) -> bool:
        """Return True if Redis answers, False if disabled or unreachable."""
        if not self._enabled or self._client is None:
            return False
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis health check failed: {e}")
            return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Redis connection closed")
