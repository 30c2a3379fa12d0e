"""Redis store client with an explicit open/close lifecycle.

Backs the read-through result cache (see cache.py). One instance is created
by the application lifespan and handed to the cache; nothing looks it up
through module globals.

Every redis-py failure is translated at this boundary:
  - ConnectionError / TimeoutError / not opened  -> StoreUnavailableError
  - any other RedisError on GET                   -> StoreReadError
  - any other RedisError on SETEX                 -> StoreWriteError
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from src.ft_common.errors import StoreReadError, StoreUnavailableError, StoreWriteError

logger = logging.getLogger("ft.cache")

_UNAVAILABLE = (RedisConnectionError, RedisTimeoutError)


class RedisStore:
    """Textual key-value store: GET, SETEX, open, close."""

    def __init__(self, url: str) -> None:
        self._url = url
        self._client: aioredis.Redis | None = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> None:
        """Create the connection pool and verify it with PING.

        The store is not usable until this returns. On failure the pool is
        released and StoreUnavailableError is raised.
        """
        if self._client is not None:
            return
        client = aioredis.from_url(self._url, decode_responses=True)
        try:
            await client.ping()
        except RedisError as exc:
            logger.error("Redis connection to %s failed: %s", self._url, exc)
            await client.aclose()
            raise StoreUnavailableError(f"Cache store unreachable: {exc}") from exc
        self._client = client
        logger.info("Redis store connected: %s", self._url)

    async def close(self) -> None:
        """Release the connection pool. Safe to call when never opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> aioredis.Redis:
        if self._client is None:
            raise StoreUnavailableError("Cache store is not connected")
        return self._client

    async def get(self, key: str) -> str | None:
        client = self._require_client()
        try:
            value: str | None = await client.get(key)
        except _UNAVAILABLE as exc:
            logger.error("Redis connection lost during GET %s: %s", key, exc)
            raise StoreUnavailableError(f"Cache store unreachable: {exc}") from exc
        except RedisError as exc:
            raise StoreReadError(key, str(exc)) from exc
        return value

    async def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        client = self._require_client()
        try:
            await client.setex(key, ttl_seconds, value)
        except _UNAVAILABLE as exc:
            logger.error("Redis connection lost during SETEX %s: %s", key, exc)
            raise StoreUnavailableError(f"Cache store unreachable: {exc}") from exc
        except RedisError as exc:
            raise StoreWriteError(key, str(exc)) from exc
