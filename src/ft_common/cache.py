"""Read-through result cache over the Redis store.

get_or_compute(key, produce):
  1. GET key — hit: return json.loads(value), produce is never called
  2. miss: await produce()             (exactly once, no retry)
  3. SETEX key ttl json.dumps(value)   (exactly once, only after produce succeeds)
  4. return the produced value

Failures propagate unchanged in kind: store errors surface as the
StoreUnavailableError / StoreReadError / StoreWriteError raised by
RedisStore, an exception from produce() is re-raised as-is, and a value
that cannot be written as JSON raises CacheSerializationError. A stored
entry that is not valid JSON raises StoreReadError. In every failure case
nothing is written.

NOTE: No single-flight. Two concurrent misses on the same key both call
produce() and both write; the last SETEX wins. Callers must not rely on
at-most-one producer invocation under concurrency.

NOTE: A miss returns the produced object itself, a hit returns its JSON
decoding. The two only compare equal for JSON-native values: tuples come
back as lists and non-str dict keys come back as strings ({1: "a"} is
read back as {"1": "a"}). Producers should return plain JSON types.

NOTE: No invalidation. Entries expire by TTL only, so a write to the
underlying records is visible through the cache after at most one TTL.
"""

import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Literal, Protocol, TypeVar

from fastapi import Request

from src.ft_common.errors import (
    CacheSerializationError,
    StoreReadError,
    StoreUnavailableError,
)
from src.ft_common.redis_client import RedisStore

logger = logging.getLogger("ft.cache")

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 3600

ReportPeriod = Literal["monthly", "yearly"]


class KeyValueStore(Protocol):
    """What the cache needs from its store. RedisStore is the real one."""

    async def get(self, key: str) -> str | None: ...

    async def setex(self, key: str, ttl_seconds: int, value: str) -> None: ...


# ---------------------------------------------------------------------------
# Key construction: namespace first, then user identity
# ---------------------------------------------------------------------------


def expenses_key(user_id: str) -> str:
    return f"expenses:{user_id}"


def report_key(user_id: str, period: ReportPeriod) -> str:
    """Report key for a period kind.

    The key names the period kind only, not the concrete month/year: a
    value computed just before a boundary keeps being served after it
    until the entry expires.
    """
    return f"reports:{user_id}:{period}"


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class ReadThroughCache:
    def __init__(self, store: KeyValueStore, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._store = store
        self._ttl = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    async def get_or_compute(self, key: str, produce: Callable[[], Awaitable[T]]) -> T:
        if not key:
            raise ValueError("Cache key must be a non-empty string")

        cached = await self._store.get(key)
        if cached is not None:
            logger.debug("cache hit %s", key)
            try:
                result: T = json.loads(cached)
            except ValueError as exc:
                raise StoreReadError(key, f"stored value is not JSON: {exc}") from exc
            return result

        logger.debug("cache miss %s", key)
        fresh = await produce()

        try:
            payload = json.dumps(fresh, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise CacheSerializationError(key, str(exc)) from exc

        await self._store.setex(key, self._ttl, payload)
        return fresh


@asynccontextmanager
async def open_cache(
    redis_url: str, ttl_seconds: int = DEFAULT_TTL_SECONDS
) -> AsyncIterator[ReadThroughCache]:
    """Scoped acquisition of a cache and its store connection.

    The store is opened before the cache is handed out and closed on exit,
    including when open() itself or the body of the ``async with`` raises.
    """
    store = RedisStore(redis_url)
    try:
        await store.open()
        yield ReadThroughCache(store, ttl_seconds)
    finally:
        await store.close()


def get_cache(request: Request) -> ReadThroughCache:
    """FastAPI dependency: the cache published on app.state by the lifespan."""
    cache: ReadThroughCache | None = getattr(request.app.state, "cache", None)
    if cache is None:
        raise StoreUnavailableError("Result cache has not been initialised")
    return cache

