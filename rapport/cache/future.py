"""FutureCache: memoizes ServiceContext results per key.

A cache miss starts one computation through CacheLoader; callers that
ask for the same key while it runs await the same future instead of
starting another. Failed computations are not cached.
"""

import asyncio
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Generic, TypeVar

from rapport.cache.loader import CacheKey, CacheLoader, ServiceContext
from rapport.observability.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class FutureCache(ABC, Generic[V]):
    """Abstract interface for a cache fed by CacheLoader."""

    @abstractmethod
    async def get(self, context: ServiceContext[V], key: CacheKey) -> V:
        """Return the cached value for key, computing it with context on a miss."""
        pass

    @abstractmethod
    async def invalidate(self, key: CacheKey) -> bool:
        """Drop a cached value."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Drop every cached value."""
        pass


class InMemoryFutureCache(FutureCache[V]):
    """In-process FutureCache bounded by entry count.

    When full, the oldest stored entry is evicted first.
    """

    def __init__(self, loader: CacheLoader[V] | None = None, max_entries: int = 1000) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._loader = loader or CacheLoader()
        self._max_entries = max_entries
        self._values: OrderedDict[CacheKey, V] = OrderedDict()
        self._inflight: dict[CacheKey, asyncio.Future[Any]] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    async def get(self, context: ServiceContext[V], key: CacheKey) -> V:
        """Return the cached value for key, computing it with context on a miss."""
        while True:
            if key in self._values:
                logger.debug("future_cache_hit", key=repr(key))
                return self._values[key]

            inflight = self._inflight.get(key)
            if inflight is None:
                break
            try:
                return await asyncio.shield(inflight)
            except asyncio.CancelledError:
                if not inflight.cancelled():
                    raise
                # The task computing this key was cancelled; retry in this one
                logger.debug("future_cache_retry", key=repr(key))

        logger.debug("future_cache_miss", key=repr(key))
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._inflight[key] = future
        try:
            value = await self._loader.retrieve(context, key)
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as exc:
            future.set_exception(exc)
            # Mark retrieved so an unawaited future does not warn
            future.exception()
            raise
        else:
            future.set_result(value)
            self._store(key, value)
            return value
        finally:
            del self._inflight[key]

    def _store(self, key: CacheKey, value: V) -> None:
        self._values[key] = value
        while len(self._values) > self._max_entries:
            evicted, _ = self._values.popitem(last=False)
            logger.debug("future_cache_evicted", key=repr(evicted))

    async def invalidate(self, key: CacheKey) -> bool:
        """Drop a cached value."""
        if key not in self._values:
            return False
        del self._values[key]
        return True

    async def clear(self) -> None:
        """Drop every cached value."""
        self._values.clear()
