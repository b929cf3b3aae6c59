"""Loader used by FutureCache to run deferred service calls."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from rapport.observability.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class CacheKey(BaseModel):
    """Base for cache keys. Frozen so keys hash by value."""

    model_config = ConfigDict(frozen=True)


class ServiceContext(ABC, Generic[V]):
    """A deferred computation whose result may be cached."""

    @abstractmethod
    async def execute(self) -> V:
        """Run the computation."""
        pass


class CacheLoader(Generic[V]):
    """Runs a ServiceContext on behalf of a cache.

    Holds no state and caches nothing itself; failures from the context
    propagate to the cache.
    """

    async def retrieve(self, context: ServiceContext[V], key: CacheKey) -> V:
        """Execute the context for `key` and return its result."""
        logger.debug("cache_loader_retrieve", key=repr(key))
        return await context.execute()
