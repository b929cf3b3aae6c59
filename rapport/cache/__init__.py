"""Future cache and its loader."""

from rapport.cache.future import FutureCache, InMemoryFutureCache
from rapport.cache.loader import CacheKey, CacheLoader, ServiceContext

__all__ = [
    "CacheKey",
    "CacheLoader",
    "FutureCache",
    "InMemoryFutureCache",
    "ServiceContext",
]
