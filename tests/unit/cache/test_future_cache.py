"""Tests for InMemoryFutureCache."""

import asyncio

import pytest

from rapport.cache.future import InMemoryFutureCache
from rapport.cache.loader import CacheKey, ServiceContext


class ItemKey(CacheKey):
    item_id: int


class SlowContext(ServiceContext[int]):
    """Waits on an event before returning, counting executions."""

    def __init__(self, value: int, gate: asyncio.Event | None = None) -> None:
        self.value = value
        self.gate = gate
        self.calls = 0

    async def execute(self) -> int:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return self.value


class FlakyContext(ServiceContext[int]):
    """Fails on the first execution, then succeeds."""

    def __init__(self) -> None:
        self.calls = 0

    async def execute(self) -> int:
        self.calls += 1
        if self.calls == 1:
            raise ConnectionError("backend down")
        return 42


class TestFutureCache:
    """Tests for cache hits, misses and eviction."""

    @pytest.mark.asyncio
    async def test_second_get_is_a_hit(self):
        """Should compute once per key."""
        cache = InMemoryFutureCache()
        context = SlowContext(7)

        assert await cache.get(context, ItemKey(item_id=1)) == 7
        assert await cache.get(context, ItemKey(item_id=1)) == 7

        assert context.calls == 1
        assert ItemKey(item_id=1) in cache

    @pytest.mark.asyncio
    async def test_concurrent_gets_share_one_computation(self):
        """Concurrent misses for a key await the same computation."""
        cache = InMemoryFutureCache()
        gate = asyncio.Event()
        context = SlowContext(9, gate)
        key = ItemKey(item_id=1)

        first = asyncio.create_task(cache.get(context, key))
        second = asyncio.create_task(cache.get(context, key))
        await asyncio.sleep(0)
        gate.set()

        assert await asyncio.gather(first, second) == [9, 9]
        assert context.calls == 1

    @pytest.mark.asyncio
    async def test_waiter_recomputes_when_computing_task_cancelled(self):
        """A waiter is not cancelled along with the task computing its key."""
        cache = InMemoryFutureCache()
        gate = asyncio.Event()
        context = SlowContext(9, gate)
        key = ItemKey(item_id=1)

        computing = asyncio.create_task(cache.get(context, key))
        waiter = asyncio.create_task(cache.get(context, key))
        await asyncio.sleep(0)

        computing.cancel()
        with pytest.raises(asyncio.CancelledError):
            await computing
        gate.set()

        assert await waiter == 9
        assert not waiter.cancelled()
        assert context.calls == 2
        assert key in cache

    @pytest.mark.asyncio
    async def test_cancelled_waiter_leaves_computation_running(self):
        """Cancelling a waiter does not cancel the shared computation."""
        cache = InMemoryFutureCache()
        gate = asyncio.Event()
        context = SlowContext(9, gate)
        key = ItemKey(item_id=1)

        computing = asyncio.create_task(cache.get(context, key))
        waiter = asyncio.create_task(cache.get(context, key))
        await asyncio.sleep(0)

        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter
        gate.set()

        assert await computing == 9
        assert context.calls == 1

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self):
        """A failed computation is retried on the next get."""
        cache = InMemoryFutureCache()
        context = FlakyContext()
        key = ItemKey(item_id=1)

        with pytest.raises(ConnectionError):
            await cache.get(context, key)

        assert await cache.get(context, key) == 42
        assert context.calls == 2

    @pytest.mark.asyncio
    async def test_oldest_entry_evicted(self):
        """Should evict the oldest entry past max_entries."""
        cache = InMemoryFutureCache(max_entries=2)

        for item_id in range(3):
            await cache.get(SlowContext(item_id), ItemKey(item_id=item_id))

        assert len(cache) == 2
        assert ItemKey(item_id=0) not in cache
        assert ItemKey(item_id=2) in cache

    @pytest.mark.asyncio
    async def test_invalidate_and_clear(self):
        """Should drop single entries or everything."""
        cache = InMemoryFutureCache()
        await cache.get(SlowContext(1), ItemKey(item_id=1))
        await cache.get(SlowContext(2), ItemKey(item_id=2))

        assert await cache.invalidate(ItemKey(item_id=1)) is True
        assert await cache.invalidate(ItemKey(item_id=1)) is False

        await cache.clear()
        assert len(cache) == 0

    def test_rejects_non_positive_size(self):
        """max_entries must be positive."""
        with pytest.raises(ValueError):
            InMemoryFutureCache(max_entries=0)
