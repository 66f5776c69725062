import asyncio

import pytest

from lcstats.cache import TTLCache, key

pytestmark = pytest.mark.anyio


async def test_miss_then_hit(cache):
    assert await cache.get("stats:alice") is None

    await cache.set("stats:alice", {"totalSolved": 42})

    assert await cache.get("stats:alice") == {"totalSolved": 42}
    assert cache.stats.misses == 1
    assert cache.stats.hits == 1
    assert cache.stats.sets == 1


async def test_entry_visible_until_ttl_elapses(cache, clock):
    await cache.set("k", "v")

    clock.advance(3599.9)
    assert await cache.get("k") == "v"

    clock.advance(0.1)
    assert await cache.get("k") is None
    assert cache.stats.expired == 1
    assert (await cache.snapshot())["items"] == 0


async def test_overwrite_refreshes_expiry(cache, clock):
    await cache.set("k", "old")
    clock.advance(3000)
    await cache.set("k", "new")
    clock.advance(3000)

    assert await cache.get("k") == "new"


async def test_per_call_ttl_override(cache, clock):
    await cache.set("short", 1, ttl=10)
    clock.advance(10)

    assert await cache.get("short") is None


async def test_keys_do_not_interfere(cache):
    await cache.set("stats:alice", "a")
    await cache.set("stats:bob", "b")
    await cache.delete("stats:alice")

    assert await cache.get("stats:alice") is None
    assert await cache.get("stats:bob") == "b"


async def test_clear_and_snapshot(clock):
    c = TTLCache(ttl=60, clock=clock)
    await c.set("a", 1)
    await c.set("b", 2)

    snap = await c.snapshot()
    assert snap["items"] == 2
    assert snap["ttl"] == 60
    assert snap["stats"]["sets"] == 2

    await c.clear()
    assert (await c.snapshot())["items"] == 0


def test_key_joins_parts_and_skips_none():
    assert key("stats", "alice") == "stats:alice"
    assert key("stats", None, 3) == "stats:3"


async def test_concurrent_sets_on_same_key_last_write_wins(cache):
    await asyncio.gather(cache.set("k", "first"), cache.set("k", "second"))

    assert await cache.get("k") in {"first", "second"}
    snap = await cache.snapshot()
    assert snap["items"] == 1
    assert snap["stats"]["sets"] == 2


async def test_interleaved_keys_do_not_interfere(cache):
    await asyncio.gather(*[cache.set(f"stats:user{i}", i) for i in range(20)])
    values = await asyncio.gather(*[cache.get(f"stats:user{i}") for i in range(20)])

    assert values == list(range(20))
    assert (await cache.snapshot())["items"] == 20
