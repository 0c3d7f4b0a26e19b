# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""Tests for the LRU cache and cache families."""

import threading

import pytest

from huelab.color.cache import CacheConfig, ColorCache, LruCache, make_key
from huelab.color.colorspace import color_from_hex
from huelab.color.palette import Harmony


class TestLruCache:
    """Bounded LRU cache eviction, statistics and thread safety."""

    def test_get_set(self):
        cache = LruCache(2)
        cache.set("a", 1)
        assert cache.get("a") == 1
        assert cache.get("missing") is None
        assert cache.get("missing", 0) == 0

    def test_evicts_oldest(self):
        cache = LruCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        assert "a" not in cache
        assert cache.keys() == ["b", "c"]

    def test_get_promotes(self):
        cache = LruCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)
        assert "a" in cache
        assert "b" not in cache

    def test_update_promotes(self):
        cache = LruCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        cache.set("c", 3)
        assert cache.get("a") == 10
        assert "b" not in cache

    def test_clear(self):
        cache = LruCache(3)
        cache.set("a", 1)
        cache.clear()
        assert len(cache) == 0

    def test_stats(self):
        cache = LruCache(1)
        cache.set("a", 1)
        cache.get("a")
        cache.get("b")
        cache.set("b", 2)
        stats = cache.stats()
        assert stats == {"entries": 1, "capacity": 1, "hits": 1, "misses": 1, "evictions": 1}

    def test_get_or_compute(self):
        cache = LruCache(4)
        calls = []

        def factory():
            calls.append(1)
            return "value"

        assert cache.get_or_compute("k", factory) == "value"
        assert cache.get_or_compute("k", factory) == "value"
        assert len(calls) == 1

    def test_none_not_cached_by_default(self):
        cache = LruCache(4)
        cache.get_or_compute("k", lambda: None)
        assert "k" not in cache
        cache.get_or_compute("k", lambda: None, cache_none=True)
        assert "k" in cache

    @pytest.mark.parametrize("capacity", [0, -1, 1.5, True])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(ValueError):
            LruCache(capacity)

    def test_concurrent_access(self):
        cache = LruCache(50)

        def worker(offset):
            for i in range(500):
                key = (offset + i) % 80
                cache.set(key, key)
                cache.get((key * 7) % 80)

        threads = [threading.Thread(target=worker, args=(n * 13,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 50
        for key in cache.keys():
            assert cache.get(key) == key


class TestMakeKey:
    """Cache keys must be stable and hashable."""

    def test_format(self):
        assert make_key("palette", 120, "triadic", 70.0) == "palette:120|triadic|70.0"

    def test_enum_and_color(self):
        key = make_key("x", Harmony.GOLDEN, color_from_hex("#abcdef"))
        assert key == "x:golden|#ABCDEF"

    def test_float_precision_kept(self):
        assert make_key("x", 0.1) != make_key("x", 0.1000001)

    def test_distinct_operations(self):
        assert make_key("a", 1) != make_key("b", 1)


class TestColorCache:
    """Per-family caches stay isolated and individually sized."""

    def test_default_capacities(self):
        cache = ColorCache()
        assert cache.conversions.capacity == 500
        assert cache.palettes.capacity == 200
        assert cache.analyses.capacity == 300

    def test_custom_capacities(self):
        cache = ColorCache(CacheConfig(conversions=2, palettes=3, analyses=4))
        assert (cache.conversions.capacity, cache.palettes.capacity, cache.analyses.capacity) == (2, 3, 4)

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="palettes"):
            CacheConfig(palettes=0)

    def test_stats_and_clear(self):
        cache = ColorCache()
        cache.memoize("conversions", "a", lambda: 1)
        cache.memoize("palettes", "b", lambda: 2)
        cache.memoize("palettes", "c", lambda: 3)
        assert cache.stats() == {"conversions": 1, "palettes": 2, "analyses": 0}
        cache.clear()
        assert cache.stats() == {"conversions": 0, "palettes": 0, "analyses": 0}

    def test_disabled_bypasses(self):
        cache = ColorCache(CacheConfig(enabled=False))
        calls = []
        for _ in range(3):
            cache.memoize("analyses", "k", lambda: calls.append(1) or "v")
        assert len(calls) == 3
        assert cache.stats()["analyses"] == 0

    def test_unknown_family(self):
        with pytest.raises(KeyError):
            ColorCache().family("gradients")

    def test_instances_isolated(self):
        a, b = ColorCache(), ColorCache()
        a.memoize("conversions", "k", lambda: 1)
        assert b.stats()["conversions"] == 0
