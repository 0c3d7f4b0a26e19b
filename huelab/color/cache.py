# Copyright (c) 2026 Huelab
# SPDX-License-Identifier: MIT

"""
Bounded LRU memoization for conversions and derived analyses.

Caching is purely an optimization: every cached function is pure, so a
cache hit returns exactly what a fresh call would. Eviction is by
capacity only, there is no time-based expiry.

Each ``LruCache`` owns one lock. ``get`` reorders entries, so reads take
the lock as well as writes.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, Optional, TypeVar

from huelab.schema.color import Color


logger = logging.getLogger(__name__)

V = TypeVar("V")

_MISSING = object()


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """
    Capacities for the three cache families.

    Attributes:
        conversions: Entries for hex → Color conversions
        palettes: Entries for generated harmony palettes
        analyses: Entries for full single-color analyses
        enabled: When False every lookup bypasses the cache
    """
    conversions: int = 500
    palettes: int = 200
    analyses: int = 300
    enabled: bool = True

    def __post_init__(self) -> None:
        for name in ("conversions", "palettes", "analyses"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} capacity must be a positive integer, got {value!r}")


# =============================================================================
# Keys
# =============================================================================


def _key_part(arg: Any) -> str:
    if isinstance(arg, Enum):
        return str(arg.value)
    if isinstance(arg, Color):
        return arg.hex
    if isinstance(arg, float):
        return repr(arg)
    if isinstance(arg, (tuple, list)):
        return "[" + ",".join(_key_part(a) for a in arg) + "]"
    return str(arg)


def make_key(operation: str, *args: Any) -> str:
    """
    Canonical cache key: operation name plus serialized arguments.

    >>> make_key("palette", 120, "triadic", 70.0)
    'palette:120|triadic|70.0'
    """
    return operation + ":" + "|".join(_key_part(a) for a in args)


# =============================================================================
# LRU Cache
# =============================================================================


class LruCache:
    """
    Fixed-capacity least-recently-used cache.

    ``get`` promotes a hit to most-recently-used; ``set`` evicts the single
    oldest entry once capacity is exceeded.
    """

    def __init__(self, capacity: int, name: str = "cache"):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self.name = name
        self._store: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value and mark it most recently used."""
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return default
            self._store.move_to_end(key, last=True)
            self._hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: Any) -> None:
        """Insert or update a value, evicting the LRU entry if over capacity."""
        with self._lock:
            if key in self._store:
                self._store.move_to_end(key, last=True)
            self._store[key] = value
            if len(self._store) > self.capacity:
                evicted, _ = self._store.popitem(last=False)
                self._evictions += 1
                logger.debug("%s: evicted %r", self.name, evicted)

    def get_or_compute(
        self,
        key: Hashable,
        factory: Callable[[], V],
        cache_none: bool = False,
    ) -> V:
        """
        Return the cached value for ``key``, computing and storing it on a miss.

        ``factory`` runs outside the lock. ``None`` results are not stored
        unless ``cache_none`` is set, so malformed inputs are re-validated
        on every call.
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value
        value = factory()
        if value is not None or cache_none:
            self.set(key, value)
        return value

    def clear(self) -> None:
        """Remove every entry. Hit/miss counters are kept."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
        logger.debug("%s: cleared %d entries", self.name, count)

    def keys(self) -> list:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._store.keys())

    def stats(self) -> dict:
        with self._lock:
            return {
                "entries": len(self._store),
                "capacity": self.capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store


# =============================================================================
# Cache Families
# =============================================================================


class ColorCache:
    """
    The three independently sized cache families used by the engine.

    Owned by whoever composes the engine; there is no process-wide
    instance.
    """

    FAMILIES = ("conversions", "palettes", "analyses")

    def __init__(self, config: Optional[CacheConfig] = None):
        self.config = config or CacheConfig()
        self.conversions = LruCache(self.config.conversions, name="conversions")
        self.palettes = LruCache(self.config.palettes, name="palettes")
        self.analyses = LruCache(self.config.analyses, name="analyses")

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def family(self, name: str) -> LruCache:
        if name not in self.FAMILIES:
            raise KeyError(f"Unknown cache family '{name}'")
        return getattr(self, name)

    def memoize(
        self,
        family: str,
        key: str,
        factory: Callable[[], V],
        cache_none: bool = False,
    ) -> V:
        """Look up ``key`` in ``family``, computing on a miss. Bypassed when disabled."""
        if not self.config.enabled:
            return factory()
        return self.family(family).get_or_compute(key, factory, cache_none=cache_none)

    def clear(self) -> None:
        """Empty every family."""
        for name in self.FAMILIES:
            self.family(name).clear()

    def stats(self) -> dict[str, int]:
        """Entry count per family."""
        return {name: len(self.family(name)) for name in self.FAMILIES}
