"""
Response Storage Layer

RESPONSIBILITY: Bounded in-memory cache of rendered SVG documents
ALLOWED INPUTS: Cache keys derived from normalized request parameters
OUTPUTS: Cached response bodies, CacheStats

WHAT THIS LAYER MUST NOT DO:
============================
- Render, parse or validate anything
- Decide what is cacheable (errors are never handed to it)
- Persist to disk

EVICTION:
=========
Least recently used entry goes first once `max_entries` is reached.
Reads refresh both recency and age (an entry read within its TTL lives
another full TTL).
"""

from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
import hashlib
import logging
import time
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

TIMELINE_KEY_PREFIX = "experience-timeline"
ACTIVITY_KEY_PREFIX = "timeseries-history"
MOST_STARRED_KEY_PREFIX = "most-starred"
DEFAULT_KEY_PART = "default"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


# =============================================================================
# CACHE KEYS
# =============================================================================

def timeline_cache_key(csv_text: str, include_dates: bool) -> str:
    """Key for a timeline request; the CSV body is hashed, not embedded."""
    digest = hashlib.sha256(csv_text.encode("utf-8")).hexdigest()
    return f"{TIMELINE_KEY_PREFIX}:{digest}:includeDates={str(include_dates).lower()}"


def activity_cache_key(user_name: str, start: Optional[str], end: Optional[str]) -> str:
    return f"{ACTIVITY_KEY_PREFIX}:{user_name}:{start or DEFAULT_KEY_PART}:{end or DEFAULT_KEY_PART}"


def most_starred_cache_key(
    user_name: str,
    top: int,
    title: Optional[str],
    theme: str,
    animation_duration: Optional[float],
) -> str:
    duration = DEFAULT_KEY_PART if animation_duration is None else f"{animation_duration:g}"
    return f"{MOST_STARRED_KEY_PREFIX}:{user_name}:{top}:{title or DEFAULT_KEY_PART}:{theme}:{duration}"


# =============================================================================
# CACHE
# =============================================================================

@dataclass(frozen=True)
class CacheStats:
    """Statistics for cache performance."""
    total_entries: int
    hit_count: int
    miss_count: int
    eviction_count: int
    hit_rate: float


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: float


class ResponseCache(Generic[V]):
    """LRU cache with per-entry TTL."""

    def __init__(
        self,
        max_entries: int = 100,
        ttl_ms: float = 3_600_000,
        clock: Callable[[], float] = _monotonic_ms,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._ttl = ttl_ms
        self._clock = clock
        self._cache: "OrderedDict[str, _Entry[V]]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        entry = self._cache.get(key)
        return entry is not None and entry.expires_at > self._clock()

    def get(self, key: str) -> Optional[V]:
        """Get a cached value, refreshing its recency and age."""
        entry = self._cache.get(key)
        now = self._clock()

        if entry is None:
            self._misses += 1
            logger.info("Cache MISS: %s", _short(key))
            return None

        if now >= entry.expires_at:
            del self._cache[key]
            self._misses += 1
            logger.info("Cache MISS (expired): %s", _short(key))
            return None

        self._hits += 1
        entry.expires_at = now + self._ttl
        self._cache.move_to_end(key)
        logger.info("Cache HIT: %s", _short(key))
        return entry.value

    def set(self, key: str, value: V) -> None:
        """Store a value, evicting the least recently used entry if full."""
        if key in self._cache:
            del self._cache[key]
        while len(self._cache) >= self._max_entries:
            self._evict_oldest()
        self._cache[key] = _Entry(value=value, expires_at=self._clock() + self._ttl)
        logger.info("Cache SET: %s", _short(key))

    def _evict_oldest(self) -> None:
        if not self._cache:
            return
        self._cache.popitem(last=False)
        self._evictions += 1

    def invalidate(self, key: str) -> None:
        """Invalidate a cache entry."""
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()

    def get_stats(self) -> CacheStats:
        total = self._hits + self._misses
        return CacheStats(
            total_entries=len(self._cache),
            hit_count=self._hits,
            miss_count=self._misses,
            eviction_count=self._evictions,
            hit_rate=self._hits / total if total > 0 else 0.0,
        )


def _short(key: str, limit: int = 50) -> str:
    return key if len(key) <= limit else key[:limit] + "..."


__all__ = [
    "ResponseCache",
    "CacheStats",
    "timeline_cache_key",
    "activity_cache_key",
    "most_starred_cache_key",
]
