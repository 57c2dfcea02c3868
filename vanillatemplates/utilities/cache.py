"""In-memory cache with TTL support.

Holds loaded partial markup so repeated renders (and repeated includes of
the same partial within one render) skip the loader.

TTL recommendations:
- Local files during development: short (or 0 to disable caching)
- Remote partials behind a CDN: minutes
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached value with expiration (monotonic clock seconds)."""

    value: Any
    expires_at: float
    last_accessed: float


class TTLCache:
    """Thread-safe in-memory cache with TTL and size limit.

    Features:
    - Time-based expiration (TTL)
    - Maximum size limit with LRU eviction
    - Hit/miss statistics

    Usage:
        cache = TTLCache(default_ttl_seconds=300, max_size=500)
        cache.set("key", value)
        result = cache.get("key")  # Returns None if missing or expired
    """

    DEFAULT_MAX_SIZE = 1000

    def __init__(
        self,
        default_ttl_seconds: int = 300,
        max_size: int = DEFAULT_MAX_SIZE,
    ):
        self._cache: dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl_seconds
        self._max_size = max_size
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Any | None:
        """Get value if exists and not expired."""
        now = time.monotonic()
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None
            if now > entry.expires_at:
                del self._cache[key]
                self._misses += 1
                return None
            entry.last_accessed = now
            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Set value with optional custom TTL."""
        ttl = ttl_seconds if ttl_seconds else self._default_ttl
        now = time.monotonic()

        with self._lock:
            if self._max_size > 0 and key not in self._cache:
                self._evict_if_needed(now)
            self._cache[key] = CacheEntry(value=value, expires_at=now + ttl, last_accessed=now)

    def _evict_if_needed(self, now: float) -> None:
        """Evict entries if cache is at max size. Called with lock held."""
        for key in [k for k, v in self._cache.items() if now > v.expires_at]:
            del self._cache[key]

        while self._cache and len(self._cache) >= self._max_size:
            lru_key = min(self._cache, key=lambda k: self._cache[k].last_accessed)
            logger.debug("[CACHE] Evicting %s", lru_key)
            del self._cache[lru_key]

    def delete(self, key: str) -> None:
        """Delete a key from cache."""
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear all cached values."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    @property
    def size(self) -> int:
        """Current number of entries (including possibly expired)."""
        return len(self._cache)

    def stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = self._hits / total_requests if total_requests > 0 else 0
            return {
                "total_entries": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 3),
            }


def make_cache_key(*parts: str) -> str:
    """Create a cache key from parts."""
    return ":".join(str(p) for p in parts)
