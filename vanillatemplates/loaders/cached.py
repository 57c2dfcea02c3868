"""Caching loader wrapper."""

import logging

from vanillatemplates.core import PartialLoader
from vanillatemplates.utilities.cache import TTLCache, make_cache_key

logger = logging.getLogger(__name__)


class CachedLoader(PartialLoader):
    """Wraps another loader with a TTL cache.

    Only successful loads are cached; a failed load is retried on the next
    request.

    Usage:
        loader = CachedLoader(HTTPLoader("https://cdn.example.com/partials/"), ttl=300)
    """

    def __init__(self, inner: PartialLoader, ttl: int = 300, max_size: int = 500):
        self._inner = inner
        self._cache = TTLCache(default_ttl_seconds=ttl, max_size=max_size)

    @property
    def name(self) -> str:
        return f"cached-{self._inner.name}"

    @property
    def cache(self) -> TTLCache:
        return self._cache

    async def load(self, identifier: str) -> str:
        key = make_cache_key(self._inner.name, identifier)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("[LOADER] Cache hit: %s", identifier)
            return cached

        text = await self._inner.load(identifier)
        self._cache.set(key, text)
        return text

    async def aclose(self) -> None:
        await self._inner.aclose()
