"""Fallback loader chain."""

import logging

from vanillatemplates.core import PartialLoader

logger = logging.getLogger(__name__)


class ChainLoader(PartialLoader):
    """Tries each loader in order, returning the first successful load.

    A miss (KeyError, FileNotFoundError) moves on to the next loader; any
    other error propagates immediately. When every loader misses, the last
    miss is re-raised.

    Usage:
        loader = ChainLoader([InMemoryLoader(inline), create_default_loader()])
    """

    def __init__(self, loaders: list[PartialLoader]):
        if not loaders:
            raise ValueError("ChainLoader needs at least one loader")
        self._loaders = list(loaders)

    @property
    def name(self) -> str:
        return "chain(" + ",".join(loader.name for loader in self._loaders) + ")"

    async def load(self, identifier: str) -> str:
        last_miss: Exception | None = None
        for loader in self._loaders:
            try:
                return await loader.load(identifier)
            except (KeyError, FileNotFoundError) as e:
                logger.debug("[LOADER] %s missed %s, trying next", loader.name, identifier)
                last_miss = e
        raise last_miss

    async def aclose(self) -> None:
        for loader in self._loaders:
            await loader.aclose()
