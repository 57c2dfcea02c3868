"""In-memory loader.

Serves partials from a dict. Used by the API for partials sent inline with
a render request, and by tests as a fake loader.
"""

import logging

from vanillatemplates.core import PartialLoader

logger = logging.getLogger(__name__)


class InMemoryLoader(PartialLoader):
    """Loader backed by an identifier -> text mapping."""

    def __init__(self, partials: dict[str, str] | None = None):
        self._partials = dict(partials or {})
        self.requests: list[str] = []  # Load order, for inspection

    @property
    def name(self) -> str:
        return "memory"

    async def load(self, identifier: str) -> str:
        self.requests.append(identifier)
        try:
            return self._partials[identifier]
        except KeyError:
            logger.warning("[LOADER] Partial not found in memory: %s", identifier)
            raise KeyError(f"Partial not found: {identifier}") from None
