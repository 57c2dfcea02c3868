"""Abstract interfaces for the template engine.

Defines the capabilities the renderer consumes but does not implement:
loading partial markup and parsing markup into a node tree.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from vanillatemplates.core.types import TemplateNode

# Parser capability: raw markup text -> FRAGMENT root node
MarkupParser = Callable[[str], TemplateNode]


class PartialLoader(ABC):
    """Abstract base class for partial/template sources.

    Loaders fetch raw markup (or JSON text) from somewhere - memory, disk,
    HTTP - and hand it back untouched. Loading is the only operation in a
    render that may suspend.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Loader identifier (e.g., 'memory', 'filesystem', 'http')."""
        ...

    @abstractmethod
    async def load(self, identifier: str) -> str:
        """Load raw text for an identifier.

        Args:
            identifier: Path or key as written in the include directive

        Returns:
            Raw text

        Raises:
            Any loader-specific error. Failures are fatal to the render;
            retry policy (if any) lives inside the loader.
        """
        ...

    async def aclose(self) -> None:
        """Release any held resources. Default is a no-op."""
        return None
