"""Partial inclusion.

`include="partials/header.html"` replaces the element with a partial loaded
through the injected PartialLoader, parsed with the injected parser and
rendered with the including element's context. The including element's own
tag and attributes are discarded.

Loading is the only suspension point of a render. Load errors are not
caught here: they abort the render.
"""

import logging

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.context import RenderSettings

logger = logging.getLogger(__name__)


class IncludeResolver:
    """Fetches and parses partials for the walker."""

    async def fetch(self, identifier: str, settings: RenderSettings) -> TemplateNode:
        """Load and parse one partial.

        Args:
            identifier: Include directive value
            settings: Current render settings (loader, parser, include stack)

        Returns:
            Parsed partial root (its children are the content to render)

        Raises:
            RuntimeError: No loader or parser configured
            RecursionError: Include nesting exceeds the configured depth
        """
        identifier = identifier.strip()

        if settings.loader is None:
            raise RuntimeError(f'Cannot include "{identifier}": no partial loader configured')
        if settings.parser is None:
            raise RuntimeError(f'Cannot include "{identifier}": no markup parser configured')

        if len(settings.include_stack) >= settings.max_include_depth:
            chain = " -> ".join((*settings.include_stack, identifier))
            raise RecursionError(
                f"Include depth limit ({settings.max_include_depth}) exceeded: {chain}"
            )

        logger.debug("[INCLUDE] Loading %s via %s loader", identifier, settings.loader.name)
        markup = await settings.loader.load(identifier)
        return settings.parser(markup.strip())
