"""Loop expansion.

`loop="path"` repeats the element once per entry of the list or map found at
`path`. Each repetition is the element itself (minus the loop directive),
rendered against a fresh item context:

    list  item dict     -> {**item, _index, _first, _last}
          item other    -> {_value: item, _index, _first, _last}
    map   value dict    -> {**value, _key, _index}
          value other   -> {_value: value, _key, _index}

Item contexts do not inherit from the enclosing context: a path that does
not resolve against the item resolves to undefined, even inside nested loops.
"""

import logging
from typing import Any

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.context_builder import ContextBuilder
from vanillatemplates.templates.paths import UNDEFINED, resolve

logger = logging.getLogger(__name__)


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    return type(value).__name__


class LoopExpander:
    """Turns a loop element into (clone, item context) iterations.

    The expander does not render; the walker renders each clone so nested
    directives (including includes) are handled uniformly.
    """

    def __init__(self, builder: ContextBuilder | None = None):
        self._builder = builder or ContextBuilder()

    def iterations(
        self,
        node: TemplateNode,
        path: str,
        ctx: Any,
    ) -> list[tuple[TemplateNode, dict[str, Any]]]:
        """Expand a loop element.

        Args:
            node: The loop element with its loop directive already removed
            path: Loop source path
            ctx: Current render context

        Returns:
            One (element, item_context) pair per entry, in source order

        Raises:
            TypeError: Source is neither a list nor a map. Fatal to the render.
        """
        path = path.strip()
        source = resolve(ctx, path)

        if isinstance(source, (list, tuple)):
            total = len(source)
            logger.debug("[LOOP] %s: %d list item(s)", path, total)
            return [
                (node, self._builder.build_for_item(item, index, total))
                for index, item in enumerate(source)
            ]

        if isinstance(source, dict):
            logger.debug("[LOOP] %s: %d map entr(ies)", path, len(source))
            return [
                (node, self._builder.build_for_entry(key, value, index))
                for index, (key, value) in enumerate(source.items())
            ]

        raise TypeError(
            f'loop source must be an array or object: "{path}" resolved to {_describe(source)}'
        )
