"""Context builder for loop iterations.

Builds the narrowed context handed to each loop iteration. Every call
returns a brand-new dict, so no two iterations ever share (and mutate) the
same context object.
"""

from typing import Any

from vanillatemplates.templates.context import (
    FIRST_KEY,
    INDEX_KEY,
    KEY_KEY,
    LAST_KEY,
    VALUE_KEY,
)


class ContextBuilder:
    """Builds item contexts for list and map loops.

    Usage:
        builder = ContextBuilder()
        for i, item in enumerate(items):
            ctx = builder.build_for_item(item, i, len(items))
    """

    def build_for_item(self, item: Any, index: int, total: int) -> dict[str, Any]:
        """Build context for position `index` of a list of `total` items.

        Object items are shallow-copied; anything else is wrapped as `_value`.
        """
        ctx = dict(item) if isinstance(item, dict) else {VALUE_KEY: item}
        ctx[INDEX_KEY] = index
        ctx[FIRST_KEY] = index == 0
        ctx[LAST_KEY] = index == total - 1
        return ctx

    def build_for_entry(self, key: str, value: Any, index: int) -> dict[str, Any]:
        """Build context for the `index`-th (key, value) pair of a map.

        List values are wrapped (not spread), object values are shallow-copied,
        primitives are wrapped.
        """
        if isinstance(value, dict):
            ctx = dict(value)
        else:
            ctx = {VALUE_KEY: value}
        ctx[KEY_KEY] = key
        ctx[INDEX_KEY] = index
        return ctx
