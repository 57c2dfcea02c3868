"""Variable interpolation.

A `<var>` element is a placeholder: its trimmed text content is a path, and
the element is replaced by a text node holding the resolved value.

    <var>user.name</var>   -> "Ada"
    <var></var>            -> the current item (`_value`, or the context itself)
    <var>missing.path</var> -> ""

The placeholder's children are never walked.
"""

from typing import Any

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.context import VALUE_KEY
from vanillatemplates.templates.paths import is_missing, resolve, to_text

PLACEHOLDER_TAG = "var"


def is_placeholder(node: TemplateNode) -> bool:
    """Check if a node is a `<var>` placeholder element."""
    return node.is_element and node.tag == PLACEHOLDER_TAG


class VariableInterpolator:
    """Replaces placeholder elements with resolved text."""

    def lookup(self, path: str, ctx: Any) -> Any:
        """Resolve a placeholder path.

        An empty path means "the current item": the wrapped `_value` of a
        primitive loop item when present, otherwise the context itself.
        """
        if not path:
            if isinstance(ctx, dict) and VALUE_KEY in ctx:
                return ctx[VALUE_KEY]
            return ctx
        return resolve(ctx, path)

    def interpolate(self, node: TemplateNode, ctx: Any) -> TemplateNode:
        """Build the text node that replaces a placeholder."""
        value = self.lookup(node.text_content.strip(), ctx)
        return TemplateNode.text_node("" if is_missing(value) else to_text(value))
