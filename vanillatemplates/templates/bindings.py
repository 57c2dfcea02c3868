"""Attribute and style binding.

Both directives take `|`-separated `name:path` pairs:

    <img attr="src:avatar|alt:name">
    <div style="color:theme.fg|width:size">

`attr` always writes the attribute, even for a missing value ("undefined" /
"null"). `style` skips pairs whose value is null or undefined, leaving that
property unset. The directive attribute itself never reaches the output.
"""

import logging
from typing import Any

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.paths import is_missing, resolve, to_text

logger = logging.getLogger(__name__)

STYLE_ATTR = "style"


def parse_pairs(value: str) -> list[tuple[str, str]]:
    """Split "a:x.y|b:z" into [("a", "x.y"), ("b", "z")].

    Each pair splits on its first ":" so paths may not contain one, but
    names like "aria-label" are fine. A pair without ":" binds the whole
    context. Empty pairs are ignored.
    """
    pairs: list[tuple[str, str]] = []
    for chunk in value.split("|"):
        if not chunk.strip():
            continue
        name, _, path = chunk.partition(":")
        name = name.strip()
        if not name:
            logger.debug("[BIND] Skipping pair without a name: %r", chunk)
            continue
        pairs.append((name, path.strip()))
    return pairs


def _normalize_property(prop: str) -> str:
    # Custom properties (--name) are case-sensitive
    prop = prop.strip()
    return prop if prop.startswith("--") else prop.lower()


def parse_css(text: str) -> dict[str, str]:
    """Parse an inline style declaration into an ordered property dict."""
    props: dict[str, str] = {}
    for declaration in text.split(";"):
        prop, sep, value = declaration.partition(":")
        if sep and prop.strip():
            props[_normalize_property(prop)] = value.strip()
    return props


def format_css(props: dict[str, str]) -> str:
    return " ".join(f"{prop}: {value};" for prop, value in props.items())


class AttributeBinder:
    """Applies an `attr` directive to an element."""

    def apply(self, node: TemplateNode, value: str, ctx: Any) -> TemplateNode:
        for name, path in parse_pairs(value):
            node = node.with_attr(name, to_text(resolve(ctx, path)))
        return node


class StyleBinder:
    """Applies a `style` directive to an element."""

    def apply(self, node: TemplateNode, value: str, ctx: Any) -> TemplateNode:
        props = parse_css(node.get_attr(STYLE_ATTR) or "")
        changed = False

        for prop, path in parse_pairs(value):
            resolved = resolve(ctx, path)
            if is_missing(resolved):
                # Also where a static declaration read as a binding ends up
                logger.debug("[BIND] Dropping style %s:%s (resolved to %r)", prop, path, resolved)
                continue
            props[_normalize_property(prop)] = to_text(resolved)
            changed = True

        if not changed:
            return node
        return node.with_attr(STYLE_ATTR, format_css(props))
