"""HTML serialization.

Converts rendered TemplateNode trees back to markup text.
"""

import html
from collections.abc import Iterable

from vanillatemplates.core import NodeKind, TemplateNode
from vanillatemplates.markup.parser import VOID_ELEMENTS

# Content of these elements is written verbatim
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# Whitespace inside these elements is significant
PRESERVE_WHITESPACE = frozenset({"pre", "textarea", "script", "style"})


def to_html(nodes: Iterable[TemplateNode] | TemplateNode) -> str:
    """Serialize one node or a sequence of nodes to HTML.

    Args:
        nodes: Output fragment (list of nodes) or a single node

    Returns:
        HTML string
    """
    if isinstance(nodes, TemplateNode):
        nodes = [nodes]
    return "".join(_serialize(node, raw=False) for node in nodes)


def _serialize(node: TemplateNode, raw: bool) -> str:
    if node.kind == NodeKind.TEXT:
        return node.text if raw else html.escape(node.text, quote=False)

    if node.kind == NodeKind.COMMENT:
        return f"<!--{node.text}-->"

    if node.kind == NodeKind.DOCTYPE:
        return f"<!DOCTYPE {node.text}>"

    if node.kind == NodeKind.FRAGMENT:
        return "".join(_serialize(child, raw) for child in node.children)

    attrs = "".join(
        f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs
    )
    if node.tag in VOID_ELEMENTS:
        return f"<{node.tag}{attrs}>"

    inner_raw = node.tag in RAW_TEXT_ELEMENTS
    inner = "".join(_serialize(child, inner_raw) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def strip_whitespace(node: TemplateNode) -> TemplateNode:
    """Remove whitespace-only text nodes from a subtree.

    Content of <pre>, <textarea>, <script> and <style> is left untouched.
    """
    if not node.children or node.tag in PRESERVE_WHITESPACE:
        return node

    children = [
        strip_whitespace(child)
        for child in node.children
        if not (child.kind == NodeKind.TEXT and not child.text.strip())
    ]
    return node.with_children(children)
