"""Static site generation.

Renders a complete HTML document whose <template> elements are expanded in
place against a JSON data file, and writes the result to disk:

    html = await render_document("site/index.html", "site/data.json")
    await build_site("site/index.html", "site/data.json", "dist")

Partials referenced by include directives are read relative to the
template's directory unless another loader is supplied.
"""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any

from vanillatemplates.core import NodeKind, PartialLoader, TemplateNode
from vanillatemplates.loaders import FileSystemLoader
from vanillatemplates.markup import parse_markup, strip_whitespace, to_html
from vanillatemplates.templates import render

logger = logging.getLogger(__name__)

TEMPLATE_TAG = "template"
_BLANK_LINES = re.compile(r"\n\s*\n")


async def expand_templates(node: TemplateNode, data: Any, loader: PartialLoader) -> TemplateNode:
    """Replace every <template> element under `node` with its rendered content.

    Template content is not searched for further <template> elements; each
    one found is rendered as a whole.
    """
    children: list[TemplateNode] = []
    for child in node.children:
        if child.is_element and child.tag == TEMPLATE_TAG:
            children.extend(await render(child, data, loader=loader))
        elif child.is_element:
            children.append(await expand_templates(child, data, loader))
        else:
            children.append(child)
    return node.with_children(children)


def _strip_body_whitespace(node: TemplateNode) -> TemplateNode:
    if node.is_element and node.tag == "body":
        return strip_whitespace(node)
    if not node.children:
        return node
    return node.with_children([_strip_body_whitespace(child) for child in node.children])


def serialize_document(document: TemplateNode) -> str:
    """Serialize a parsed document: doctype line plus the <html> element."""
    doctype = next((c for c in document.children if c.kind == NodeKind.DOCTYPE), None)
    root = next((c for c in document.children if c.is_element and c.tag == "html"), None)

    if root is not None:
        body = to_html(root)
    else:
        body = to_html(c for c in document.children if c.kind != NodeKind.DOCTYPE)

    head = f"<!DOCTYPE {doctype.text}>\n" if doctype else ""
    return _BLANK_LINES.sub("\n", head + body)


async def render_document(
    template_path: str | Path,
    data_path: str | Path,
    loader: PartialLoader | None = None,
) -> str:
    """Render a full HTML template file against a JSON data file.

    Args:
        template_path: HTML document containing <template> elements
        data_path: JSON data file
        loader: Partial loader (default: filesystem, rooted at the template's dir)

    Returns:
        Rendered HTML document, including <!DOCTYPE> when the source had one

    Raises:
        ValueError: The template contains no elements
        json.JSONDecodeError: The data file is not valid JSON
    """
    template_path = Path(template_path)
    data_path = Path(data_path)

    html_content, data_json = await asyncio.gather(
        asyncio.to_thread(template_path.read_text, encoding="utf-8"),
        asyncio.to_thread(data_path.read_text, encoding="utf-8"),
    )
    data = json.loads(data_json)

    document = parse_markup(html_content)
    if not any(child.is_element for child in document.children):
        raise ValueError(f"Parsing the HTML template failed: {template_path}")

    loader = loader or FileSystemLoader(template_path.parent)
    document = await expand_templates(document, data, loader)
    document = _strip_body_whitespace(document)

    logger.info("[SSG] Rendered %s with %s", template_path, data_path)
    return serialize_document(document)


async def build_site(
    template_path: str | Path,
    data_path: str | Path,
    out_dir: str | Path = "dist",
    loader: PartialLoader | None = None,
) -> Path:
    """Render a document and write it to `out_dir/index.html`.

    Returns:
        Path of the written file
    """
    html = await render_document(template_path, data_path, loader=loader)

    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    index = out_path / "index.html"
    index.write_text(html, encoding="utf-8")

    logger.info("[SSG] Wrote %s (%d bytes)", index, len(html.encode("utf-8")))
    return index
