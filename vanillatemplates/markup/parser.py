"""HTML markup parser.

Builds an immutable TemplateNode tree from markup text using the standard
library's HTMLParser. This is a forgiving parser, not a full HTML5 tree
builder:

- void elements (<img>, <br>, ...) never take children
- a few implied end tags are honoured (<li>, <p>, <td>, <option>, ...)
- stray end tags are ignored, unclosed elements close at end of input
- character references are decoded in text and attribute values
"""

import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser

from vanillatemplates.core import NodeKind, TemplateNode

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_BLOCK_STARTS = frozenset(
    "address article aside blockquote div dl fieldset footer form h1 h2 h3 h4 h5 h6 "
    "header hr main nav ol p pre section table ul".split()
)

# open tag -> start tags that implicitly close it
IMPLIED_END = {
    "p": _BLOCK_STARTS,
    "li": frozenset({"li"}),
    "dt": frozenset({"dt", "dd"}),
    "dd": frozenset({"dt", "dd"}),
    "option": frozenset({"option"}),
    "tr": frozenset({"tr"}),
    "td": frozenset({"td", "th", "tr"}),
    "th": frozenset({"td", "th", "tr"}),
}


@dataclass
class _OpenElement:
    """Element under construction."""

    tag: str
    attrs: dict[str, str]
    children: list[TemplateNode] = field(default_factory=list)

    def freeze(self) -> TemplateNode:
        return TemplateNode.element(self.tag, self.attrs, self.children)


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._root = _OpenElement(tag="", attrs={})
        self._stack: list[_OpenElement] = [self._root]

    # -------------------------------------------------------------------------
    # Tree helpers
    # -------------------------------------------------------------------------

    @property
    def _current(self) -> _OpenElement:
        return self._stack[-1]

    def _append(self, node: TemplateNode) -> None:
        children = self._current.children
        # Merge adjacent text (HTMLParser may split runs of data)
        if node.kind == NodeKind.TEXT and children and children[-1].kind == NodeKind.TEXT:
            children[-1] = TemplateNode.text_node(children[-1].text + node.text)
            return
        children.append(node)

    def _pop(self) -> None:
        element = self._stack.pop()
        self._append(element.freeze())

    # -------------------------------------------------------------------------
    # HTMLParser callbacks
    # -------------------------------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # <tr> inside an open <td> closes both the cell and the row
        while len(self._stack) > 1 and tag in IMPLIED_END.get(self._current.tag, ()):
            self._pop()

        attributes: dict[str, str] = {}
        for name, value in attrs:
            # First occurrence wins, as in browsers
            attributes.setdefault(name, value if value is not None else "")

        element = _OpenElement(tag=tag, attrs=attributes)
        if tag in VOID_ELEMENTS:
            self._append(element.freeze())
        else:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.handle_starttag(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self.handle_endtag(tag)

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                while len(self._stack) > depth:
                    self._pop()
                return
        logger.debug("[PARSE] Ignoring stray end tag </%s>", tag)

    def handle_data(self, data: str) -> None:
        if data:
            self._append(TemplateNode.text_node(data))

    def handle_comment(self, data: str) -> None:
        self._append(TemplateNode.comment(data))

    def handle_decl(self, decl: str) -> None:
        if decl.lower().startswith("doctype"):
            self._append(TemplateNode.doctype(decl[len("doctype") :].strip()))

    # -------------------------------------------------------------------------

    def build(self) -> TemplateNode:
        while len(self._stack) > 1:
            self._pop()
        return TemplateNode.fragment(self._root.children)


def parse_markup(markup: str) -> TemplateNode:
    """Parse markup text into a FRAGMENT root node.

    Args:
        markup: HTML text (a full document or any fragment)

    Returns:
        FRAGMENT node whose children are the top-level nodes
    """
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.build()
