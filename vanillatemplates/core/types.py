"""Core data types for template trees.

All nodes are frozen dataclasses. A template tree is never modified in place:
every "mutation" helper returns a new node, so a rendered tree can never alias
or corrupt the template it was built from.
"""

from dataclasses import dataclass, replace
from enum import Enum


class NodeKind(str, Enum):
    """Kinds of nodes in a template or output tree."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    FRAGMENT = "fragment"  # Parser root / <template> content holder


@dataclass(frozen=True)
class TemplateNode:
    """A single immutable node.

    Attributes are kept as an ordered tuple of (name, value) pairs so the
    node stays hashable and attribute order survives a round trip.
    """

    kind: NodeKind
    tag: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple["TemplateNode", ...] = ()
    text: str = ""

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def element(
        cls,
        tag: str,
        attrs: dict[str, str] | None = None,
        children: "list[TemplateNode] | tuple[TemplateNode, ...]" = (),
    ) -> "TemplateNode":
        return cls(
            kind=NodeKind.ELEMENT,
            tag=tag.lower(),
            attrs=tuple((attrs or {}).items()),
            children=tuple(children),
        )

    @classmethod
    def text_node(cls, text: str) -> "TemplateNode":
        return cls(kind=NodeKind.TEXT, text=text)

    @classmethod
    def comment(cls, text: str) -> "TemplateNode":
        return cls(kind=NodeKind.COMMENT, text=text)

    @classmethod
    def doctype(cls, text: str) -> "TemplateNode":
        return cls(kind=NodeKind.DOCTYPE, text=text)

    @classmethod
    def fragment(
        cls, children: "list[TemplateNode] | tuple[TemplateNode, ...]" = ()
    ) -> "TemplateNode":
        return cls(kind=NodeKind.FRAGMENT, children=tuple(children))

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    @property
    def attributes(self) -> dict[str, str]:
        """Attributes as a fresh (insertion-ordered) dict."""
        return dict(self.attrs)

    def has_attr(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    def get_attr(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def text_content(self) -> str:
        """Concatenated text of this node and all descendant text nodes."""
        if self.kind == NodeKind.TEXT:
            return self.text
        return "".join(child.text_content for child in self.children)

    # =========================================================================
    # Copy-on-write helpers
    # =========================================================================

    def with_attr(self, name: str, value: str) -> "TemplateNode":
        """Return a copy with `name` set (replaced in place if present)."""
        if self.has_attr(name):
            attrs = tuple((k, value if k == name else v) for k, v in self.attrs)
        else:
            attrs = self.attrs + ((name, value),)
        return replace(self, attrs=attrs)

    def without_attr(self, name: str) -> "TemplateNode":
        if not self.has_attr(name):
            return self
        return replace(self, attrs=tuple((k, v) for k, v in self.attrs if k != name))

    def with_children(
        self, children: "list[TemplateNode] | tuple[TemplateNode, ...]"
    ) -> "TemplateNode":
        return replace(self, children=tuple(children))


# An ordered sequence of rendered nodes, spliced into a parent or mounted.
OutputFragment = list[TemplateNode]

