"""Directive vocabulary and per-node dispatch.

A directive is a recognized attribute on an element. Each element is
inspected once: the present directives are extracted into an ordered list,
then handled in this fixed precedence:

    include -> if -> loop -> style -> attr

Directive names are matched under each configured prefix, so with the
default prefixes both `data-loop="items"` and `loop="items"` work. When both
spellings are present the first prefix wins and the other is left alone as a
plain attribute.
"""

from dataclasses import dataclass
from enum import Enum

from vanillatemplates.core import OutputFragment, TemplateNode


class DirectiveKind(str, Enum):
    """Recognized directives, declared in processing order."""

    INCLUDE = "include"
    IF = "if"
    LOOP = "loop"
    STYLE = "style"
    ATTR = "attr"


PRECEDENCE: tuple[DirectiveKind, ...] = tuple(DirectiveKind)


@dataclass(frozen=True)
class DirectiveInfo:
    """Documentation for one directive (used by the API)."""

    kind: DirectiveKind
    syntax: str
    description: str


DIRECTIVES: tuple[DirectiveInfo, ...] = (
    DirectiveInfo(
        DirectiveKind.INCLUDE,
        "path",
        "Replace the element with the rendered partial loaded from path",
    ),
    DirectiveInfo(
        DirectiveKind.IF,
        "[!]path",
        "Keep (or unwrap a <var>) when truthy, drop the subtree when falsy",
    ),
    DirectiveInfo(
        DirectiveKind.LOOP,
        "path",
        "Repeat the element for each list item or map entry at path",
    ),
    DirectiveInfo(
        DirectiveKind.STYLE,
        "prop:path|prop:path",
        "Set CSS properties, skipping null/undefined values",
    ),
    DirectiveInfo(
        DirectiveKind.ATTR,
        "name:path|name:path",
        "Set attributes to the string form of each value",
    ),
)


@dataclass(frozen=True)
class Directive:
    """A directive found on a node."""

    kind: DirectiveKind
    attr_name: str  # Attribute as spelled on the node, e.g. "data-loop"
    value: str


@dataclass(frozen=True)
class Outcome:
    """Result of handling one directive.

    Either the node continues down the pipeline (possibly modified), or the
    handler produced the node's final output and the pipeline stops.
    """

    node: TemplateNode | None = None
    output: OutputFragment | None = None

    @property
    def is_terminal(self) -> bool:
        return self.output is not None

    @classmethod
    def proceed(cls, node: TemplateNode) -> "Outcome":
        return cls(node=node)

    @classmethod
    def replace_with(cls, output: OutputFragment) -> "Outcome":
        return cls(output=output)


class DirectiveDispatcher:
    """Finds the directives present on an element, in precedence order."""

    def __init__(self, prefixes: tuple[str, ...] = ("data-", "")):
        if not prefixes:
            raise ValueError("At least one directive prefix is required")
        self._prefixes = prefixes

    def extract(self, node: TemplateNode) -> list[Directive]:
        """Extract directives from an element.

        Returns:
            At most one Directive per kind, ordered by PRECEDENCE.
            Empty for non-element nodes.
        """
        if not node.is_element:
            return []

        found: list[Directive] = []
        for kind in PRECEDENCE:
            for prefix in self._prefixes:
                attr_name = f"{prefix}{kind.value}"
                value = node.get_attr(attr_name)
                if value is not None:
                    found.append(Directive(kind=kind, attr_name=attr_name, value=value))
                    break
        return found

    @staticmethod
    def strip(node: TemplateNode, directive: Directive) -> TemplateNode:
        """Return the node without the directive's attribute."""
        return node.without_attr(directive.attr_name)
