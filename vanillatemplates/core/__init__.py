"""Core types and interfaces."""

from vanillatemplates.core.interfaces import MarkupParser, PartialLoader
from vanillatemplates.core.types import NodeKind, OutputFragment, TemplateNode

__all__ = [
    "MarkupParser",
    "NodeKind",
    "OutputFragment",
    "PartialLoader",
    "TemplateNode",
]
