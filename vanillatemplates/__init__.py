"""Vanilla Templates - declarative HTML templating with plain-markup directives."""

from vanillatemplates.config import VERSION
from vanillatemplates.core import NodeKind, OutputFragment, PartialLoader, TemplateNode
from vanillatemplates.markup import parse_markup, to_html
from vanillatemplates.templates import UNDEFINED, render, render_markup, render_sync

__version__ = VERSION

__all__ = [
    "UNDEFINED",
    "NodeKind",
    "OutputFragment",
    "PartialLoader",
    "TemplateNode",
    "parse_markup",
    "render",
    "render_markup",
    "render_sync",
    "to_html",
]
