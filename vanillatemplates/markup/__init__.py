"""Markup parsing and serialization."""

from vanillatemplates.markup.parser import VOID_ELEMENTS, parse_markup
from vanillatemplates.markup.serializer import strip_whitespace, to_html

__all__ = [
    "VOID_ELEMENTS",
    "parse_markup",
    "strip_whitespace",
    "to_html",
]
