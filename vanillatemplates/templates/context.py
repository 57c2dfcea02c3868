"""Render context definitions.

A context is any JSON-like value. Loop expansion narrows it to one item and
injects synthetic fields, named here so every module agrees on the spelling.
User data inside a loop body must not rely on these keys.
"""

from dataclasses import dataclass, field

from vanillatemplates.core import PartialLoader
from vanillatemplates.core.interfaces import MarkupParser

INDEX_KEY = "_index"  # zero-based position
FIRST_KEY = "_first"  # list loops only
LAST_KEY = "_last"  # list loops only
KEY_KEY = "_key"  # map loops only
VALUE_KEY = "_value"  # wrapped non-object item


@dataclass(frozen=True)
class RenderSettings:
    """Per-render collaborators and limits.

    Passed down the walk explicitly; nothing is read from module globals
    once a render has started.
    """

    loader: PartialLoader | None = None
    parser: MarkupParser | None = None
    prefixes: tuple[str, ...] = ("data-", "")
    max_include_depth: int = 32
    include_stack: tuple[str, ...] = field(default=())
