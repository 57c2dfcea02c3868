"""Dot-path resolution against JSON-like data.

    resolve({"user": {"name": "Ada"}}, "user.name")  -> "Ada"
    resolve({"user": None}, "user.name")             -> UNDEFINED
    resolve(ctx, "")                                 -> ctx

Resolution never raises: a missing segment anywhere short-circuits the rest
of the path to UNDEFINED.

Also home to the two coercions every directive shares: truthiness (for `if`)
and string form (for `attr`, `style` and `<var>`).
"""

import json
import math
from typing import Any


class _Undefined:
    """Marker for "path did not resolve" - distinct from an explicit null."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_missing(value: Any) -> bool:
    """True for null or undefined."""
    return value is None or value is UNDEFINED


def _lookup(current: Any, segment: str) -> Any:
    if isinstance(current, dict):
        return current.get(segment, UNDEFINED)

    if isinstance(current, (list, tuple, str)):
        if segment == "length":
            return len(current)
        if segment.isdigit():
            index = int(segment)
            return current[index] if index < len(current) else UNDEFINED

    return UNDEFINED


def resolve(ctx: Any, path: str | None) -> Any:
    """Resolve a dot-separated path against a context value.

    Args:
        ctx: Any JSON-like value (dict, list, primitive, None)
        path: Dot-separated path, e.g. "user.address.city"

    Returns:
        The resolved value, `ctx` itself for an empty path, or UNDEFINED
    """
    if not path:
        return ctx

    current = ctx
    for segment in path.split("."):
        if is_missing(current):
            return UNDEFINED
        current = _lookup(current, segment)
    return current


def is_truthy(value: Any) -> bool:
    """Coerce a value with JavaScript truthiness rules.

    Falsy: "", 0, NaN, None, UNDEFINED, False. Everything else is truthy,
    including empty lists and dicts.
    """
    if is_missing(value) or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_text(value: Any) -> str:
    """String form of a resolved value, as the browser would write it."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        # Array.prototype.join: null/undefined members become empty strings
        return ",".join("" if is_missing(item) else to_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)
