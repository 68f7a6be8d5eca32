"""Value coercion between meta ``content`` strings and Python values."""

from __future__ import annotations

from datetime import datetime

from ogkit.schema import FieldKind

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})


def to_python(value: str, kind: FieldKind) -> object:
    """Convert a content string to the Python value for *kind*.

    Raises:
        ValueError: If the string is not a valid literal of *kind*.
    """
    value = value.strip()
    if kind is FieldKind.BOOLEAN:
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if kind is FieldKind.INTEGER:
        return int(value)
    if kind is FieldKind.FLOAT:
        return float(value)
    if kind is FieldKind.DATETIME:
        return datetime.fromisoformat(value)
    return value


def to_content(value: object) -> str | None:
    """Render a Python value as a meta ``content`` string.

    Returns ``None`` when no representation exists for the value, leaving
    the caller to decide how to fail.
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, str):
        return escape(value)
    return None


def escape(value: str) -> str:
    """Escape ``&`` and ``"`` for a double-quoted attribute value."""
    return value.replace("&", "&amp;").replace('"', "&quot;")
