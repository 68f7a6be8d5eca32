"""Publisher — renders an Open Graph object as ``<meta>`` tags.

Tags follow schema declaration order: scalar fields first (string-array
fields one tag per entry), then each array's elements in order with
their sub-fields in sub-schema order.  Empty fields produce no tag, and an
element without its url produces none at all.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from ogkit.coercion import escape, to_content
from ogkit.errors import UnsupportedValueException
from ogkit.objects.base import ObjectBase
from ogkit.property import Property
from ogkit.schema import ArrayField, ScalarField


class Doctype(StrEnum):
    HTML5 = "html5"
    XHTML = "xhtml"


def iter_properties(obj: ObjectBase) -> Iterator[tuple[str, object]]:
    """Yield ``(property name, python value)`` for every non-empty field."""
    for entry in type(obj).schema.entries:
        if isinstance(entry, ScalarField):
            value = getattr(obj, entry.attr)
            values = value if entry.multiple else [value]
            for v in values:
                if not _is_empty(v):
                    yield entry.property, v
            continue
        yield from _iter_array(obj, entry)


def _iter_array(obj: ObjectBase, array: ArrayField) -> Iterator[tuple[str, object]]:
    for element in getattr(obj, array.attr):
        # sub-properties without their primary tag would be orphaned on reload
        if _is_empty(getattr(element, array.primary_attr)):
            continue
        for sub in array.sub_fields:
            value = getattr(element, sub.attr)
            if _is_empty(value):
                continue
            name = array.primary if sub.attr == array.primary_attr else sub.property
            yield name, value


def _is_empty(value: object) -> bool:
    return value is None or value == ""


class Publisher:
    """Serialize objects to meta tag strings."""

    def __init__(self, doctype: Doctype | str = Doctype.HTML5) -> None:
        self.doctype = Doctype(doctype)

    def get_properties(self, obj: ObjectBase) -> list[Property]:
        """Non-empty fields of *obj* as escaped properties.

        Raises:
            UnsupportedValueException: If a value has no string form.
        """
        properties: list[Property] = []
        for name, value in iter_properties(obj):
            content = to_content(value)
            if content is None:
                raise UnsupportedValueException(name, value)
            properties.append(Property(name, content))
        return properties

    def render_tag(self, p: Property) -> str:
        """Render a property whose value is already escaped."""
        close = " />" if self.doctype is Doctype.XHTML else ">"
        return f'<meta property="{escape(p.name)}" content="{p.value}"{close}'

    def serialize(self, obj: ObjectBase) -> list[str]:
        """Ordered tag strings for *obj*; ``[]`` for an empty object."""
        return [self.render_tag(p) for p in self.get_properties(obj)]

    def generate_html(self, obj: ObjectBase) -> str:
        """Tags joined by newlines; ``""`` for an empty object."""
        return "\n".join(self.serialize(obj))
