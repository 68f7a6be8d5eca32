"""Declarative schema catalogue shared by both mapping directions.

An object type declares its fields as an ordered tuple of
:class:`ScalarField` and :class:`ArrayField` descriptors.  The forward
mapper (:mod:`ogkit.mapper`) and the publisher (:mod:`ogkit.publisher`)
only ever look at these descriptors, so adding a new Open Graph type is
a matter of declaring its schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ogkit.objects.elements import Element


class FieldKind(StrEnum):
    """Coercion kind for a field value."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DATETIME = "datetime"
    URL = "url"


@dataclass(frozen=True)
class ScalarField:
    """Maps one property name onto one attribute.

    ``multiple`` marks string-array fields: every occurrence is appended
    to a list instead of overwriting the previous value.
    """

    property: str
    attr: str
    kind: FieldKind = FieldKind.STRING
    multiple: bool = False


@dataclass(frozen=True)
class ArrayField:
    """Maps a primary property plus its sub-properties onto a list of elements.

    ``primary`` starts a new element; ``aliases`` are alternative names
    for the primary (e.g. ``og:image:url``).  ``sub_fields`` lists every
    element attribute, the primary attribute included, in emission order.
    """

    attr: str
    element_type: type[Element]
    primary: str
    primary_attr: str
    sub_fields: tuple[ScalarField, ...]
    aliases: tuple[str, ...] = ()

    def starts_element(self, name: str) -> bool:
        return name == self.primary or name in self.aliases

    @property
    def primary_field(self) -> ScalarField:
        for sub in self.sub_fields:
            if sub.attr == self.primary_attr:
                return sub
        raise LookupError(f"{self.attr}: no sub-field for {self.primary_attr!r}")


SchemaEntry = ScalarField | ArrayField


@dataclass(frozen=True)
class Schema:
    """Ordered field catalogue with a name → descriptor lookup table."""

    entries: tuple[SchemaEntry, ...]
    _index: dict[str, tuple[SchemaEntry, ScalarField | None]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: dict[str, tuple[SchemaEntry, ScalarField | None]] = {}
        for entry in self.entries:
            if isinstance(entry, ScalarField):
                index[entry.property] = (entry, None)
                continue
            for sub in entry.sub_fields:
                index[sub.property] = (entry, sub)
            primary = entry.primary_field
            for name in (entry.primary, *entry.aliases):
                index[name] = (entry, primary)
        object.__setattr__(self, "_index", index)

    def lookup(self, name: str) -> tuple[SchemaEntry, ScalarField | None] | None:
        """Find the descriptor for a property name.

        Returns ``(entry, None)`` for a scalar field, ``(array, sub)`` for
        an array field, or ``None`` when the name is unknown.
        """
        return self._index.get(name)

