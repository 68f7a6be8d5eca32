"""Forward mapper: flat property sequence → typed Open Graph object.

Properties are applied strictly in document order against the object's
schema:

- a scalar property overwrites its field (string-array fields append);
- an array's primary property appends a new element;
- any other array property fills the *last* element of its array.

A sub-property seen before any primary, or a value that does not coerce
to its field's kind, is an anomaly.  The mapper never raises: anomalies
are collected on the returned :class:`MapResult`.  With ``strict=True``
mapping stops at the first one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from ogkit.coercion import to_python
from ogkit.errors import UnexpectedValueException
from ogkit.objects.base import ObjectBase
from ogkit.property import Property
from ogkit.schema import ArrayField, ScalarField

logger = structlog.get_logger()


@dataclass
class MapResult[T: ObjectBase]:
    """Outcome of a mapping pass: the object plus any anomalies met."""

    obj: T
    anomalies: list[UnexpectedValueException] = field(default_factory=list)
    assigned: int = 0

    @property
    def ok(self) -> bool:
        return not self.anomalies

    def unwrap(self) -> T:
        """Return the object, or raise the first anomaly."""
        if self.anomalies:
            raise self.anomalies[0]
        return self.obj


def assign_properties[T: ObjectBase](
    obj: T, properties: Iterable[Property], *, strict: bool = False
) -> MapResult[T]:
    """Apply *properties* to *obj* in order.

    Args:
        obj: Freshly created object; mutated in place.
        properties: Properties in document order.
        strict: Stop at the first anomaly instead of skipping it.

    Returns:
        MapResult wrapping *obj* and the anomalies encountered.
    """
    result = MapResult(obj)
    schema = type(obj).schema

    for p in properties:
        found = schema.lookup(p.name)
        if found is None:
            continue
        entry, sub = found
        try:
            if isinstance(entry, ScalarField):
                _assign_scalar(obj, entry, p)
            else:
                assert sub is not None
                _assign_array(obj, entry, sub, p)
        except UnexpectedValueException as exc:
            result.anomalies.append(exc)
            logger.debug(
                "og_property_discarded",
                name=p.name,
                value=p.value,
                reason=exc.reason,
                strict=strict,
            )
            if strict:
                break
            continue
        result.assigned += 1

    return result


def _coerce(p: Property, target: ScalarField, array_field: str | None) -> object:
    try:
        return to_python(p.value, target.kind)
    except ValueError as exc:
        raise UnexpectedValueException(
            p.name,
            p.value,
            f"cannot coerce to {target.kind}: {exc}",
            array_field=array_field,
        ) from exc


def _assign_scalar(obj: ObjectBase, target: ScalarField, p: Property) -> None:
    value = _coerce(p, target, None)
    if target.multiple:
        getattr(obj, target.attr).append(value)
    else:
        setattr(obj, target.attr, value)


def _assign_array(
    obj: ObjectBase, array: ArrayField, sub: ScalarField, p: Property
) -> None:
    elements = getattr(obj, array.attr)

    if array.starts_element(p.name):
        value = _coerce(p, sub, array.attr)
        elements.append(array.element_type(**{array.primary_attr: value}))
        return

    if not elements:
        raise UnexpectedValueException(
            p.name,
            p.value,
            f"found before any '{array.primary}' element",
            array_field=array.attr,
        )
    setattr(elements[-1], sub.attr, _coerce(p, sub, array.attr))
