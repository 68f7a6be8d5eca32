"""Choose which object type to instantiate from a page's ``og:type``."""

from __future__ import annotations

import structlog
from lxml.html import HtmlElement

from ogkit.document import og_type
from ogkit.objects.base import ObjectBase
from ogkit.objects.website import Website

logger = structlog.get_logger()

DEFAULT_OBJECT_TYPE: type[ObjectBase] = Website

_OBJECT_TYPES: dict[str, type[ObjectBase]] = {
    Website.og_type: Website,
}


def register_object_type(name: str, cls: type[ObjectBase]) -> None:
    """Map an ``og:type`` value to an object class."""
    _OBJECT_TYPES[name.strip().lower()] = cls


def object_type_for(name: str) -> type[ObjectBase]:
    """Resolve an ``og:type`` value, falling back to :data:`DEFAULT_OBJECT_TYPE`."""
    return _OBJECT_TYPES.get(name.strip().lower(), DEFAULT_OBJECT_TYPE)


def select_object_type(doc: HtmlElement) -> type[ObjectBase]:
    """Object class for *doc*; never fails."""
    name = og_type(doc)
    cls = object_type_for(name)
    logger.debug("og_type_selected", og_type=name or None, cls=cls.__name__)
    return cls
