"""Open Graph object types and media elements."""

from __future__ import annotations

from ogkit.objects.base import BASE_SCHEMA, ObjectBase
from ogkit.objects.elements import Audio, Element, Image, Video
from ogkit.objects.website import Website

__all__ = [
    "BASE_SCHEMA",
    "Audio",
    "Element",
    "Image",
    "ObjectBase",
    "Video",
    "Website",
]
