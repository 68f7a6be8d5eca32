"""ogkit — read and write Open Graph metadata."""

from __future__ import annotations

from ogkit.consumer import Consumer, extract_properties
from ogkit.errors import (
    FetchError,
    OpenGraphError,
    ParseAnomaly,
    UnexpectedValueException,
    UnsupportedValueException,
)
from ogkit.objects import Audio, Image, ObjectBase, Video, Website
from ogkit.property import Property
from ogkit.publisher import Doctype, Publisher

__version__ = "0.1.0"

__all__ = [
    "Audio",
    "Consumer",
    "Doctype",
    "FetchError",
    "Image",
    "ObjectBase",
    "OpenGraphError",
    "ParseAnomaly",
    "Property",
    "Publisher",
    "UnexpectedValueException",
    "UnsupportedValueException",
    "Video",
    "Website",
    "__version__",
    "extract_properties",
]
