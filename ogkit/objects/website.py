"""The ``website`` object type."""

from __future__ import annotations

from dataclasses import dataclass

from ogkit.objects.base import ObjectBase


@dataclass
class Website(ObjectBase):
    """Default object type; used for any page without a more specific type."""

    og_type = "website"
