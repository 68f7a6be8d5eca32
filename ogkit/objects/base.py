"""Base Open Graph object and the schema shared by every object type."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import ClassVar

from ogkit import property as prop
from ogkit.objects.elements import Audio, Element, Image, Video
from ogkit.schema import ArrayField, FieldKind, ScalarField, Schema

IMAGES = ArrayField(
    attr="images",
    element_type=Image,
    primary=prop.IMAGE,
    primary_attr="url",
    aliases=(prop.IMAGE_URL,),
    sub_fields=(
        ScalarField(prop.IMAGE, "url", FieldKind.URL),
        ScalarField(prop.IMAGE_SECURE_URL, "secure_url", FieldKind.URL),
        ScalarField(prop.IMAGE_TYPE, "type"),
        ScalarField(prop.IMAGE_WIDTH, "width", FieldKind.INTEGER),
        ScalarField(prop.IMAGE_HEIGHT, "height", FieldKind.INTEGER),
        ScalarField(prop.IMAGE_USER_GENERATED, "user_generated", FieldKind.BOOLEAN),
    ),
)

VIDEOS = ArrayField(
    attr="videos",
    element_type=Video,
    primary=prop.VIDEO,
    primary_attr="url",
    aliases=(prop.VIDEO_URL,),
    sub_fields=(
        ScalarField(prop.VIDEO, "url", FieldKind.URL),
        ScalarField(prop.VIDEO_SECURE_URL, "secure_url", FieldKind.URL),
        ScalarField(prop.VIDEO_TYPE, "type"),
        ScalarField(prop.VIDEO_WIDTH, "width", FieldKind.INTEGER),
        ScalarField(prop.VIDEO_HEIGHT, "height", FieldKind.INTEGER),
    ),
)

AUDIOS = ArrayField(
    attr="audios",
    element_type=Audio,
    primary=prop.AUDIO,
    primary_attr="url",
    aliases=(prop.AUDIO_URL,),
    sub_fields=(
        ScalarField(prop.AUDIO, "url", FieldKind.URL),
        ScalarField(prop.AUDIO_SECURE_URL, "secure_url", FieldKind.URL),
        ScalarField(prop.AUDIO_TYPE, "type"),
    ),
)

BASE_SCHEMA = Schema(
    entries=(
        ScalarField(prop.TYPE, "type"),
        ScalarField(prop.TITLE, "title"),
        ScalarField(prop.URL, "url", FieldKind.URL),
        ScalarField(prop.DESCRIPTION, "description"),
        ScalarField(prop.DETERMINER, "determiner"),
        ScalarField(prop.LOCALE, "locale"),
        ScalarField(prop.LOCALE_ALTERNATE, "locale_alternate", multiple=True),
        ScalarField(prop.RICH_ATTACHMENT, "rich_attachment", FieldKind.BOOLEAN),
        ScalarField(prop.SEE_ALSO, "see_also", FieldKind.URL, multiple=True),
        ScalarField(prop.SITE_NAME, "site_name"),
        ScalarField(prop.UPDATED_TIME, "updated_time", FieldKind.DATETIME),
        IMAGES,
        VIDEOS,
        AUDIOS,
    )
)


@dataclass
class ObjectBase:
    """Fields common to every Open Graph object type.

    Subclasses set :attr:`og_type` and, when they add type-specific
    properties, their own :attr:`schema`.
    """

    schema: ClassVar[Schema] = BASE_SCHEMA
    og_type: ClassVar[str] = ""

    type: str | None = None
    title: str | None = None
    url: str | None = None
    description: str | None = None
    determiner: str | None = None
    locale: str | None = None
    locale_alternate: list[str] = field(default_factory=list)
    rich_attachment: bool | None = None
    see_also: list[str] = field(default_factory=list)
    site_name: str | None = None
    updated_time: datetime | None = None
    images: list[Image] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
    audios: list[Audio] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when no field holds a value."""
        return all(
            getattr(self, f.name) in (None, "", []) for f in fields(self)
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-friendly dict."""
        out: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, list):
                value = [
                    v.to_dict() if isinstance(v, Element) else v for v in value
                ]
            out[f.name] = value
        return out
