"""Structured media elements: images, videos, audios."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class Element:
    """An array element; ``url`` is set when the element is created."""

    url: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass
class Image(Element):
    """An ``og:image`` element."""

    secure_url: str | None = None
    type: str | None = None
    width: int | None = None
    height: int | None = None
    user_generated: bool | None = None


@dataclass
class Video(Element):
    """An ``og:video`` element."""

    secure_url: str | None = None
    type: str | None = None
    width: int | None = None
    height: int | None = None


@dataclass
class Audio(Element):
    """An ``og:audio`` element."""

    secure_url: str | None = None
    type: str | None = None
