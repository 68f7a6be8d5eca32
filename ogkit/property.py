"""Open Graph property — a single ``<meta>`` name/content pair."""

from __future__ import annotations

from dataclasses import dataclass

# ── Basic metadata ─────────────────────────────────────────────────

TYPE = "og:type"
TITLE = "og:title"
URL = "og:url"
DESCRIPTION = "og:description"
DETERMINER = "og:determiner"
LOCALE = "og:locale"
LOCALE_ALTERNATE = "og:locale:alternate"
RICH_ATTACHMENT = "og:rich_attachment"
SEE_ALSO = "og:see_also"
SITE_NAME = "og:site_name"
UPDATED_TIME = "og:updated_time"

# ── Structured media ───────────────────────────────────────────────

IMAGE = "og:image"
IMAGE_URL = "og:image:url"
IMAGE_SECURE_URL = "og:image:secure_url"
IMAGE_TYPE = "og:image:type"
IMAGE_WIDTH = "og:image:width"
IMAGE_HEIGHT = "og:image:height"
IMAGE_USER_GENERATED = "og:image:user_generated"

VIDEO = "og:video"
VIDEO_URL = "og:video:url"
VIDEO_SECURE_URL = "og:video:secure_url"
VIDEO_TYPE = "og:video:type"
VIDEO_WIDTH = "og:video:width"
VIDEO_HEIGHT = "og:video:height"

AUDIO = "og:audio"
AUDIO_URL = "og:audio:url"
AUDIO_SECURE_URL = "og:audio:secure_url"
AUDIO_TYPE = "og:audio:type"

OG_PREFIX = "og:"


@dataclass(frozen=True)
class Property:
    """A name/value pair read from (or written to) a meta tag."""

    name: str
    value: str
