"""Consumer — extracts Open Graph objects from a URL or an HTML string.

Usage::

    consumer = Consumer(fallback_mode=True)
    website = consumer.load_html(html, fallback_url="https://example.com/")
    website = await consumer.load_url("https://example.com/")
"""

from __future__ import annotations

import structlog
from lxml.html import HtmlElement

from ogkit.config import ConsumerConfig, FetchConfig
from ogkit.document import parse_html, query_og_meta
from ogkit.fallback import apply_fallbacks
from ogkit.fetch import HttpFetcher
from ogkit.mapper import assign_properties
from ogkit.objects.base import ObjectBase
from ogkit.property import Property
from ogkit.selector import select_object_type
from ogkit.types import FetcherLike

logger = structlog.get_logger()


def extract_properties(doc: HtmlElement) -> list[Property]:
    """Build the ordered ``og:*`` property list of *doc*.

    The name comes from the ``property`` attribute, or ``name`` when
    ``property`` is absent or empty.
    """
    properties: list[Property] = []
    for tag in query_og_meta(doc):
        name = (tag.get("property") or "").strip() or (tag.get("name") or "").strip()
        value = (tag.get("content") or "").strip()
        properties.append(Property(name, value))
    return properties


class Consumer:
    """Reads Open Graph data from pages.

    Args:
        config: Extraction settings; ``fallback_mode`` and ``strict_mode``
            keyword arguments override the corresponding config values.
        fetcher: HTTP collaborator for :meth:`load_url`. Defaults to a
            fresh :class:`~ogkit.fetch.HttpFetcher` per call.
        fetch_config: Settings for the default fetcher.
    """

    def __init__(
        self,
        config: ConsumerConfig | None = None,
        *,
        fallback_mode: bool | None = None,
        strict_mode: bool | None = None,
        fetcher: FetcherLike | None = None,
        fetch_config: FetchConfig | None = None,
    ) -> None:
        config = config or ConsumerConfig()
        self.fallback_mode = (
            config.fallback_mode if fallback_mode is None else fallback_mode
        )
        self.strict_mode = config.strict_mode if strict_mode is None else strict_mode
        self._fetcher = fetcher
        self._fetch_config = fetch_config

    async def load_url(self, url: str) -> ObjectBase:
        """Fetch *url* and extract its Open Graph object.

        The final (post-redirect) URL is the fallback ``url``.

        Raises:
            FetchError: If the page cannot be downloaded.
            UnexpectedValueException: In strict mode, on a malformed property.
        """
        if self._fetcher is not None:
            page = await self._fetcher.fetch(url)
        else:
            async with HttpFetcher(self._fetch_config) as fetcher:
                page = await fetcher.fetch(url)
        return self.load_html(page.content, fallback_url=page.url)

    def load_html(self, html: str | bytes, fallback_url: str | None = None) -> ObjectBase:
        """Extract the Open Graph object from an HTML document.

        Args:
            html: Whole document; empty input yields an empty object.
            fallback_url: ``url`` to use in fallback mode when the page has
                neither ``og:url`` nor a canonical link.

        Raises:
            UnexpectedValueException: In strict mode, on a malformed property.
        """
        doc = parse_html(html)
        properties = extract_properties(doc)

        obj = select_object_type(doc)()
        result = assign_properties(obj, properties, strict=self.strict_mode)
        if self.strict_mode:
            result.unwrap()
        elif result.anomalies:
            logger.info(
                "og_properties_skipped",
                count=len(result.anomalies),
                names=[a.property_name for a in result.anomalies],
            )

        if self.fallback_mode:
            apply_fallbacks(obj, doc, fallback_url)

        logger.debug(
            "og_loaded",
            object_type=type(obj).__name__,
            properties=len(properties),
            assigned=result.assigned,
        )
        return obj
