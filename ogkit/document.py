"""HTML parsing and the XPath queries run against parsed documents.

Uses ``lxml.html``; every text query goes through XPath
``normalize-space()`` so callers always get collapsed, trimmed strings.
"""

from __future__ import annotations

import structlog
from lxml import etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from ogkit.property import OG_PREFIX, TYPE

logger = structlog.get_logger()

_OG_META_XPATH = (
    f'//meta[starts-with(@property, "{OG_PREFIX}") or starts-with(@name, "{OG_PREFIX}")]'
)
_OG_TYPE_XPATH = f'normalize-space(//meta[@property="{TYPE}" or @name="{TYPE}"]/@content)'
_CANONICAL_XPATH = 'normalize-space(//link[@rel="canonical"]/@href)'
_TITLE_XPATH = "normalize-space(//title)"
_DESCRIPTION_XPATH = (
    'normalize-space(//meta[@property="description" or @name="description"]/@content)'
)
_PARAGRAPH_XPATH = "normalize-space(//p)"

_EMPTY_DOCUMENT = "<html><head></head><body></body></html>"


def parse_html(markup: str | bytes) -> HtmlElement:
    """Parse *markup* into a document tree.

    Empty or whitespace-only input, and input libxml2 considers empty
    (e.g. a lone comment), yields an empty ``<html>`` document rather
    than an error.
    """
    if not markup or not markup.strip():
        return lxml_html.document_fromstring(_EMPTY_DOCUMENT)
    try:
        return lxml_html.document_fromstring(markup)
    except ValueError:
        # str input carrying an XML encoding declaration
        if isinstance(markup, str):
            return parse_html(markup.encode("utf-8"))
        raise
    except etree.ParserError as exc:
        logger.debug("html_parse_empty", error=str(exc))
        return lxml_html.document_fromstring(_EMPTY_DOCUMENT)


def query_og_meta(doc: HtmlElement) -> list[HtmlElement]:
    """All ``<meta>`` elements whose property or name starts with ``og:``."""
    return list(doc.xpath(_OG_META_XPATH))


def _text(doc: HtmlElement, expression: str) -> str:
    return str(doc.xpath(expression))


def og_type(doc: HtmlElement) -> str:
    """Content of the first ``og:type`` meta tag, or ``""``."""
    return _text(doc, _OG_TYPE_XPATH)


def canonical_href(doc: HtmlElement) -> str:
    return _text(doc, _CANONICAL_XPATH)


def title_text(doc: HtmlElement) -> str:
    return _text(doc, _TITLE_XPATH)


def heading_text(doc: HtmlElement, level: int) -> str:
    """Text of the first ``<h{level}>`` element."""
    if not 1 <= level <= 6:
        raise ValueError(f"heading level must be 1-6, got {level}")
    return _text(doc, f"normalize-space(//h{level})")


def description_content(doc: HtmlElement) -> str:
    return _text(doc, _DESCRIPTION_XPATH)


def paragraph_text(doc: HtmlElement) -> str:
    """Text of the first ``<p>`` element."""
    return _text(doc, _PARAGRAPH_XPATH)
