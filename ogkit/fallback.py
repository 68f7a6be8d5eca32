"""Fill missing url/title/description from generic HTML elements.

Each pass leaves a non-empty field untouched.  Candidates are tried in
order and the first non-empty one wins:

- url: ``<link rel="canonical">``, then the caller's default URL
- title: ``<title>``, then the first ``<h1>``, then the first ``<h2>``
- description: ``<meta name="description">``, then the first ``<p>``
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from lxml.html import HtmlElement

from ogkit.document import (
    canonical_href,
    description_content,
    heading_text,
    paragraph_text,
    title_text,
)
from ogkit.objects.base import ObjectBase

logger = structlog.get_logger()

Candidate = Callable[[], str | None]


def _first_non_empty(candidates: list[Candidate]) -> str | None:
    for candidate in candidates:
        value = candidate()
        if value:
            value = " ".join(value.split())
            if value:
                return value
    return None


def _fill(obj: ObjectBase, attr: str, candidates: list[Candidate]) -> None:
    if getattr(obj, attr):
        return
    value = _first_non_empty(candidates)
    if value is not None:
        setattr(obj, attr, value)
        logger.debug("og_fallback_applied", field=attr, value=value)


def fallback_url(
    obj: ObjectBase, doc: HtmlElement, default_url: str | None = None
) -> None:
    _fill(obj, "url", [lambda: canonical_href(doc), lambda: default_url])


def fallback_title(obj: ObjectBase, doc: HtmlElement) -> None:
    _fill(
        obj,
        "title",
        [
            lambda: title_text(doc),
            lambda: heading_text(doc, 1),
            lambda: heading_text(doc, 2),
        ],
    )


def fallback_description(obj: ObjectBase, doc: HtmlElement) -> None:
    _fill(
        obj,
        "description",
        [lambda: description_content(doc), lambda: paragraph_text(doc)],
    )


def apply_fallbacks[T: ObjectBase](
    obj: T, doc: HtmlElement, default_url: str | None = None
) -> T:
    """Run the url, title and description passes on *obj* in place."""
    fallback_url(obj, doc, default_url)
    fallback_title(obj, doc)
    fallback_description(obj, doc)
    return obj
