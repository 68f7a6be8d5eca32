"""Shared Protocol types for ogkit.

Structural interfaces for the external collaborators, so the consumer
depends on a contract rather than on :mod:`httpx` directly and tests can
substitute plain objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ogkit.fetch import FetchedPage


@runtime_checkable
class FetcherLike(Protocol):
    """Structural interface for the HTTP collaborator.

    ``fetch`` must raise :class:`ogkit.errors.FetchError` on any failure.
    """

    async def fetch(self, url: str) -> FetchedPage:
        """Download *url* and return its final URL and decoded body."""
        ...
