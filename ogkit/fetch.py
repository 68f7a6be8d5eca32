"""HTTP collaborator: downloads a page for :meth:`Consumer.load_url`.

No retries and no caching; a failed fetch surfaces as
:class:`~ogkit.errors.FetchError`.
"""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import httpx
import structlog

from ogkit.config import FetchConfig
from ogkit.errors import FetchError

logger = structlog.get_logger()

_ALLOWED_SCHEMES = frozenset({"http", "https"})

# Well-known system CA bundle paths (Linux / macOS)
_SYSTEM_CA_PATHS: list[str] = [
    "/etc/ssl/certs/ca-certificates.crt",  # Debian/Ubuntu
    "/etc/pki/tls/certs/ca-bundle.crt",  # RHEL/CentOS
    "/etc/ssl/cert.pem",  # Alpine/macOS
]


def create_ssl_context() -> ssl.SSLContext | bool:
    """Create an SSL context from the first available system CA bundle.

    Returns ``True`` (httpx default verify) if none is found.
    """
    for ca_path in _SYSTEM_CA_PATHS:
        if Path(ca_path).is_file():
            return ssl.create_default_context(cafile=ca_path)
    return True


@dataclass(frozen=True)
class FetchedPage:
    """A downloaded document."""

    url: str  # final URL after redirects
    content: bytes  # raw body; decoding is left to the HTML parser
    status_code: int = 200


class HttpFetcher:
    """Fetch pages with a lazily created ``httpx.AsyncClient``.

    Usage:
        async with HttpFetcher(config) as fetcher:
            page = await fetcher.fetch("https://example.com")
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or FetchConfig()
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._config.user_agent},
                follow_redirects=self._config.follow_redirects,
                timeout=self._config.timeout,
                verify=create_ssl_context(),
            )
            self._owns_client = True
        return self._client

    async def fetch(self, url: str) -> FetchedPage:
        """Download *url*.

        Raises:
            FetchError: On an invalid URL, transport error, non-2xx status,
                or a body larger than ``max_response_bytes``.
        """
        parsed = urlparse(url)
        if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.hostname:
            raise FetchError(url, "only absolute http(s) URLs can be fetched")

        client = await self._get_client()
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("fetch_http_error", url=url, status=status)
            raise FetchError(url, f"http_{status}", status=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("fetch_network_error", url=url, error=str(exc))
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        # Early Content-Length check before touching the body
        content_length = resp.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                declared = None  # malformed header, fall through to the body check
            if declared is not None and declared > self._config.max_response_bytes:
                logger.warning(
                    "fetch_too_large_header",
                    url=url,
                    content_length=declared,
                    limit=self._config.max_response_bytes,
                )
                raise FetchError(url, "response body too large", status=resp.status_code)

        if len(resp.content) > self._config.max_response_bytes:
            logger.warning(
                "fetch_too_large",
                url=url,
                size=len(resp.content),
                limit=self._config.max_response_bytes,
            )
            raise FetchError(url, "response body too large", status=resp.status_code)

        final_url = str(resp.url)
        logger.debug(
            "fetch_done", url=url, final=final_url, status=resp.status_code
        )
        return FetchedPage(
            url=final_url, content=resp.content, status_code=resp.status_code
        )

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> HttpFetcher:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
