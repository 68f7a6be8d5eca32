"""Tests for the HTTP fetcher."""

from __future__ import annotations

import httpx
import pytest

from ogkit.config import FetchConfig
from ogkit.consumer import Consumer
from ogkit.errors import FetchError
from ogkit.fetch import HttpFetcher
from ogkit.types import FetcherLike

PAGE = '<html><head><meta property="og:title" content="Remote"></head></html>'


def _client(handler: httpx.MockTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=handler, follow_redirects=True)


class TestHttpFetcher:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(HttpFetcher(), FetcherLike)

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=PAGE))
        async with _client(transport) as client:
            page = await HttpFetcher(client=client).fetch("https://example.com/")
        assert page.url == "https://example.com/"
        assert page.content == PAGE.encode()
        assert page.status_code == 200

    @pytest.mark.asyncio
    async def test_follows_redirect(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://example.com/new"})
            return httpx.Response(200, text=PAGE)

        async with _client(httpx.MockTransport(handler)) as client:
            page = await HttpFetcher(client=client).fetch("https://example.com/old")
        assert page.url == "https://example.com/new"

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(404))
        async with _client(transport) as client:
            with pytest.raises(FetchError) as excinfo:
                await HttpFetcher(client=client).fetch("https://example.com/missing")
        assert excinfo.value.status == 404
        assert excinfo.value.reason == "http_404"

    @pytest.mark.asyncio
    async def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(httpx.MockTransport(handler)) as client:
            with pytest.raises(FetchError) as excinfo:
                await HttpFetcher(client=client).fetch("https://example.com/")
        assert excinfo.value.status is None
        assert "refused" in excinfo.value.reason

    @pytest.mark.asyncio
    async def test_body_too_large(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="x" * 64))
        async with _client(transport) as client:
            fetcher = HttpFetcher(FetchConfig(max_response_bytes=16), client=client)
            with pytest.raises(FetchError):
                await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["ftp://example.com/", "file:///etc/passwd", "/relative"])
    async def test_rejects_non_http(self, url: str) -> None:
        with pytest.raises(FetchError):
            await HttpFetcher().fetch(url)

    @pytest.mark.asyncio
    async def test_declared_length_too_large(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, headers={"Content-Length": "100000"}, content=b"<html></html>"
            )
        )
        async with _client(transport) as client:
            fetcher = HttpFetcher(FetchConfig(max_response_bytes=1024), client=client)
            with pytest.raises(FetchError) as excinfo:
                await fetcher.fetch("https://example.com/")
        assert excinfo.value.reason == "response body too large"


class TestConsumerLoadUrl:
    @pytest.mark.asyncio
    async def test_end_to_end(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=PAGE))
        async with _client(transport) as client:
            consumer = Consumer(fallback_mode=True, fetcher=HttpFetcher(client=client))
            obj = await consumer.load_url("https://example.com/page")
        assert obj.title == "Remote"
        assert obj.url == "https://example.com/page"

    @pytest.mark.asyncio
    async def test_keeps_raw_bytes(self) -> None:
        body = '<meta charset="shift_jis"><meta property="og:title" content="日本語">'
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200,
                headers={"Content-Type": "text/html"},
                content=body.encode("shift_jis"),
            )
        )
        async with _client(transport) as client:
            consumer = Consumer(fetcher=HttpFetcher(client=client))
            obj = await consumer.load_url("https://example.com/ja")
        assert obj.title == "日本語"
