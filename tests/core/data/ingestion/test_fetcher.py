from __future__ import annotations

import httpx
import pytest

from quakefeed.core.data.ingestion.fetcher import CSV_ACCEPT, fetch_text
from quakefeed.core.exceptions import FetchError

FEED_URL = "https://feed.example.test/all_month.csv"


@pytest.mark.asyncio
async def test_fetch_text_requests_csv_and_returns_raw_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="a,b\n1,2\n")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        body = await fetch_text(FEED_URL, client=client)

    assert body == "a,b\n1,2\n"
    assert len(seen) == 1
    assert seen[0].headers["accept"] == CSV_ACCEPT
    assert "authorization" not in seen[0].headers
    assert "cookie" not in seen[0].headers


@pytest.mark.asyncio
async def test_json_body_is_not_decoded() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b'{"features": []}', headers={"content-type": "application/json"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        body = await fetch_text(FEED_URL, client=client)

    assert body == '{"features": []}'


@pytest.mark.asyncio
async def test_error_status_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchError) as exc_info:
            await fetch_text(FEED_URL, client=client)

    error = exc_info.value
    assert error.url == FEED_URL
    assert FEED_URL in str(error)
    assert "503" in str(error)
    assert isinstance(error.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_transport_failure_wraps_cause() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchError) as exc_info:
            await fetch_text(FEED_URL, client=client)

    assert calls == 1
    assert exc_info.value.cause == "connection refused"
    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.details["url"] == FEED_URL


@pytest.mark.asyncio
async def test_malformed_url_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="a,b\n1,2\n")

    bad_url = "https://feed.example.test:notaport/all_month.csv"
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchError) as exc_info:
            await fetch_text(bad_url, client=client)

    assert exc_info.value.url == bad_url
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
