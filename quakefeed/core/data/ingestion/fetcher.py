"""HTTP retrieval of the raw CSV feed."""

from __future__ import annotations

import httpx
from loguru import logger

from quakefeed.core.exceptions import FetchError

CSV_ACCEPT = "text/csv, text/plain, */*"
DEFAULT_TIMEOUT = 30.0


async def fetch_text(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Fetch ``url`` and return the response body as text.

    The body is never JSON-decoded and no credentials, cookies or ``.netrc``
    auth are sent. One request per call; retries are left to the caller.

    Raises:
        FetchError: on any transport failure or non-success status.
    """

    headers = {"Accept": CSV_ACCEPT}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=True, trust_env=False) as owned:
                response = await owned.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.bind(stage="fetch", error_code="FETCH_ERROR").error("Error fetching data from {}: {}", url, e)
        raise FetchError(f"Failed to fetch data from {url}. {e}", url=url, cause=str(e)) from e

    logger.bind(stage="fetch").debug("Fetched {} bytes from {}", len(response.content), url)
    return response.text


__all__ = ["CSV_ACCEPT", "fetch_text"]
