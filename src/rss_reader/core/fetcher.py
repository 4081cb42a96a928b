"""HTTP fetch step shared by the feed reader and the article extractor."""

from __future__ import annotations

import logging

import httpx

from rss_reader.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from rss_reader.core.errors import FetchError

logger = logging.getLogger(__name__)


async def fetch_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.Response:
    """GET *url*, following redirects.

    Raises:
        FetchError: on timeouts, connection failures and non-2xx responses.
    """
    headers = {"User-Agent": user_agent}
    logger.info("Fetching %s", url)
    try:
        if client is not None:
            resp = await client.get(
                url, headers=headers, follow_redirects=True, timeout=timeout,
            )
        else:
            async with httpx.AsyncClient(
                timeout=timeout, follow_redirects=True,
            ) as own_client:
                resp = await own_client.get(url, headers=headers)
    except httpx.TimeoutException as e:
        raise FetchError(f"Timed out after {timeout:g}s") from e
    except httpx.HTTPError as e:
        raise FetchError(str(e) or type(e).__name__) from e

    if not resp.is_success:
        raise FetchError(f"HTTP {resp.status_code} {resp.reason_phrase}".rstrip())
    return resp


async def fetch_html(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Fetch *url* and return the decoded response body."""
    resp = await fetch_url(url, client=client, timeout=timeout, user_agent=user_agent)
    return resp.text
