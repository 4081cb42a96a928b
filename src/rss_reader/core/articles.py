"""Fetch a web page and extract its article as markdown."""

from __future__ import annotations

import httpx

from rss_reader.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from rss_reader.core.fetcher import fetch_html
from rss_reader.core.markdown_engine import MarkdownEngineConfig, extract_article
from rss_reader.core.models import ArticleContent


async def fetch_article(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    config: MarkdownEngineConfig | None = None,
) -> ArticleContent:
    """Download *url* and run the extraction pipeline over the response."""
    html = await fetch_html(url, client=client, timeout=timeout, user_agent=user_agent)
    return extract_article(url, html, config)
