"""FastMCP server exposing the feed and article tools."""

from __future__ import annotations

import logging
from typing import Annotated, Any
from urllib.parse import urlparse

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field, ValidationError

from rss_reader import __version__
from rss_reader.core.articles import fetch_article
from rss_reader.core.config import ServerConfig, Transport, load_server_config
from rss_reader.core.errors import RssReaderError
from rss_reader.core.feeds import DEFAULT_LIMIT, MAX_LIMIT, fetch_feed

logger = logging.getLogger(__name__)

mcp = FastMCP(name="rss-reader-mcp", version=__version__)

_READ_ONLY = {
    "readOnlyHint": True,
    "openWorldHint": True,
    "idempotentHint": True,
}


def _tool_config() -> ServerConfig:
    try:
        return load_server_config()
    except ValidationError as e:
        raise ToolError(f"Invalid server configuration: {e}") from e


def _require_http_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ToolError("Invalid URL format")
    return url


@mcp.tool(annotations={"title": "Fetch RSS Feed Entries", **_READ_ONLY})
async def fetch_feed_entries(
    url: Annotated[str, Field(description="URL of the RSS or Atom feed")],
    limit: Annotated[
        int, Field(ge=1, le=MAX_LIMIT, description="Maximum entries to return")
    ] = DEFAULT_LIMIT,
) -> dict[str, Any]:
    """Fetch RSS feed entries from a given URL."""
    _require_http_url(url)
    if not 1 <= limit <= MAX_LIMIT:
        raise ToolError(f"limit must be between 1 and {MAX_LIMIT}")
    cfg = _tool_config()
    try:
        info = await fetch_feed(
            url, limit=limit, timeout=cfg.request_timeout, user_agent=cfg.user_agent,
        )
    except (RssReaderError, httpx.HTTPError) as e:
        logger.warning("Feed fetch failed for %s: %s", url, e)
        raise ToolError(f"Failed to fetch RSS feed: {e}") from e
    return info.model_dump(mode="json", by_alias=True)


@mcp.tool(annotations={"title": "Fetch Article Content", **_READ_ONLY})
async def fetch_article_content(
    url: Annotated[str, Field(description="URL of the article page")],
) -> dict[str, Any]:
    """Fetch and extract article content from a URL, formatted as Markdown."""
    _require_http_url(url)
    cfg = _tool_config()
    try:
        article = await fetch_article(
            url, timeout=cfg.request_timeout, user_agent=cfg.user_agent,
        )
    except (RssReaderError, httpx.HTTPError) as e:
        logger.warning("Article fetch failed for %s: %s", url, e)
        raise ToolError(f"Failed to fetch article content: {e}") from e
    return article.model_dump(mode="json", by_alias=True)


def run_server(config: ServerConfig | None = None) -> None:
    """Start the MCP server on the configured transport."""
    cfg = config or load_server_config()
    logger.info("RSS Reader MCP server running on %s", cfg.transport.value)
    if cfg.transport is Transport.http:
        mcp.run(transport="http", host=cfg.host, port=cfg.port)
    else:
        mcp.run(transport="stdio")
