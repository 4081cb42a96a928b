"""RSS/Atom feed reading via feedparser."""

from __future__ import annotations

import logging
from typing import Any

import feedparser
import httpx

from rss_reader.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from rss_reader.core.errors import FeedError
from rss_reader.core.fetcher import fetch_url
from rss_reader.core.models import FeedEntry, FeedInfo

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _text(value: Any) -> str | None:
    """Return a stripped string, or None for missing/blank values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _entry_categories(entry: Any) -> list[str] | None:
    terms = [
        tag.get("term") or tag.get("label")
        for tag in entry.get("tags", [])
    ]
    terms = [t for t in terms if t]
    return terms or None


def _to_entry(entry: Any) -> FeedEntry:
    """Map a feedparser entry onto :class:`FeedEntry` with its fallbacks."""
    return FeedEntry(
        title=_text(entry.get("title")) or "Untitled",
        link=_text(entry.get("link")) or "",
        pub_date=_text(entry.get("published")) or _text(entry.get("updated")),
        creator=_text(entry.get("author")),
        summary=_text(entry.get("summary")),
        categories=_entry_categories(entry),
        guid=_text(entry.get("id")),
    )


def parse_feed(
    content: bytes | str, url: str, *, limit: int = DEFAULT_LIMIT
) -> FeedInfo:
    """Parse raw feed content and keep the first *limit* entries.

    Raises:
        FeedError: when the document is not a recognisable feed.
    """
    if not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")

    parsed = feedparser.parse(content)
    feed = parsed.get("feed", {})
    entries = parsed.get("entries", [])

    if parsed.get("bozo") and not entries and not feed.get("title"):
        reason = parsed.get("bozo_exception")
        raise FeedError(f"Not a valid RSS/Atom feed: {reason or 'unrecognised format'}")
    if parsed.get("bozo"):
        logger.warning("Feed %s is malformed: %s", url, parsed.get("bozo_exception"))

    return FeedInfo(
        title=_text(feed.get("title")) or "Untitled Feed",
        description=_text(feed.get("subtitle")) or _text(feed.get("description")),
        link=_text(feed.get("link")) or url,
        last_build_date=_text(feed.get("updated")),
        entries=[_to_entry(entry) for entry in entries[:limit]],
    )


async def fetch_feed(
    url: str,
    *,
    limit: int = DEFAULT_LIMIT,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FeedInfo:
    """Fetch the feed at *url* and return its metadata and first entries."""
    resp = await fetch_url(url, client=client, timeout=timeout, user_agent=user_agent)
    info = parse_feed(resp.content, url, limit=limit)
    logger.info("Read %d entries from %s", len(info.entries), url)
    return info
