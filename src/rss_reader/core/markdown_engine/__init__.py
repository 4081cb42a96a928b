"""Article extraction pipeline: HTML page -> main content -> markdown."""

from __future__ import annotations

from bs4 import BeautifulSoup

from rss_reader.core.markdown_engine.config import MarkdownEngineConfig
from rss_reader.core.markdown_engine.locator import (
    extract_title,
    locate_content,
    prune_noise,
)
from rss_reader.core.markdown_engine.renderer import (
    html_to_markdown,
    normalize_markdown,
    render_markdown,
)
from rss_reader.core.models import ArticleContent

__all__ = [
    "MarkdownEngineConfig",
    "convert_html_to_markdown",
    "extract_article",
    "extract_title",
    "html_to_markdown",
    "locate_content",
    "normalize_markdown",
    "prune_noise",
    "render_markdown",
]


def convert_html_to_markdown(
    html: str, config: MarkdownEngineConfig | None = None
) -> str:
    """Locate the main content of *html*, prune it and render it as markdown."""
    if not html:
        return ""
    cfg = config or MarkdownEngineConfig()
    soup = BeautifulSoup(html, cfg.parser)
    element = prune_noise(locate_content(soup, cfg), cfg)
    return render_markdown(element, cfg)


def extract_article(
    url: str, html: str, config: MarkdownEngineConfig | None = None
) -> ArticleContent:
    """Build an :class:`ArticleContent` from raw page HTML.

    Pure transform: *url* is carried through as metadata and nothing is
    fetched. The title is read before pruning so a ``<header>``-wrapped
    ``<h1>`` still counts.
    """
    cfg = config or MarkdownEngineConfig()
    soup = BeautifulSoup(html, cfg.parser)
    title = extract_title(soup, cfg)
    element = prune_noise(locate_content(soup, cfg), cfg)
    return ArticleContent(
        title=title,
        content=render_markdown(element, cfg),
        url=url,
    )
