"""Content locator: picks the article body out of a parsed page and prunes it."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from rss_reader.core.markdown_engine.config import MarkdownEngineConfig

logger = logging.getLogger(__name__)


def locate_content(
    soup: BeautifulSoup, config: MarkdownEngineConfig | None = None
) -> Tag:
    """Return the element most likely to hold the article body.

    Tries the configured content selectors in order, then the paragraph
    density fallback, then ``<body>``. Never returns None.

    html.parser does not synthesize an omitted ``<body>``; for such pages
    ``<html>`` stands in as the boundary and ``<head>`` is dropped from the
    fallback element.
    """
    cfg = config or MarkdownEngineConfig()

    for selector in cfg.content_selectors:
        match = soup.select_one(selector)
        if match is not None:
            logger.debug("Content selector %r matched <%s>", selector, match.name)
            return match

    best = _densest_ancestor(soup, cfg.paragraph_tag)
    if best is not None:
        logger.debug("Density fallback selected <%s>", best.name)
        return best

    logger.debug("No content candidate, falling back to <body>")
    return _body_or_root(soup)


def _boundary(soup: BeautifulSoup) -> Tag:
    """Element whose descendants are the article candidates."""
    if soup.body is not None:
        return soup.body
    if soup.html is not None:
        return soup.html
    return soup


def _body_or_root(soup: BeautifulSoup) -> Tag:
    root = _boundary(soup)
    if root is not soup.body:
        for head in root.find_all("head"):
            if not head.decomposed:
                head.decompose()
    return root


def _densest_ancestor(soup: BeautifulSoup, paragraph_tag: str) -> Tag | None:
    """Find the ancestor containing the most paragraph descendants.

    Ties keep whichever ancestor was counted first: the scan replaces the
    current best only on a strictly higher count.
    """
    boundary = _boundary(soup)
    counts: dict[int, int] = {}
    elements: dict[int, Tag] = {}

    for paragraph in soup.find_all(paragraph_tag):
        if paragraph.find_parent("head") is not None:
            continue
        for parent in paragraph.parents:
            if parent is boundary or parent is soup or parent.name == "html":
                break
            key = id(parent)
            if key not in counts:
                counts[key] = 0
                elements[key] = parent
            counts[key] += 1

    best: Tag | None = None
    max_count = 0
    for key, count in counts.items():
        if count > max_count:
            max_count = count
            best = elements[key]
    return best


def prune_noise(
    element: Tag, config: MarkdownEngineConfig | None = None
) -> Tag:
    """Remove navigation, ads and other boilerplate below *element*, in place."""
    cfg = config or MarkdownEngineConfig()
    for selector in cfg.noise_selectors:
        for tag in element.select(selector):
            # Skip tags already destroyed along with a matched ancestor
            if tag.decomposed:
                continue
            tag.decompose()
    return element


def extract_title(
    soup: BeautifulSoup, config: MarkdownEngineConfig | None = None
) -> str:
    """Return the page title, falling back to the first ``<h1>``."""
    cfg = config or MarkdownEngineConfig()
    for tag_name in ("title", "h1"):
        tag = soup.find(tag_name)
        if tag is not None:
            text = tag.get_text().strip()
            if text:
                return text
    return cfg.untitled_placeholder.strip()
