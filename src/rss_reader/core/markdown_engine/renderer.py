"""Markdown renderer: converts a pruned element to normalized markdown."""

from __future__ import annotations

import re

from bs4 import Tag
from markdownify import markdownify

from rss_reader.core.markdown_engine.config import MarkdownEngineConfig

_BLANK_LINE_RUN = re.compile(r"\n{3,}")
# Badges and tracking pixels: [![alt](img)](href)
_NESTED_IMAGE_LINK = re.compile(r"\[!\[.*?\]\(.*?\)\]\(.*?\)")


def normalize_markdown(markdown: str) -> str:
    """Collapse blank-line runs and drop linked-image clutter."""
    text = _BLANK_LINE_RUN.sub("\n\n", markdown)
    text = text.strip()
    text = _NESTED_IMAGE_LINK.sub("", text)
    return text.strip()


def html_to_markdown(
    html: str, config: MarkdownEngineConfig | None = None
) -> str:
    """Convert an HTML fragment to markdown with fenced code and ATX headings."""
    cfg = config or MarkdownEngineConfig()
    # markdownify always fences <pre> blocks; code_language only tags the fence
    return markdownify(
        html,
        heading_style=cfg.heading_style,
        bullets=cfg.bullets,
        code_language="",
    )


def render_markdown(
    element: Tag, config: MarkdownEngineConfig | None = None
) -> str:
    """Render the inner markup of *element* as normalized markdown."""
    return normalize_markdown(html_to_markdown(element.decode_contents(), config))
