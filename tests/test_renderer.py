"""Tests for markdown conversion and normalization."""

from __future__ import annotations

from bs4 import BeautifulSoup

from rss_reader.core.markdown_engine.config import MarkdownEngineConfig
from rss_reader.core.markdown_engine.renderer import (
    html_to_markdown,
    normalize_markdown,
    render_markdown,
)


class TestNormalizeMarkdown:
    """Post-processing applied to converter output."""

    def test_collapses_five_newlines_to_two(self) -> None:
        assert normalize_markdown("one\n\n\n\n\ntwo") == "one\n\ntwo"

    def test_keeps_single_blank_line(self) -> None:
        assert normalize_markdown("one\n\ntwo") == "one\n\ntwo"

    def test_keeps_single_newline(self) -> None:
        assert normalize_markdown("one\ntwo") == "one\ntwo"

    def test_trims_surrounding_whitespace(self) -> None:
        assert normalize_markdown("\n\n  text \n\n\n") == "text"

    def test_removes_linked_image(self) -> None:
        md = "Intro [![build](https://ci.example/badge.svg)](https://ci.example) done"
        assert normalize_markdown(md) == "Intro  done"

    def test_removes_multiple_linked_images(self) -> None:
        md = (
            "[![a](https://x/a.png)](https://x)"
            "[![b](https://x/b.png)](https://y)\n\nText"
        )
        assert normalize_markdown(md) == "Text"

    def test_keeps_plain_images_and_links(self) -> None:
        md = "![photo](https://x/p.jpg) and [a link](https://x)"
        assert normalize_markdown(md) == md

    def test_empty_input(self) -> None:
        assert normalize_markdown("") == ""


class TestHtmlToMarkdown:
    """Converter options: ATX headings, dash bullets, fenced code."""

    def test_atx_headings(self) -> None:
        md = html_to_markdown("<h1>One</h1><h3>Three</h3><h6>Six</h6>")
        assert "# One" in md
        assert "### Three" in md
        assert "###### Six" in md
        assert "===" not in md

    def test_dash_bullets(self) -> None:
        md = html_to_markdown("<ul><li>alpha</li><li>beta</li></ul>")
        assert "- alpha" in md
        assert "- beta" in md
        assert "* alpha" not in md

    def test_nested_lists_use_dash(self) -> None:
        md = html_to_markdown("<ul><li>outer<ul><li>inner</li></ul></li></ul>")
        assert "- outer" in md
        assert "- inner" in md
        assert "+" not in md

    def test_fenced_code_blocks(self) -> None:
        md = html_to_markdown("<pre><code>x = 1</code></pre>")
        assert "```\nx = 1\n```" in md

    def test_inline_emphasis_and_links(self) -> None:
        md = html_to_markdown('<p><b>bold</b> <em>it</em> <a href="https://x">x</a></p>')
        assert "**bold**" in md
        assert "*it*" in md
        assert "[x](https://x)" in md

    def test_custom_bullet_marker(self) -> None:
        config = MarkdownEngineConfig(bullets="*")
        md = html_to_markdown("<ul><li>alpha</li></ul>", config)
        assert "* alpha" in md


class TestRenderMarkdown:
    """Rendering uses the element's inner markup only."""

    def test_renders_children_not_wrapper(self) -> None:
        soup = BeautifulSoup(
            "<blockquote><p>Quoted</p></blockquote>", "html.parser"
        )
        md = render_markdown(soup.blockquote)
        assert md == "Quoted"

    def test_output_is_normalized(self) -> None:
        soup = BeautifulSoup(
            "<div><p>One</p><p></p><div></div><p></p><p>Two</p></div>", "html.parser"
        )
        md = render_markdown(soup.div)
        assert md.startswith("One")
        assert md.endswith("Two")
        assert "\n\n\n" not in md

    def test_drops_badge_links(self) -> None:
        soup = BeautifulSoup(
            '<div><p>Intro</p><p><a href="https://ci"><img src="https://ci/b.svg" '
            'alt="ci"></a></p><p>Body</p></div>',
            "html.parser",
        )
        md = render_markdown(soup.div)
        assert "b.svg" not in md
        assert md.startswith("Intro")
        assert md.endswith("Body")

    def test_lone_badge_between_blocks_leaves_blank_run(self) -> None:
        """Blank lines are collapsed before badge removal, so a badge that
        was its own block leaves the surrounding blank lines behind."""
        assert normalize_markdown("A\n\n[![ci](https://ci/b.svg)](https://ci)\n\nB") == "A\n\n\n\nB"
