"""Typer entry point for the ``rss-reader`` command."""

from __future__ import annotations

import typer

from rss_reader.cli import article, feed, serve

app = typer.Typer(
    name="rss-reader",
    help="Read RSS feeds and extract articles as markdown, or serve both over MCP.",
    no_args_is_help=True,
)

feed.register(app)
article.register(app)
serve.register(app)


if __name__ == "__main__":
    app()
