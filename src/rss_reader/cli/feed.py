"""Feed command — list the latest entries of an RSS/Atom feed."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rss_reader.core.errors import RssReaderError
from rss_reader.core.feeds import DEFAULT_LIMIT, MAX_LIMIT, fetch_feed
from rss_reader.core.models import FeedInfo

console = Console()


def _render_table(info: FeedInfo) -> Table:
    table = Table(title=info.title, caption=info.link, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Published")
    table.add_column("Link", style="cyan", overflow="fold")
    for index, entry in enumerate(info.entries, start=1):
        table.add_row(str(index), entry.title, entry.pub_date or "-", entry.link)
    return table


def register(app: typer.Typer) -> None:
    """Register the feed command onto the Typer app."""

    @app.command()
    def feed(
        url: str = typer.Argument(help="URL of the RSS or Atom feed"),
        limit: int = typer.Option(
            DEFAULT_LIMIT, "--limit", "-n", min=1, max=MAX_LIMIT,
            help="Maximum number of entries to show",
        ),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Fetch a feed and list its most recent entries."""
        try:
            info = asyncio.run(fetch_feed(url, limit=limit))
        except RssReaderError as e:
            console.print(f"[red]Error:[/red] Failed to fetch RSS feed: {escape(str(e))}")
            raise SystemExit(1)

        if json_output:
            console.print_json(info.model_dump_json(by_alias=True))
            return

        console.print(_render_table(info))
