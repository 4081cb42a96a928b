"""Article command — extract a web page's main content as markdown."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.rule import Rule

from rss_reader.core.articles import fetch_article
from rss_reader.core.errors import RssReaderError

console = Console()


def register(app: typer.Typer) -> None:
    """Register the article command onto the Typer app."""

    @app.command()
    def article(
        url: str = typer.Argument(help="URL of the article page"),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
        raw: bool = typer.Option(
            False, "--raw", help="Print the markdown source instead of rendering it"
        ),
    ) -> None:
        """Fetch a page and print its article content as markdown."""
        if not url.startswith("http"):
            url = f"https://{url}"

        try:
            with console.status(f"Fetching {url}..."):
                result = asyncio.run(fetch_article(url))
        except RssReaderError as e:
            console.print(f"[red]Error:[/red] Failed to fetch article content: {escape(str(e))}")
            raise SystemExit(1)

        if json_output:
            console.print_json(result.model_dump_json(by_alias=True))
            return

        console.print(Rule(f"[bold]{result.title}[/bold]"))
        if raw:
            console.print(result.content, markup=False, highlight=False)
        else:
            console.print(Markdown(result.content))
        console.print(f"\n[dim]{result.url}[/dim]")
