"""CLI command for the MCP tool server."""

from __future__ import annotations

import logging
import os

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rss_reader.core.config import Transport, load_server_config
from rss_reader.server import run_server

# stdio transport owns stdout; everything human-facing goes to stderr
console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def register(app: typer.Typer) -> None:
    """Register the ``serve`` command on the given Typer app."""

    @app.command()
    def serve(
        transport: Transport = typer.Option(
            None, "--transport", "-t", help="MCP transport (default: $TRANSPORT or stdio)",
        ),
        host: str = typer.Option(
            None, "--host", "-H", help="Host/interface to bind for http",
        ),
        port: int = typer.Option(
            None, "--port", "-p", help="Port to listen on for http",
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Log debug output to stderr",
        ),
    ) -> None:
        """Start the RSS reader MCP server."""
        _configure_logging(verbose)
        try:
            cfg = load_server_config(os.environ)
        except ValidationError as e:
            console.print(f"[red]Error:[/red] Invalid server configuration: {escape(str(e))}")
            raise SystemExit(1)
        overrides = {
            key: value
            for key, value in (("transport", transport), ("host", host), ("port", port))
            if value is not None
        }
        if overrides:
            cfg = cfg.model_copy(update=overrides)

        where = f"[cyan]{cfg.transport.value}[/cyan]"
        if cfg.transport is Transport.http:
            where += f" at [cyan]{cfg.host}:{cfg.port}[/cyan]"
        console.print(f"[bold green]RSS Reader MCP[/bold green] on {where}")
        run_server(cfg)
