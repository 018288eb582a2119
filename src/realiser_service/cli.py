"""
Command-line interface for the realiser.

Usage:
    realiser realise <file>             # Realize a JSON request file locally
    realiser serve                      # Run the length-prefixed wire server
    realiser send <file>                # Send a JSON request file to a server
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from realiser_core.contracts import RequestProcessor, parse_request
from realiser_core.errors import RealisationError
from realiser_core.framework import Feature
from realiser_core.realiser import Realiser
from realiser_service.settings import get_service_settings

app = typer.Typer(
    name="realiser",
    help="Surface realization of annotated element trees",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _read_request_file(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


@app.command()
def realise(
    file: Path = typer.Argument(..., help="JSON request file"),
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="Renderer: text, html or none (overrides the request)"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Show tree dumps after each stage"),
):
    """
    Realize a request file in-process and print the result.
    """
    try:
        request = parse_request(_read_request_file(file))
        if fmt is not None:
            request = request.model_copy(update={"formatter": fmt})
        processor = RequestProcessor(realiser=Realiser(debug=debug))

        if debug and request.op == "realise":
            result = processor.realiser_for(request.formatter).realise(request.to_element())
            if result is not None:
                console.print(Panel(result.get_feature(Feature.DEBUG, ""), title="Stage dumps"))
            text = result.realisation.strip() if result is not None else ""
        else:
            text = processor.process(request)
    except RealisationError as e:
        console.print(e.to_log_message(), style="red", markup=False)
        raise typer.Exit(1)

    console.print(text, markup=False, highlight=False)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
):
    """
    Run the length-prefixed wire server until interrupted.
    """
    from realiser_service.wire import run_server

    settings = get_service_settings()
    updates = {key: value for key, value in (("host", host), ("port", port)) if value is not None}
    if updates:
        settings = settings.model_copy(update=updates)

    console.print(
        f"\n[bold cyan]Realiser server[/bold cyan] on {settings.host}:{settings.port} "
        f"[dim]({settings.max_workers} workers)[/dim]\n"
    )
    run_server(settings)


@app.command()
def send(
    file: Path = typer.Argument(..., help="JSON request file"),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Server address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Server port"),
):
    """
    Send a request file to a running server and print the reply.
    """
    from realiser_service.client import send_request

    settings = get_service_settings()
    payload = _read_request_file(file)
    try:
        reply = send_request(host or settings.host, port or settings.port, payload)
    except (OSError, RealisationError) as e:
        console.print(f"[red]Request failed: {e}[/red]")
        raise typer.Exit(1)

    if reply.startswith("Exception: "):
        console.print(reply, style="red", markup=False)
        raise typer.Exit(1)
    console.print(reply, markup=False, highlight=False)


if __name__ == "__main__":
    app()
