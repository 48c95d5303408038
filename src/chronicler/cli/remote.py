"""Commands that talk to a running Chronicler API."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from chronicler.cli._render import print_error, render_result
from chronicler.client import ChroniclerClient
from chronicler.config import get_settings
from chronicler.core.errors import ChroniclerError

remote_app = typer.Typer(help="Use a running Chronicler API server.")
console = Console()


def _get_client(url: str | None) -> ChroniclerClient:
    settings = get_settings()
    if url:
        settings = settings.model_copy(update={"api_url": url})
    return ChroniclerClient.from_settings(settings)


@remote_app.command("calculate")
def calculate(
    path: Annotated[Path, typer.Argument(help="Text file to upload.")],
    url: Annotated[str | None, typer.Option(help="API base URL (defaults to CHRONICLER_API_URL).")] = None,
    limit: Annotated[int | None, typer.Option(help="Show at most this many pairs.")] = None,
) -> None:
    """Upload a file, then calculate the distance on the server."""
    client = _get_client(url)
    try:
        with client:
            upload = client.upload_file(path)
            result = client.calculate_distance(upload["list1"], upload["list2"])
    except ChroniclerError as exc:
        print_error(console, exc)
        raise typer.Exit(1) from exc
    render_result(console, result, limit=limit)


@remote_app.command("health")
def health(
    url: Annotated[str | None, typer.Option(help="API base URL (defaults to CHRONICLER_API_URL).")] = None,
) -> None:
    """Show the server health report."""
    client = _get_client(url)
    try:
        with client:
            data = client.health()
    except ChroniclerError as exc:
        print_error(console, exc)
        raise typer.Exit(1) from exc
    console.print(f"Server: [green]{data.get('status', 'unknown')}[/green] (version {data.get('version', '?')})")
    for service, state in data.get("services", {}).items():
        console.print(f"  {service}: {state}")
