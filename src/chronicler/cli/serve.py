import threading
from collections.abc import Callable

import typer
from rich.console import Console

from chronicler.config import Settings, get_settings
from chronicler.logging_utils import configure_logging

serve_app = typer.Typer(help="Start servers.")
console = Console()


def _load_settings() -> Settings:
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


def _run_api(settings: Settings, host: str, port: int) -> None:
    import uvicorn

    from chronicler.api.app import create_app

    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


def _run_dashboard(settings: Settings, host: str, port: int) -> None:
    from chronicler.dashboard.app import create_dashboard

    create_dashboard(settings).run(host=host, port=port)


def _run_mcp(settings: Settings, transport: str, host: str | None = None, port: int | None = None) -> None:
    from chronicler.mcp.server import create_mcp_server

    server = create_mcp_server(settings)
    if host is None or port is None:
        server.run(transport=transport)  # type: ignore[arg-type]
    else:
        server.run(transport=transport, host=host, port=port)  # type: ignore[arg-type]


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    settings = _load_settings()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    _run_api(settings, host, port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    _run_mcp(get_settings(), transport)


@serve_app.command("dashboard")
def dashboard(
    host: str = "127.0.0.1",
    port: int = 8001,
) -> None:
    """Start the Dash web dashboard."""
    settings = _load_settings()
    console.print(f"[green]Starting dashboard on {host}:{port}[/green]")
    _run_dashboard(settings, host, port)


@serve_app.callback(invoke_without_command=True)
def serve_all(
    ctx: typer.Context,
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Start all servers (API + dashboard + MCP) on consecutive ports."""
    if ctx.invoked_subcommand is not None:
        return

    settings = _load_settings()
    servers: list[tuple[str, str, Callable[[], None]]] = [
        ("API", f"http://{host}:{port}", lambda: _run_api(settings, host, port)),
        ("Dashboard", f"http://{host}:{port + 1}", lambda: _run_dashboard(settings, host, port + 1)),
        ("MCP (SSE)", f"http://{host}:{port + 2}", lambda: _run_mcp(settings, "sse", host, port + 2)),
    ]

    console.print(f"[green]Starting all servers on {host}[/green]")
    threads = []
    for label, url, target in servers:
        console.print(f"  {label + ':':<11}{url}")
        threads.append(threading.Thread(target=target, name=label, daemon=True))

    for t in threads:
        t.start()
    for t in threads:
        t.join()
