"""Tests for the serve commands, with the server runners patched out."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from chronicler.cli.app import app

runner = CliRunner()


def test_serve_api_uses_runner() -> None:
    with patch("chronicler.cli.serve._run_api") as run_api:
        result = runner.invoke(app, ["serve", "api", "--port", "9000"])
    assert result.exit_code == 0
    _, host, port = run_api.call_args.args
    assert (host, port) == ("127.0.0.1", 9000)


def test_serve_dashboard_uses_runner() -> None:
    with patch("chronicler.cli.serve._run_dashboard") as run_dashboard:
        result = runner.invoke(app, ["serve", "dashboard"])
    assert result.exit_code == 0
    assert run_dashboard.call_args.args[1:] == ("127.0.0.1", 8001)


def test_serve_mcp_uses_runner() -> None:
    with patch("chronicler.cli.serve._run_mcp") as run_mcp:
        result = runner.invoke(app, ["serve", "mcp"])
    assert result.exit_code == 0
    assert run_mcp.call_args.args[1] == "stdio"


def test_serve_all_starts_each_server_on_consecutive_ports() -> None:
    with (
        patch("chronicler.cli.serve._run_api") as run_api,
        patch("chronicler.cli.serve._run_dashboard") as run_dashboard,
        patch("chronicler.cli.serve._run_mcp") as run_mcp,
    ):
        result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "7000"])
    assert result.exit_code == 0
    assert run_api.call_args.args[1:] == ("127.0.0.1", 7000)
    assert run_dashboard.call_args.args[1:] == ("127.0.0.1", 7001)
    assert run_mcp.call_args.args[1:] == ("sse", "127.0.0.1", 7002)
    assert "http://127.0.0.1:7001" in result.output
