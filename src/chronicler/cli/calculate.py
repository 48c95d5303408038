from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from chronicler.cli._render import print_error, render_result
from chronicler.config import get_settings
from chronicler.core.engine import calculate as _calculate
from chronicler.core.errors import ChroniclerError
from chronicler.core.export import render_export
from chronicler.core.parser import parse_lists, validate_format
from chronicler.core.upload import decode_upload, validate_upload
from chronicler.i18n import normalize_language

console = Console()


class OutputFormat(str, Enum):
    table = "table"
    csv = "csv"
    json = "json"


def _read_input(path: Path) -> str:
    if not path.is_file():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    options = get_settings().upload_options()
    data = path.read_bytes()
    validate_upload(path.name, None, len(data), options)
    return decode_upload(data)


def calculate(
    path: Annotated[Path, typer.Argument(help="Text file with two whitespace-separated integer columns.")],
    format: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format.")] = OutputFormat.table,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write csv/json output to a file.")] = None,
    limit: Annotated[int | None, typer.Option(help="Show at most this many pairs in the table.")] = None,
    language: Annotated[str, typer.Option(help="Label language (english or sindarin).")] = "english",
    tengwar: Annotated[bool, typer.Option(help="Render Sindarin labels in Tengwar.")] = False,
) -> None:
    """Parse a file and compute the total distance between its sorted columns."""
    try:
        lang = normalize_language(language)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc

    try:
        result = _calculate(parse_lists(_read_input(path)))
    except ChroniclerError as exc:
        print_error(console, exc)
        raise typer.Exit(1) from exc

    if format is OutputFormat.table:
        render_result(console, result, limit=limit, language=lang, tengwar=tengwar)
        return

    rendered = render_export(result, format.value)
    if output is not None:
        output.write_text(rendered, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {format.value.upper()} export to {output}")
    else:
        typer.echo(rendered, nl=not rendered.endswith("\n"))


def validate(
    path: Annotated[Path, typer.Argument(help="Text file to check.")],
) -> None:
    """Check every line of a file and report all format errors and warnings."""
    try:
        content = _read_input(path)
    except ChroniclerError as exc:
        print_error(console, exc)
        raise typer.Exit(1) from exc

    report = validate_format(content)
    for warning in report.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")
    for error in report.errors:
        console.print(f"[red]error:[/red] {error}")

    if not report.valid:
        console.print(f"[red]Invalid[/red] ({len(report.errors)} error(s))")
        raise typer.Exit(1)
    console.print(f"[green]Valid[/green] ({report.line_count} rows)")
