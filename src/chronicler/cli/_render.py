"""Rich renderings shared by the local and remote commands."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from chronicler.core.errors import ChroniclerError
from chronicler.i18n import render, t
from chronicler.models import CalculationResult


def render_result(
    console: Console,
    result: CalculationResult,
    limit: int | None = None,
    language: str = "english",
    tengwar: bool = False,
) -> None:
    def label(key: str) -> str:
        return render(t(key, language), language, tengwar)

    table = Table(title=label("results.title"), show_lines=False)
    table.add_column(label("results.columns.position"), justify="right")
    table.add_column(label("results.columns.list1Value"), justify="right")
    table.add_column(label("results.columns.list2Value"), justify="right")
    table.add_column(label("results.columns.distance"), justify="right")

    pairs = result.pairs if limit is None else result.pairs[:limit]
    for pair in pairs:
        table.add_row(str(pair.position + 1), str(pair.value1), str(pair.value2), str(pair.distance))
    console.print(table)
    if len(pairs) < result.pair_count:
        console.print(f"({result.pair_count - len(pairs)} more pairs not shown)")

    console.print(f"[bold]{label('results.totalDistance')}:[/bold] {result.total_distance}")
    console.print(f"({result.pair_count} pairs, {result.metadata.processing_time_ms:.3f} ms)")


def print_error(console: Console, exc: ChroniclerError) -> None:
    console.print(f"[red]{exc.user_message}[/red]")
    if exc.message != exc.user_message:
        console.print(f"[dim]{exc.message}[/dim]")
