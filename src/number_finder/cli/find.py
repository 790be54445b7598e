"""Lookup and dataset inspection commands."""

import math
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from number_finder.config import get_settings
from number_finder.core import ConfigurationError, LoadError, LookupMiss, MissKind
from number_finder.search import SearchEngine, build_engine

console = Console()

_MISS_HINTS = {
    MissKind.NOT_FOUND: "Hint: Pass --threshold to accept a nearby value.",
    MissKind.OUT_OF_THRESHOLD: "Hint: Increase --threshold to widen the match.",
}

DataOption = Annotated[
    Optional[str],
    typer.Option(
        "--data",
        "-d",
        help="Path to the number file (default: DATA_PATH setting).",
    ),
]


def _load_engine(data: Optional[str]) -> SearchEngine:
    """Build the engine, turning load failures into a clean exit."""
    try:
        path = data or get_settings().data.path
        return build_engine(path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{e.details}[/dim]")
        raise typer.Exit(code=1) from None
    except LoadError as e:
        console.print(f"[red]Failed to load numbers:[/red] {e.message}")
        console.print(f"  [dim]Source: {e.source}[/dim]")
        if e.details:
            console.print(f"  [dim]{e.details}[/dim]")
        raise typer.Exit(code=1) from None


def _finite_threshold(value: float) -> float:
    if not math.isfinite(value):
        raise typer.BadParameter(f"Expected a finite number, got {value}.")
    return value


def find(
    target: Annotated[int, typer.Argument(help="Integer to look up.")],
    threshold: Annotated[
        float,
        typer.Option(
            "--threshold",
            "-t",
            min=0.0,
            callback=_finite_threshold,
            help="Relative tolerance as a fraction of |TARGET| (0.1 = 10%).",
        ),
    ] = 0.0,
    data: DataOption = None,
) -> None:
    """
    Find TARGET in the dataset, exactly or within a threshold.

    Examples:

        number-finder find 7

        number-finder find 8 -t 0.2

        number-finder find 8 -t 0.2 -d numbers.txt
    """
    engine = _load_engine(data)
    outcome = engine.find(target, threshold)

    if isinstance(outcome, LookupMiss):
        console.print(f"[yellow]{outcome.message.capitalize()}:[/yellow] {target}")
        console.print(f"[dim italic]{_MISS_HINTS[outcome.kind]}[/dim italic]")
        raise typer.Exit(code=1)

    table = Table(show_header=True, border_style="dim")
    table.add_column("Index", style="bold", justify="right")
    table.add_column("Value", style="cyan", justify="right")
    table.add_column("Match")

    match = (
        Text("approximate", style="yellow")
        if outcome.is_approximate
        else Text("exact", style="bold green")
    )
    table.add_row(str(outcome.index), str(outcome.value), match)

    console.print(table)


def info(data: DataOption = None) -> None:
    """Show how many numbers are loaded and their range."""
    engine = _load_engine(data)
    numbers = engine.numbers

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Count", Text(str(len(numbers)), style="green" if numbers else "dim"))
    if numbers:
        table.add_row("First", Text(str(numbers[0]), style="cyan"))
        table.add_row("Last", Text(str(numbers[-1]), style="cyan"))

    console.print(table)
