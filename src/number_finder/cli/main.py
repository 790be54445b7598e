"""Typer application root for the number-finder CLI."""

import logging
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from number_finder.cli.find import find, info
from number_finder.core.logging import configure_logging, suppress_third_party_loggers

# Shared console instance for consistent output across all CLI modules.
console = Console()

app = typer.Typer(
    name="number-finder",
    help="Exact and approximate lookups over a sorted list of integers.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            installed = version("number-finder")
        except PackageNotFoundError:
            installed = "0.0.0"
        console.print(f"number-finder {installed}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        configure_logging(level=logging.DEBUG, force=True)
        suppress_third_party_loggers()


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Exact and approximate lookups over a sorted list of integers."""


app.command(name="find")(find)
app.command(name="info")(info)
