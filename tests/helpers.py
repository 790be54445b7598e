"""
Shared test helper utilities for number-finder tests.

Plain functions (not pytest fixtures) that can be imported directly
by test modules. Kept separate from conftest.py because conftest.py
is for fixtures only; plain helpers must be in a regular module to
be importable via standard Python imports.
"""

from pathlib import Path
from typing import Union
from unittest.mock import MagicMock

from number_finder.core import LookupMiss, LookupOutcome, LookupResult, MissKind


def write_number_file(
    directory: Path,
    content: Union[str, bytes],
    name: str = "numbers.txt",
) -> str:
    """Write ``content`` to ``directory/name`` and return the path as a string."""
    path = directory / name
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return str(path)


def make_result(
    *,
    index: int = 3,
    value: int = 7,
    is_approximate: bool = False,
) -> LookupResult:
    """Factory for LookupResult instances with sensible defaults."""
    return LookupResult(index=index, value=value, is_approximate=is_approximate)


def make_miss(
    *,
    kind: MissKind = MissKind.NOT_FOUND,
    target: int = 8,
    threshold_percentage: float = 0.0,
) -> LookupMiss:
    """Factory for LookupMiss instances with sensible defaults."""
    return LookupMiss(kind=kind, target=target, threshold_percentage=threshold_percentage)


def make_stub_finder(outcome: LookupOutcome) -> MagicMock:
    """
    A stand-in for SearchEngine whose ``find`` always returns ``outcome``.

    The mock records calls, so tests can assert on the parsed arguments
    the HTTP layer passed through.
    """
    finder = MagicMock()
    finder.find.return_value = outcome
    return finder
