"""
Dataset loader for number-finder.

Reads a flat, whitespace-delimited text file of base-10 integers into an
immutable tuple. The file is trusted to be in ascending order; no sorting
or ordering check is performed.

Any failure aborts the whole load, so callers either get the complete
sequence or a ``LoadError``.

Usage:
    from number_finder.search.loader import load_numbers

    numbers = load_numbers("data/input.txt")
"""

import re
from pathlib import Path
from typing import Iterable, Union

from number_finder.core import (
    MalformedNumberError,
    ReadFailureError,
    SourceUnavailableError,
    get_logger,
)

logger = get_logger(__name__)

# Optional sign followed by ASCII digits. int() alone would also accept
# underscores and non-ASCII digits.
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_integer(token: str) -> int:
    """
    Parse a single base-10 integer token.

    Raises:
        ValueError: If the token is not an optionally signed run of ASCII digits.
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise ValueError(f"invalid integer literal: {token!r}")
    return int(token)


def parse_numbers(lines: Iterable[str], source: str = "<text>") -> tuple[int, ...]:
    """
    Tokenise lines of text into integers, preserving source order.

    Args:
        lines: Any iterable of text lines (an open file, ``str.splitlines()``).
        source: Name used in error messages.

    Returns:
        Tuple of parsed integers.

    Raises:
        MalformedNumberError: If any token is not a base-10 integer.
    """
    numbers: list[int] = []
    for line_number, line in enumerate(lines, 1):
        for token in line.split():
            try:
                numbers.append(parse_integer(token))
            except ValueError:
                raise MalformedNumberError(
                    token, source, line_number=line_number
                ) from None
    return tuple(numbers)


def load_numbers(path: Union[str, Path]) -> tuple[int, ...]:
    """
    Load every integer from a text file.

    Args:
        path: Path to a UTF-8 text file of whitespace-separated integers.

    Returns:
        Tuple of integers in file order.

    Raises:
        SourceUnavailableError: If the file cannot be opened.
        MalformedNumberError: If a token is not a base-10 integer.
        ReadFailureError: If reading or decoding fails part way through.
    """
    source = str(path)

    try:
        handle = open(source, encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(
            "Failed to open number source",
            source,
            details=e.strerror or str(e),
        ) from e

    with handle:
        try:
            numbers = parse_numbers(handle, source)
        except UnicodeDecodeError as e:
            raise ReadFailureError(
                "Number source is not valid UTF-8 text",
                source,
                details=str(e),
            ) from e
        except OSError as e:
            raise ReadFailureError(
                "Error reading number source",
                source,
                details=e.strerror or str(e),
            ) from e

    logger.info("Loaded %d numbers from %s", len(numbers), source)
    return numbers
