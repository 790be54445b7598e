"""
Shared pytest fixtures for number-finder tests.

This module provides reusable test data and temporary resources used
across both unit and integration tests:

    - sample_numbers: The ascending sequence used throughout the docs
    - engine: A SearchEngine over sample_numbers
    - number_file: sample_numbers written to a temporary file
"""

import pytest

from number_finder.search import SearchEngine
from tests.helpers import write_number_file


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_numbers() -> list[int]:
    """
    Eight odd numbers, so every even target between them is a miss with
    two equidistant neighbours.
    """
    return [1, 3, 5, 7, 9, 11, 13, 15]


@pytest.fixture
def engine(sample_numbers: list[int]) -> SearchEngine:
    """An engine over ``sample_numbers`` built without touching disk."""
    return SearchEngine(sample_numbers)


# ---------------------------------------------------------------------------
# Temporary files
# ---------------------------------------------------------------------------


@pytest.fixture
def number_file(tmp_path, sample_numbers: list[int]) -> str:
    """
    ``sample_numbers`` written one per line to pytest's tmp directory.

    Each test receives its own directory, so files never collide.
    """
    content = "\n".join(str(n) for n in sample_numbers)
    return write_number_file(tmp_path, content)
