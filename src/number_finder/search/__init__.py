"""Search module: lookups over the loaded integer sequence.

This module provides:
    - SearchEngine: Exact binary search with bounded-neighbour fallback
    - NumberLookup: The single-method protocol the outer layers depend on
    - build_engine: Load a dataset file and construct an engine
    - load_numbers / parse_numbers / parse_integer: The dataset loader

Usage:
    from number_finder.search import build_engine

    engine = build_engine("data/input.txt")
    outcome = engine.find(8, 0.2)
"""

from number_finder.search.engine import NumberLookup, SearchEngine, build_engine
from number_finder.search.loader import load_numbers, parse_integer, parse_numbers

__all__ = [
    "NumberLookup",
    "SearchEngine",
    "build_engine",
    "load_numbers",
    "parse_integer",
    "parse_numbers",
]
