"""number-finder: exact and approximate lookups over a sorted integer list.

This package loads a fixed, ascending list of integers once and answers
"is this value here, or close enough, and at which index?".

Usage:
    from number_finder import __version__
    from number_finder.config import get_settings
    from number_finder.search import SearchEngine, build_engine
    from number_finder.api.app import create_app
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("number-finder")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export lightweight core types for convenience.
# The API and CLI layers are NOT imported here so that using the engine
# does not pull in FastAPI or Typer.
from number_finder.core import (
    LoadError,
    LookupMiss,
    LookupQuery,
    LookupResult,
    MissKind,
    NumberFinderError,
)

__all__ = [
    "__version__",
    # Core types
    "LookupQuery",
    "LookupResult",
    "LookupMiss",
    "MissKind",
    # Exceptions
    "NumberFinderError",
    "LoadError",
]
