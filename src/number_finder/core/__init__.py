"""Core module: types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (LookupQuery, LookupResult, LookupMiss, MissKind)
    - Exception hierarchy (NumberFinderError and subclasses)
    - Logging utilities (get_logger, configure_logging)

Usage:
    from number_finder.core import (
        LookupResult,
        LookupMiss,
        LoadError,
        get_logger,
    )
"""

from number_finder.core.exceptions import (
    ConfigurationError,
    LoadError,
    LoadErrorKind,
    MalformedNumberError,
    NumberFinderError,
    ReadFailureError,
    SourceUnavailableError,
)
from number_finder.core.logging import (
    configure_logging,
    get_logger,
    level_from_name,
    suppress_third_party_loggers,
)
from number_finder.core.types import (
    LookupMiss,
    LookupOutcome,
    LookupQuery,
    LookupResult,
    MissKind,
)

__all__ = [
    # Types
    "LookupQuery",
    "LookupResult",
    "LookupMiss",
    "LookupOutcome",
    "MissKind",
    # Exceptions
    "NumberFinderError",
    "ConfigurationError",
    "LoadError",
    "LoadErrorKind",
    "SourceUnavailableError",
    "MalformedNumberError",
    "ReadFailureError",
    # Logging
    "get_logger",
    "configure_logging",
    "level_from_name",
    "suppress_third_party_loggers",
]
