"""
Custom exception hierarchy for number-finder.

All exceptions inherit from NumberFinderError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Only failures that abort something are raised. A lookup that finds nothing
is a routine outcome and is returned as a ``LookupMiss`` value instead
(see ``number_finder.core.types``).

Exception hierarchy:
    NumberFinderError (base)
    ├── ConfigurationError: Invalid or missing configuration
    └── LoadError: Dataset could not be loaded
        ├── SourceUnavailableError: Source cannot be opened
        ├── MalformedNumberError: A token is not a base-10 integer
        └── ReadFailureError: I/O or decoding error mid-stream
"""

from enum import Enum
from typing import Optional


class NumberFinderError(Exception):
    """
    Base exception for all number-finder errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(NumberFinderError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - LOG_LEVEL set to something other than debug, info or error
        - PORT not an integer
    """

    pass


class LoadErrorKind(Enum):
    """Tag identifying which stage of a dataset load failed."""

    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_NUMBER = "malformed_number"
    READ_FAILURE = "read_failure"


class LoadError(NumberFinderError):
    """
    Raised when the number dataset cannot be loaded.

    Every subclass carries a ``kind`` tag and the ``source`` it was
    loading, so startup code can report the failure without inspecting
    the concrete class.
    """

    kind: LoadErrorKind

    def __init__(
        self,
        message: str,
        source: str,
        details: Optional[str] = None,
    ) -> None:
        self.source = source
        super().__init__(message, details)


class SourceUnavailableError(LoadError):
    """
    Raised when the source file cannot be opened.

    Examples:
        - File does not exist
        - Permission denied
        - Path is a directory
    """

    kind = LoadErrorKind.SOURCE_UNAVAILABLE


class MalformedNumberError(LoadError):
    """
    Raised when a token in the source does not parse as an integer.

    The offending token is kept on ``token`` so the caller can report
    exactly what was rejected.
    """

    kind = LoadErrorKind.MALFORMED_NUMBER

    def __init__(
        self,
        token: str,
        source: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.token = token
        self.line_number = line_number
        details = f"line {line_number}" if line_number is not None else None
        super().__init__(f"Invalid number in source: {token!r}", source, details)


class ReadFailureError(LoadError):
    """
    Raised when reading fails after the source was opened.

    Examples:
        - Disk or network filesystem I/O error
        - Bytes that are not valid UTF-8
    """

    kind = LoadErrorKind.READ_FAILURE
