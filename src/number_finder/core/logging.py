"""
Package logger for number-finder.

Everything logs under ``number_finder.*``. ``LOG_LEVEL`` (debug, info,
error) picks the level until a launcher passes one explicitly. A TTY gets
Rich output; pipes and containers get one plain line per record.
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "number_finder"

# Plain handler layout for piped output
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def level_from_name(level_name: str) -> int:
    """
    Translate a level name into a logging constant.

    Unknown names fall back to INFO; validation of user-supplied names
    happens in the settings layer.
    """
    return getattr(logging, level_name.upper(), logging.INFO)


def _get_log_level() -> int:
    """Level named by ``LOG_LEVEL``, INFO when unset."""
    return level_from_name(os.environ.get("LOG_LEVEL", "info"))


def _build_handler(use_rich: bool) -> logging.Handler:
    if use_rich and sys.stdout.isatty():
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    plain = logging.StreamHandler(sys.stderr)
    plain.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    return plain


def configure_logging(
    level: Optional[int] = None,
    use_rich: bool = True,
    force: bool = False,
) -> None:
    """
    Attach a single handler to the ``number_finder`` logger.

    The first call wins. The CLI verbose flag and the API launcher pass
    ``force=True`` so an explicit level replaces the default set up on
    import. ``use_rich=False`` keeps plain output even on a TTY.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_level = level if level is not None else _get_log_level()

    handler = _build_handler(use_rich)
    handler.setLevel(log_level)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger; bare module names are prefixed."""
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def suppress_third_party_loggers() -> None:
    """
    Raise third-party loggers to WARNING.

    uvicorn's access log duplicates the request middleware's log line,
    and httpx/httpcore are chatty under the test client.
    """
    noisy_loggers = [
        "uvicorn.access",
        "httpx",
        "httpcore",
        "asyncio",
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
