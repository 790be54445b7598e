"""
Launch helper for the FastAPI backend.

Provides the ``main()`` entry point used by the ``number-finder-api``
console script defined in ``pyproject.toml``.

Usage::

    number-finder-api                          # default: 0.0.0.0:8080
    number-finder-api --port 9000              # custom port
    number-finder-api --log-level debug        # verbose request logging
    number-finder-api --reload                 # auto-reload for development
    uvicorn number_finder.api.app:create_app --factory  # direct alternative
"""

import argparse
import sys

import uvicorn

from number_finder.config import SUPPORTED_LOG_LEVELS, get_settings
from number_finder.core import (
    ConfigurationError,
    configure_logging,
    get_logger,
    level_from_name,
    suppress_third_party_loggers,
)


def main() -> None:
    """Launch the FastAPI app via uvicorn."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        sys.exit(1)

    parser = argparse.ArgumentParser(description="Number Finder API server")
    parser.add_argument(
        "--host",
        default=settings.api.host,
        help=f"Bind host (default: {settings.api.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api.port,
        help=f"Port number (default: {settings.api.port})",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        default=settings.logging.level,
        help=f"Log verbosity (default: {settings.logging.level})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    args = parser.parse_args()

    configure_logging(level=level_from_name(args.log_level), force=True)
    suppress_third_party_loggers()
    get_logger(__name__).info("Serving data from %s", settings.data.path)

    uvicorn.run(
        "number_finder.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )
