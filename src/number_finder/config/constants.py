"""Application-wide constants."""

# Log levels accepted by LOG_LEVEL / --log-level
SUPPORTED_LOG_LEVELS = ("debug", "info", "error")

DEFAULT_LOG_LEVEL = "info"


def parse_log_level(level_input: str) -> str:
    """Parse and validate a log level name.

    Accepts ``"debug"``, ``"INFO"``, ``" error "``, etc. and returns the
    normalised lowercase name.

    Args:
        level_input: Log level name, case-insensitive.

    Returns:
        Lowercase level name from ``SUPPORTED_LOG_LEVELS``.

    Raises:
        ValueError: If the level is empty or not supported.
    """
    level = level_input.strip().lower()

    if not level:
        raise ValueError(
            f"Empty log level. Supported: {', '.join(SUPPORTED_LOG_LEVELS)}"
        )

    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level_input}. "
            f"Supported: {', '.join(SUPPORTED_LOG_LEVELS)}"
        )

    return level

# Dataset
DEFAULT_DATA_PATH = "data/input.txt"

# HTTP server
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080

# Browsers on the developer's own machine, any port
CORS_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"
CORS_ALLOW_METHODS = ("GET", "OPTIONS")
CORS_ALLOW_HEADERS = ("Origin", "Accept", "Content-Type", "X-Requested-With")

REQUEST_ID_HEADER = "X-Request-ID"

# Lookup defaults
DEFAULT_THRESHOLD_PERCENTAGE = 0.0
