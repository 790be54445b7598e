"""Configuration module: settings and constants."""

from number_finder.config.constants import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ORIGIN_REGEX,
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_DATA_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THRESHOLD_PERCENTAGE,
    REQUEST_ID_HEADER,
    SUPPORTED_LOG_LEVELS,
    parse_log_level,
)
from number_finder.config.settings import (
    ApiSettings,
    DataSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "SUPPORTED_LOG_LEVELS",
    "DEFAULT_LOG_LEVEL",
    "parse_log_level",
    "DEFAULT_DATA_PATH",
    "DEFAULT_API_HOST",
    "DEFAULT_API_PORT",
    "CORS_ORIGIN_REGEX",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_HEADERS",
    "REQUEST_ID_HEADER",
    "DEFAULT_THRESHOLD_PERCENTAGE",
    # Settings
    "Settings",
    "DataSettings",
    "ApiSettings",
    "LoggingSettings",
    "get_settings",
    "reload_settings",
]
