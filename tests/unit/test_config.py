"""Tests for configuration management and constants.

Settings sections read their own prefixed environment variables; the
port also honours a bare PORT. An unsupported LOG_LEVEL must stop the
process from starting, so get_settings() surfaces it as a
ConfigurationError. We also verify the singleton pattern.
"""

import re

import pytest
from pydantic import ValidationError

import number_finder.config.settings as settings_module
from number_finder.config.constants import (
    CORS_ORIGIN_REGEX,
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_DATA_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THRESHOLD_PERCENTAGE,
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
from number_finder.core.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the settings read."""
    for name in ("DATA_PATH", "API_HOST", "API_PORT", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_settings():
    """Put the original singleton back after a test swaps it."""
    original = settings_module._settings_instance
    yield
    settings_module._settings_instance = original


# -----------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------


class TestConstants:
    def test_supported_log_levels(self):
        assert SUPPORTED_LOG_LEVELS == ("debug", "info", "error")

    def test_defaults(self):
        assert DEFAULT_LOG_LEVEL == "info"
        assert DEFAULT_DATA_PATH == "data/input.txt"
        assert DEFAULT_API_HOST == "0.0.0.0"
        assert DEFAULT_API_PORT == 8080
        assert DEFAULT_THRESHOLD_PERCENTAGE == 0.0

    @pytest.mark.parametrize(
        "origin",
        [
            "http://localhost",
            "http://localhost:3000",
            "https://127.0.0.1:8443",
        ],
    )
    def test_cors_regex_allows_local_origins(self, origin):
        assert re.fullmatch(CORS_ORIGIN_REGEX, origin)

    @pytest.mark.parametrize(
        "origin",
        [
            "http://example.com",
            "http://localhost.example.com",
            "ftp://localhost",
            "http://127.0.0.2",
        ],
    )
    def test_cors_regex_rejects_other_origins(self, origin):
        assert re.fullmatch(CORS_ORIGIN_REGEX, origin) is None


# -----------------------------------------------------------------------
# parse_log_level()
# -----------------------------------------------------------------------


class TestParseLogLevel:
    @pytest.mark.parametrize("value", ["debug", "info", "error"])
    def test_valid(self, value):
        assert parse_log_level(value) == value

    def test_case_and_whitespace(self):
        assert parse_log_level("  DEBUG ") == "debug"

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="Empty log level"):
            parse_log_level("")

    @pytest.mark.parametrize("value", ["warning", "trace", "verbose"])
    def test_unsupported_raises(self, value):
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level(value)


# -----------------------------------------------------------------------
# Section settings
# -----------------------------------------------------------------------


class TestSettingsDefaults:
    def test_data_defaults(self, clean_env):
        assert DataSettings().path == "data/input.txt"

    def test_api_defaults(self, clean_env):
        s = ApiSettings()
        assert s.host == "0.0.0.0"
        assert s.port == 8080

    def test_logging_defaults(self, clean_env):
        assert LoggingSettings().level == "info"


class TestSettingsFromEnv:
    def test_data_path(self, clean_env):
        clean_env.setenv("DATA_PATH", "/srv/numbers.txt")
        assert DataSettings().path == "/srv/numbers.txt"

    def test_bare_port(self, clean_env):
        clean_env.setenv("PORT", "9000")
        assert ApiSettings().port == 9000

    def test_prefixed_port(self, clean_env):
        clean_env.setenv("API_PORT", "9100")
        assert ApiSettings().port == 9100

    def test_host(self, clean_env):
        clean_env.setenv("API_HOST", "127.0.0.1")
        assert ApiSettings().host == "127.0.0.1"

    def test_port_keyword(self, clean_env):
        assert ApiSettings(port=7000).port == 7000

    def test_non_numeric_port_rejected(self, clean_env):
        clean_env.setenv("PORT", "eighty")
        with pytest.raises(ValidationError):
            ApiSettings()

    def test_out_of_range_port_rejected(self, clean_env):
        clean_env.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            ApiSettings()

    def test_log_level_normalised(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        assert LoggingSettings().level == "debug"

    def test_invalid_log_level_rejected(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            LoggingSettings()


# -----------------------------------------------------------------------
# Root Settings and singleton
# -----------------------------------------------------------------------


class TestRootSettings:
    def test_has_all_sections(self, clean_env):
        s = Settings()
        assert isinstance(s.data, DataSettings)
        assert isinstance(s.api, ApiSettings)
        assert isinstance(s.logging, LoggingSettings)

    def test_sections_read_env_at_construction(self, clean_env):
        """Nested sections are built per instance, not once at import."""
        clean_env.setenv("DATA_PATH", "first.txt")
        assert Settings().data.path == "first.txt"
        clean_env.setenv("DATA_PATH", "second.txt")
        assert Settings().data.path == "second.txt"

    def test_extra_ignore(self):
        assert Settings.model_config.get("extra") == "ignore"


class TestSingleton:
    def test_get_settings_returns_settings(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reload_settings_returns_new_instance(self, restore_settings):
        s1 = get_settings()
        s2 = reload_settings()
        assert s1 is not s2
        assert get_settings() is s2

    def test_invalid_env_raises_configuration_error(self, clean_env, restore_settings):
        clean_env.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            reload_settings()
