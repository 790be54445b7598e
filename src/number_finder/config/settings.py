"""Configuration management using Pydantic Settings v2."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from number_finder.config.constants import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_DATA_PATH,
    DEFAULT_LOG_LEVEL,
    parse_log_level,
)
from number_finder.core.exceptions import ConfigurationError

# Load .env into os.environ so the nested sections, which have no env_file
# of their own, see values defined there.
load_dotenv()


class DataSettings(BaseSettings):
    """Location of the number dataset."""

    path: str = DEFAULT_DATA_PATH

    model_config = SettingsConfigDict(env_prefix="DATA_")


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    host: str = DEFAULT_API_HOST
    # Plain PORT is what container platforms inject.
    port: int = Field(
        default=DEFAULT_API_PORT,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "API_PORT", "port"),
    )

    model_config = SettingsConfigDict(env_prefix="API_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the level name."""
        return parse_log_level(v)


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    data: DataSettings = Field(default_factory=DataSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore prefixed env vars handled by nested classes
    )


_settings_instance: Optional[Settings] = None


def _build_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", details=str(e)) from e


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern).

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _build_settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = _build_settings()
    return _settings_instance
