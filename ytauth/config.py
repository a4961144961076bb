import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


# =============================================================================
# Provider Configuration
# =============================================================================

DEFAULT_AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URL = "https://accounts.google.com/o/oauth2/token"
DEFAULT_SCOPE = ["https://www.googleapis.com/auth/youtube.readonly"]
DEFAULT_PROFILE_URL = "https://www.googleapis.com/youtube/v3/channels?part=snippet&mine=true"

_URL_DEFAULTS = {
    "authorization_url": DEFAULT_AUTHORIZATION_URL,
    "token_url": DEFAULT_TOKEN_URL,
    "profile_url": DEFAULT_PROFILE_URL,
}


class YouTubeConfig(BaseModel):
    """YouTube (Google OAuth 2.0) provider configuration.

    Unset or empty endpoint values fall back to Google's published defaults.
    URLs are not validated here; a malformed value surfaces as a transport
    failure on first use.
    """

    model_config = {"frozen": True}

    authorization_url: str = DEFAULT_AUTHORIZATION_URL
    token_url: str = DEFAULT_TOKEN_URL
    scope: list[str] = DEFAULT_SCOPE
    profile_url: str = DEFAULT_PROFILE_URL

    client_id: str = ""
    client_secret: str = ""
    callback_url: str = ""  # Full callback URL registered with Google

    @field_validator("authorization_url", "token_url", "profile_url", mode="before")
    @classmethod
    def _default_when_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if not value:
            return _URL_DEFAULTS[info.field_name]
        return value

    @field_validator("scope", mode="before")
    @classmethod
    def _split_scope(cls, value: Any) -> Any:
        # Env vars and YAML may carry the scope as a space separated string
        if isinstance(value, str):
            value = value.split()
        if not value:
            return list(DEFAULT_SCOPE)
        return value


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by YTAUTH_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get("YTAUTH_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class HttpConfig(BaseModel):
    """Timeouts (seconds) for the shared HTTP client."""

    connect_timeout: float = 5.0
    read_timeout: float = 10.0
    write_timeout: float = 5.0
    pool_timeout: float = 5.0


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from YTAUTH_LOG_FILE env var."""
        return os.environ.get("YTAUTH_LOG_FILE")


class Config(BaseSettings):
    youtube: YouTubeConfig = YouTubeConfig()
    http: HttpConfig = HttpConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "YTAUTH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows YTAUTH_YOUTUBE__CLIENT_ID override
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - YTAUTH_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called once at startup (the CLI does this before building
    any service).
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
