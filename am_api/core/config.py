"""
Configuration management for am-api.

This module handles loading and validating the settings needed to build
an ApiClient: the two Apple Music tokens, the default storefront and
localization, the HTTP timeout, and logging options.

Configuration sources (later ones win):
    1. am_api.yaml in the current working directory (or an explicit path)
    2. Environment variables, including a .env file loaded with python-dotenv

Environment Variables:
    DEVELOPER_TOKEN       - Apple Music developer token (JWT)
    MEDIA_USER_TOKEN      - Music user token
    AM_API_STOREFRONT     - Default storefront, e.g. "us"
    AM_API_LOCALIZATION   - Default localization, e.g. "en-US"

Example am_api.yaml:
    auth:
      developer_token: "eyJhbGciOi..."
      media_user_token: "Ag8Bx..."

    client:
      storefront: "us"
      localization: "en-US"
      timeout: 30

    logging:
      level: "INFO"
      directory: null  # Optional: write log files here
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from am_api.core.exceptions import ConfigError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "am_api.yaml"

DEFAULT_STOREFRONT = "us"
DEFAULT_LOCALIZATION = "en-US"
DEFAULT_TIMEOUT = 30.0

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AuthConfig:
    """
    Apple Music credentials.

    Attributes:
        developer_token: Signed developer JWT, sent as "Authorization: Bearer ...".
        media_user_token: Music user token, sent as "media-user-token".
    """
    developer_token: str
    media_user_token: str

    def __repr__(self) -> str:
        return "AuthConfig(developer_token=***, media_user_token=***)"


@dataclass(frozen=True)
class ClientConfig:
    """
    Client defaults applied to every request unless overridden per call.

    Attributes:
        storefront: Lowercase two-letter storefront code.
        localization: Language tag sent as the "l" query parameter.
        timeout: Per-request timeout in seconds.
    """
    storefront: str
    localization: str
    timeout: float


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging configuration.

    Attributes:
        level: Console log level name.
        directory: Directory for log files, or None for console only.
    """
    level: str
    directory: Path | None


@dataclass(frozen=True)
class Config:
    """
    Complete library configuration.

    Created by load_config() and treated as immutable.

    Example:
        config = load_config()
        client = ApiClient.from_config(config)
    """
    auth: AuthConfig
    client: ClientConfig
    logging: LoggingConfig


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from am_api.yaml and the environment.

    Args:
        config_path: Optional explicit path to the config file.
                     If None, looks for am_api.yaml in the current working directory.
                     When the default file does not exist, configuration is taken
                     from the environment only. An explicit path must exist.

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If the file cannot be read or parsed, or if a value is
                     missing or invalid after environment overrides are applied.
    """
    load_dotenv()

    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        raw_config = _read_config_file(config_path)
    elif explicit:
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    _validate_config(raw_config)

    return Config(
        auth=_parse_auth_config(raw_config.get("auth") or {}),
        client=_parse_client_config(raw_config.get("client") or {}),
        logging=_parse_logging_config(raw_config.get("logging") or {}),
    )


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except IOError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file is an empty configuration
    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return raw_config


def _validate_config(raw_config: dict[str, Any]) -> None:
    """
    Check that every present section is a dictionary.

    Raises:
        ConfigError: If a section has the wrong type.
    """
    for section in ("auth", "client", "logging"):
        value = raw_config.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigError(
                f"Section '{section}' must be a dictionary",
                details={"section": section}
            )


def _parse_auth_config(auth_section: dict[str, Any]) -> AuthConfig:
    """
    Parse the 'auth' section, letting environment variables take precedence.

    Raises:
        ConfigError: If either token is missing or empty.
    """
    developer_token = os.getenv("DEVELOPER_TOKEN") or auth_section.get("developer_token", "")
    media_user_token = os.getenv("MEDIA_USER_TOKEN") or auth_section.get("media_user_token", "")

    if not isinstance(developer_token, str) or not developer_token.strip():
        raise ConfigError(
            "'auth.developer_token' must be a non-empty string (or set DEVELOPER_TOKEN)",
            details={"field": "auth.developer_token"}
        )

    if not isinstance(media_user_token, str) or not media_user_token.strip():
        raise ConfigError(
            "'auth.media_user_token' must be a non-empty string (or set MEDIA_USER_TOKEN)",
            details={"field": "auth.media_user_token"}
        )

    return AuthConfig(
        developer_token=developer_token.strip(),
        media_user_token=media_user_token.strip()
    )


def _parse_client_config(client_section: dict[str, Any]) -> ClientConfig:
    """
    Parse the 'client' section with defaults applied.

    Raises:
        ConfigError: If storefront is not a two-letter code, localization is
                     empty, or timeout is not a positive number.
    """
    storefront = os.getenv("AM_API_STOREFRONT") or client_section.get("storefront", DEFAULT_STOREFRONT)
    localization = os.getenv("AM_API_LOCALIZATION") or client_section.get("localization", DEFAULT_LOCALIZATION)
    timeout = client_section.get("timeout", DEFAULT_TIMEOUT)

    storefront = normalize_storefront(storefront)

    if not isinstance(localization, str) or not localization.strip():
        raise ConfigError(
            "'client.localization' must be a non-empty string",
            details={"field": "client.localization"}
        )

    # bool is an int subclass; reject it explicitly
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(
            "'client.timeout' must be a positive number",
            details={"field": "client.timeout", "value": timeout}
        )

    return ClientConfig(
        storefront=storefront,
        localization=localization.strip(),
        timeout=float(timeout)
    )


def _parse_logging_config(logging_section: dict[str, Any]) -> LoggingConfig:
    """
    Parse the 'logging' section with defaults applied.

    Raises:
        ConfigError: If level is unknown or directory is not a string.
    """
    level = logging_section.get("level", "INFO")
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"'logging.level' must be one of {', '.join(_LOG_LEVELS)}",
            details={"field": "logging.level", "value": level}
        )

    directory = None
    raw_directory = logging_section.get("directory")
    if raw_directory is not None:
        if not isinstance(raw_directory, str) or not raw_directory.strip():
            raise ConfigError(
                "'logging.directory' must be a non-empty string or null",
                details={"field": "logging.directory"}
            )
        directory = Path(raw_directory.strip()).expanduser().resolve()

    return LoggingConfig(level=level.upper(), directory=directory)


def normalize_storefront(storefront: Any) -> str:
    """
    Validate a storefront code and return it lowercased.

    Args:
        storefront: Two-letter country code in any case, e.g. "US" or "us".

    Returns:
        The lowercase code used in catalog paths.

    Raises:
        ConfigError: If the value is not two ASCII letters.
    """
    if not isinstance(storefront, str):
        raise ConfigError(
            "Storefront must be a two-letter country code",
            details={"field": "storefront", "value": storefront}
        )
    code = storefront.strip().lower()
    if len(code) != 2 or not code.isascii() or not code.isalpha():
        raise ConfigError(
            f"Storefront must be a two-letter country code, got '{storefront}'",
            details={"field": "storefront", "value": storefront}
        )
    return code
