"""
Core module for am-api.

This module provides the foundational components used throughout the library:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - logger: Logging setup with console and file outputs

Usage:
    from am_api.core import (
        Config, load_config,
        setup_logging, get_logger,
        AmApiError, ConfigError, MusicApiError
    )
"""

from am_api.core.config import (
    AuthConfig,
    ClientConfig,
    Config,
    LoggingConfig,
    load_config,
    normalize_storefront,
)
from am_api.core.exceptions import (
    AmApiError,
    ArtworkTemplateError,
    BuilderConsumedError,
    ConfigError,
    DecodeError,
    InvalidResourceTypeError,
    MissingContextError,
    MusicApiError,
    TransportError,
)
from am_api.core.logger import (
    get_logger,
    log_request_failure,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "AuthConfig",
    "ClientConfig",
    "LoggingConfig",
    "load_config",
    "normalize_storefront",
    # Exceptions
    "AmApiError",
    "ConfigError",
    "TransportError",
    "MusicApiError",
    "DecodeError",
    "InvalidResourceTypeError",
    "ArtworkTemplateError",
    "BuilderConsumedError",
    "MissingContextError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_request_failure",
    "shutdown_logging",
]
