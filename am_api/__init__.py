"""
am-api: Typed client for the Apple Music REST API.

This package wraps the Apple Music API (catalog, library, history, ratings,
recommendations and storefronts) with typed pydantic models and fluent,
single-use request builders.

Architecture:
    core/       - Configuration, logging, exceptions
    request/    - Field sets, request context, builders, pagination
    resource/   - Typed resources and their request builders
    client.py   - ApiClient (authenticated requests.Session)

Usage:
    from am_api import ApiClient, load_config, setup_logging
    from am_api.resource import Album, AlbumRelationshipType, History

    config = load_config()
    setup_logging(config.logging.level, config.logging.directory)
    client = ApiClient.from_config(config)

    album = (
        Album.get()
        .include(AlbumRelationshipType.TRACKS)
        .one(client, "1676791755")
    )
    for track in album.relationships.tracks.iter(client):
        print(track.attributes.name)

    for item in History.get().recently_played(client):
        print(item.type, item.id)

Configuration:
    Tokens come from the environment (or a .env file); the rest from an
    optional am_api.yaml in the current directory:

        DEVELOPER_TOKEN=...
        MEDIA_USER_TOKEN=...

        client:
          storefront: "us"
          localization: "en-US"
          timeout: 30
        logging:
          level: "INFO"
          directory: null

Dependencies:
    - requests: HTTP transport
    - pydantic: Response models and the Resource union
    - pyyaml: Configuration file parsing
    - python-dotenv: Loading tokens from .env
    - tqdm: Log output that does not break progress bars
"""

__version__ = "0.1.0"
__author__ = "am-api"
__license__ = "MIT"

from am_api.client import ApiClient
from am_api.core import (
    AmApiError,
    ArtworkTemplateError,
    BuilderConsumedError,
    Config,
    ConfigError,
    DecodeError,
    InvalidResourceTypeError,
    MissingContextError,
    MusicApiError,
    TransportError,
    get_logger,
    load_config,
    setup_logging,
)
from am_api.request import RequestContext
from am_api.resource import RESOURCE_TYPES, Resource

__all__ = [
    # Version
    "__version__",
    # Client
    "ApiClient",
    "RequestContext",
    # Core
    "Config",
    "load_config",
    "setup_logging",
    "get_logger",
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
    # Resources
    "Resource",
    "RESOURCE_TYPES",
]
