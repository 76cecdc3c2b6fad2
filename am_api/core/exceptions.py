"""
Exception classes for am-api.

This module defines all custom exceptions raised by the library.
Each exception is designed to let callers tell apart their own mistakes
(bad configuration, unsupported resource passed to a write endpoint)
from server-side conditions (Apple Music returned an error) and from
local defects (a response that no longer matches the models).

Exception Hierarchy:
    AmApiError (base)
        ConfigError - Invalid tokens or configuration file
        TransportError - Network, TLS or timeout failures
        MusicApiError - Non-2xx response from Apple Music
        DecodeError - Response body does not match the expected shape
        InvalidResourceTypeError - Resource not accepted by a write endpoint
        ArtworkTemplateError - Artwork URL template cannot be rendered

    RuntimeError (programming errors, intentionally NOT AmApiError)
        BuilderConsumedError - Request builder reused after it was sent
        MissingContextError - Relationship/view iterated without a context
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am_api.request.response import ErrorResponse


class AmApiError(Exception):
    """
    Base exception for all am-api errors.

    All recoverable errors raised by the library inherit from this class,
    allowing callers to catch every failure of a request with a single
    except clause if desired.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g., endpoint, status).

    Example:
        try:
            album = Album.get().one(client, "1676791755")
        except AmApiError as e:
            logger.error(f"Fetch failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'endpoint': API endpoint involved in the error
                     - 'status_code': HTTP status of the response
                     - 'original_error': The underlying exception if wrapping another error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(AmApiError):
    """
    Raised when the client cannot be configured.

    This is surfaced synchronously, before any request is possible.

    Common causes:
        - Developer or media user token contains characters not allowed in a header
        - am_api.yaml has invalid YAML syntax
        - Required token missing from both the config file and the environment
        - Invalid field values (e.g., three-letter storefront, negative timeout)

    Example:
        raise ConfigError(
            "Invalid value for header 'media-user-token'",
            details={'header': 'media-user-token'}
        )
    """
    pass


class TransportError(AmApiError):
    """
    Raised when the HTTP call itself failed.

    Wraps any requests.RequestException: DNS failure, refused connection,
    TLS error, timeout. No response was received, so there is no status code.

    Example:
        raise TransportError(
            "GET /v1/catalog/us/songs failed: Read timed out",
            details={'method': 'GET', 'endpoint': '/v1/catalog/us/songs'}
        )
    """
    pass


class MusicApiError(AmApiError):
    """
    Raised when Apple Music answered with a non-2xx status.

    The documented error body is parsed and attached so callers can
    inspect the individual error entries.

    Attributes:
        status_code: HTTP status of the response.
        response: Parsed ErrorResponse (code, message, errors).

    Example:
        try:
            Song.get().one(client, "0")
        except MusicApiError as e:
            if e.is_not_found:
                ...
            for error in e.response.errors:
                print(error.title, error.detail)
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: "ErrorResponse",
        details: dict | None = None
    ) -> None:
        """
        Initialize the API error.

        Args:
            message: Human-readable error description.
            status_code: HTTP status code of the failed response.
            response: The decoded error body.
            details: Optional dictionary with additional context.
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response = response

    @property
    def is_not_found(self) -> bool:
        """True if the resource does not exist (404)."""
        return self.status_code == 404

    @property
    def is_unauthorized(self) -> bool:
        """True if one of the tokens was rejected (401/403)."""
        return self.status_code in (401, 403)

    @property
    def is_rate_limit(self) -> bool:
        """True if the request was throttled (429)."""
        return self.status_code == 429


class DecodeError(AmApiError):
    """
    Raised when a response body does not match the expected JSON shape.

    This usually means the API changed, or a resource with an unknown
    `type` was returned. It is kept distinct from MusicApiError so that
    callers can report it as a local defect rather than a server condition.

    Example:
        raise DecodeError(
            "Failed to decode response from /v1/catalog/us/songs",
            details={'endpoint': '/v1/catalog/us/songs', 'original_error': '...'}
        )
    """
    pass


class InvalidResourceTypeError(AmApiError):
    """
    Raised when a write operation is given a resource it does not accept.

    Detected before any network call.

    Example:
        raise InvalidResourceTypeError(
            "Resource type 'albums' cannot be added to a playlist",
            details={'type': 'albums', 'accepted': ['songs', 'music-videos', ...]}
        )
    """
    pass


class ArtworkTemplateError(AmApiError):
    """
    Raised when an artwork URL template cannot be rendered.

    Only surfaced when an image URL is actually requested.
    """
    pass


class BuilderConsumedError(RuntimeError):
    """Raised when a request builder is used again after it was sent."""
    pass


class MissingContextError(RuntimeError):
    """
    Raised when a Relationship or View is iterated without a request context.

    Containers only receive their context when they are part of a response
    decoded by the library. A container built by hand (or decoded manually
    with model_validate) has no storefront or localization to continue with.
    """
    pass
