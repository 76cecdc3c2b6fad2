"""
Apple Music API client.

ApiClient owns a requests.Session carrying the two authentication headers
and knows the client-wide defaults (storefront, localization). It only
executes HTTP calls; building query parameters and decoding responses is
done by the request builders in am_api.request and am_api.resource.

Authentication:
    Two secrets are attached to every request as default headers:
    - Authorization: Bearer <developer token>
    - media-user-token: <music user token>
    Neither is ever logged or shown by repr().

Usage:
    from am_api import ApiClient
    from am_api.resource import Album

    client = ApiClient(developer_token, media_user_token, storefront="us")
    album = Album.get().one(client, "1676791755")

    # Or from am_api.yaml / environment variables
    client = ApiClient.from_config(load_config())

Thread Safety:
    The client holds no per-request state. Sharing one client between
    threads is as safe as sharing the underlying requests.Session.
"""

from typing import Any, Iterable

import requests
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from am_api.core.config import (
    DEFAULT_LOCALIZATION,
    DEFAULT_STOREFRONT,
    DEFAULT_TIMEOUT,
    Config,
    normalize_storefront,
)
from am_api.core.exceptions import ConfigError, TransportError
from am_api.core.logger import get_logger, log_request_failure
from am_api.request.builder import DEFAULT_FETCH_LIMIT

logger = get_logger(__name__)

# Every request asks for artwork URL templates in {w}x{h}bb.{f} form
ART_URL_QUERY = ("art[url]", "f")


class ApiClient:
    """
    Apple Music API client.

    Attributes:
        BASE_URL: Host every endpoint path is appended to.
        timeout: Per-request timeout in seconds.
        localization: Default localization sent as the "l" query pair.
        DEFAULT_FETCH_LIMIT: Page size used by paginated `all` calls.
    """

    BASE_URL = "https://api.music.apple.com"
    DEFAULT_FETCH_LIMIT = DEFAULT_FETCH_LIMIT

    def __init__(
        self,
        developer_token: str,
        media_user_token: str,
        storefront: str = DEFAULT_STOREFRONT,
        localization: str = DEFAULT_LOCALIZATION,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None
    ) -> None:
        """
        Create a client.

        Args:
            developer_token: Signed developer JWT.
            media_user_token: Music user token of the signed-in user.
            storefront: Default two-letter storefront, e.g. "us".
            localization: Default language tag, e.g. "en-US".
            timeout: Per-request timeout in seconds.
            session: Optional session to use (mainly for tests).
                     Default headers are added to it.

        Raises:
            ConfigError: If a token cannot be sent as a header value,
                         or the storefront is not a two-letter code.
        """
        headers = {
            "Authorization": f"Bearer {developer_token}",
            "media-user-token": media_user_token,
        }
        for name, value in headers.items():
            try:
                check_header_validity((name, value))
            except InvalidHeader as e:
                # The value is a secret; never include it in the error
                raise ConfigError(
                    f"Invalid value for header '{name}'",
                    details={"header": name}
                ) from e

        self._storefront = normalize_storefront(storefront)
        self.localization = localization
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(headers)

    @classmethod
    def from_config(cls, config: Config, session: requests.Session | None = None) -> "ApiClient":
        """Build a client from a loaded Config."""
        return cls(
            developer_token=config.auth.developer_token,
            media_user_token=config.auth.media_user_token,
            storefront=config.client.storefront,
            localization=config.client.localization,
            timeout=config.client.timeout,
            session=session,
        )

    @property
    def storefront(self) -> str:
        """Default storefront (lowercase two-letter code)."""
        return self._storefront

    @storefront.setter
    def storefront(self, value: str) -> None:
        self._storefront = normalize_storefront(value)

    def __repr__(self) -> str:
        return (
            f"ApiClient(storefront={self._storefront!r}, localization={self.localization!r}, "
            f"developer_token=***, media_user_token=***)"
        )

    # =========================================================================
    # HTTP verbs
    # =========================================================================

    def get(self, endpoint: str, params: Iterable[tuple[str, str]] = ()) -> requests.Response:
        return self.request("GET", endpoint, params)

    def post(
        self,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        json: Any = None
    ) -> requests.Response:
        return self.request("POST", endpoint, params, json)

    def put(
        self,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        json: Any = None
    ) -> requests.Response:
        return self.request("PUT", endpoint, params, json)

    def delete(self, endpoint: str, params: Iterable[tuple[str, str]] = ()) -> requests.Response:
        return self.request("DELETE", endpoint, params)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        json: Any = None
    ) -> requests.Response:
        """
        Execute one HTTP call against the API.

        Args:
            method: HTTP method.
            endpoint: Path starting with "/v1/...". May already contain a
                      query string (pagination `next` links); `params` are
                      appended to it.
            params: Query pairs, sent after the fixed art[url] pair.
            json: Optional JSON body.

        Returns:
            The raw response. Status is not checked here.

        Raises:
            TransportError: If no response was received.
        """
        query = [ART_URL_QUERY, *params]
        logger.debug(f"{method} {endpoint}")
        try:
            return self._session.request(
                method,
                f"{self.BASE_URL}{endpoint}",
                params=query,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log_request_failure(logger, method, endpoint, None, str(e))
            raise TransportError(
                f"{method} {endpoint} failed: {e}",
                details={"method": method, "endpoint": endpoint, "original_error": str(e)}
            ) from e

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
