"""
Response envelopes and decoding.

Every 2xx body is decoded through pydantic into the shape the caller
expects; every non-2xx body is decoded into ErrorResponse and raised as
MusicApiError. Both failure kinds are logged here so the failed_requests
report sees every rejected call regardless of which operation made it.
"""

from typing import Generic, TypeVar

import requests
from pydantic import BaseModel, Field, ValidationError

from am_api.core.exceptions import DecodeError, MusicApiError
from am_api.core.logger import get_logger, log_request_failure
from am_api.request.context import ApiModel

logger = get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ResourceResponse(ApiModel, Generic[T]):
    """Plural fetch envelope: {"data": [...]}"""

    data: list[T] = Field(default_factory=list)


class ResultsResponse(ApiModel, Generic[T]):
    """Search envelope: {"results": {...}}"""

    results: T


class MusicError(ApiModel):
    """A single entry of an Apple Music error body."""

    id: str = ""
    title: str = ""
    detail: str = ""
    status: str = ""
    code: str = ""


class ErrorResponse(ApiModel):
    """Body of a non-2xx response."""

    code: int | None = None
    message: str | None = None
    errors: list[MusicError] = Field(default_factory=list)

    def summary(self) -> str:
        if self.errors:
            first = self.errors[0]
            return f"{first.title}: {first.detail}" if first.detail else first.title
        return self.message or "no error details"


def _endpoint_of(response: requests.Response) -> str:
    request = response.request
    if request is None or request.path_url is None:
        return response.url or ""
    return request.path_url.split("?", 1)[0]


def _method_of(response: requests.Response) -> str:
    request = response.request
    return request.method if request is not None and request.method else "GET"


def raise_for_error(response: requests.Response) -> None:
    """
    Raise MusicApiError if `response` is not a 2xx response.

    Raises:
        MusicApiError: Non-2xx status with a decodable error body.
        DecodeError: Non-2xx status whose body is not the documented error shape.
    """
    if 200 <= response.status_code < 300:
        return

    method = _method_of(response)
    endpoint = _endpoint_of(response)

    try:
        error_response = ErrorResponse.model_validate_json(response.content or b"{}")
    except ValidationError as e:
        log_request_failure(logger, method, endpoint, response.status_code, "undecodable error body")
        raise DecodeError(
            f"{method} {endpoint} returned {response.status_code} with an undecodable body",
            details={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "original_error": str(e),
            }
        ) from e

    log_request_failure(logger, method, endpoint, response.status_code, error_response.summary())
    raise MusicApiError(
        f"Apple Music error {response.status_code} on {method} {endpoint}: {error_response.summary()}",
        status_code=response.status_code,
        response=error_response,
        details={"endpoint": endpoint, "method": method}
    )


def decode_response(response: requests.Response, shape: type[M]) -> M:
    """
    Check the status of `response` and decode its body as `shape`.

    An empty 2xx body (202/204) decodes as `shape()` with its defaults.

    Raises:
        MusicApiError: See raise_for_error().
        DecodeError: The body does not match `shape`.
    """
    raise_for_error(response)

    if not response.content:
        return shape()

    try:
        return shape.model_validate_json(response.content)
    except ValidationError as e:
        endpoint = _endpoint_of(response)
        logger.error(f"Failed to decode response from {endpoint}: {e.error_count()} validation error(s)")
        raise DecodeError(
            f"Failed to decode response from {endpoint} as {shape.__name__}",
            details={"endpoint": endpoint, "original_error": str(e)}
        ) from e


def decode_data(response: requests.Response, item_type: type[T] | object) -> list[T]:
    """Decode a {"data": [...]} body into a list of `item_type`."""
    return decode_response(response, ResourceResponse[item_type]).data
