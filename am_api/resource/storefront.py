"""Apple Music storefronts (one per country or region)."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Literal

from pydantic import Field

from am_api.core.config import normalize_storefront
from am_api.request.builder import DEFAULT_FETCH_LIMIT, ResourceRequestBuilder
from am_api.request.context import ApiModel, RequestContext
from am_api.resource.base import ResourceModel

if TYPE_CHECKING:
    from am_api.client import ApiClient


class ExplicitContentPolicy(str, Enum):
    ALLOWED = "allowed"
    OPT_IN = "opt-in"
    PROHIBITED = "prohibited"


class StorefrontAttributes(ApiModel):
    """
    Storefront attributes.

    Attributes:
        default_language_tag: Default localization of the storefront, e.g. "en-US".
        explicit_content_policy: Whether explicit content is available.
        supported_language_tags: Localizations the storefront can be queried with.
    """
    default_language_tag: str = ""
    explicit_content_policy: ExplicitContentPolicy = ExplicitContentPolicy.ALLOWED
    name: str = ""
    supported_language_tags: list[str] = Field(default_factory=list)


class Storefront(ResourceModel):
    """Storefront. Its id is the lowercase two-letter storefront code."""

    type: Literal["storefronts"] = "storefronts"
    attributes: StorefrontAttributes | None = None

    @classmethod
    def get(cls) -> StorefrontRequestBuilder:
        return StorefrontRequestBuilder()


class StorefrontRequestBuilder(ResourceRequestBuilder[Storefront]):
    path = "storefronts"
    item_type = Storefront

    def _base_path(self, context: RequestContext) -> str:
        return f"/v1/{self.path}"

    def one(self, client: ApiClient, id: str) -> Storefront | None:
        """Fetch one storefront by its two-letter code."""
        return super().one(client, normalize_storefront(id))

    def all(self, client: ApiClient, limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0) -> Iterator[Storefront]:
        """Lazily iterate every storefront."""
        return self._all(client, limit, offset)
