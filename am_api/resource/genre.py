"""Catalog genre."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Literal

from am_api.request.builder import DEFAULT_FETCH_LIMIT, CatalogRequestBuilder
from am_api.request.context import ApiModel
from am_api.request.fields import ExtensionField, for_object
from am_api.resource.base import ResourceModel

if TYPE_CHECKING:
    from am_api.client import ApiClient


@for_object("genres")
class GenreAttributesExtension(ExtensionField):
    CHART_LABEL = "chartLabel"


class GenreAttributes(ApiModel):
    """
    Genre attributes.

    Attributes:
        parent_id / parent_name: The parent genre, absent for top-level genres.
        chart_label: (Extended) Label to show when the genre is used for charts.
    """
    name: str = ""
    parent_id: str | None = None
    parent_name: str | None = None
    chart_label: str | None = None


class Genre(ResourceModel):
    type: Literal["genres"] = "genres"
    attributes: GenreAttributes | None = None

    @classmethod
    def get(cls) -> GenreRequestBuilder:
        return GenreRequestBuilder()


class GenreRequestBuilder(CatalogRequestBuilder[Genre]):
    path = "genres"
    item_type = Genre

    def all(self, client: ApiClient, limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0) -> Iterator[Genre]:
        """Lazily iterate the genres of the storefront's top charts."""
        return self._all(client, limit, offset)
