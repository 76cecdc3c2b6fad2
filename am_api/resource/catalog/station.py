"""Catalog stations and station genres."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Literal

from pydantic import Field

from am_api.request.builder import DEFAULT_FETCH_LIMIT, CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import RelationshipField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import ContentRating, EditorialNotes, PlayParameters
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.curator import AppleCurator


class MediaKind(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"


@for_object("stations")
class StationRelationshipType(RelationshipField):
    RADIO_SHOW = "radio-show"


@for_object("station-genres")
class StationGenreRelationshipType(RelationshipField):
    STATIONS = "stations"


class StationAttributes(ApiModel):
    """
    Station attributes.

    Attributes:
        duration_in_millis: Stream duration; not sent for live or programmed stations.
        episode_number: Set when the station is an episode of a show.
        media_kind: Whether the station streams audio or video.
        station_provider_name: Entity that provided the station, when specified.
    """
    artwork: Artwork = Field(default_factory=Artwork)
    duration_in_millis: int | None = None
    editorial_notes: EditorialNotes | None = None
    episode_number: str | None = None
    content_rating: ContentRating | None = None
    is_live: bool = False
    media_kind: MediaKind = MediaKind.AUDIO
    name: str = ""
    play_params: PlayParameters | None = None
    station_provider_name: str | None = None
    url: str = ""


class StationRelationships(ContextModel):
    radio_show: Relationship[AppleCurator] | None = Field(default=None, alias="radio-show")


class Station(ResourceModel):
    """Catalog radio station."""

    type: Literal["stations"] = "stations"
    attributes: StationAttributes | None = None
    relationships: StationRelationships = Field(default_factory=StationRelationships)

    @classmethod
    def get(cls) -> StationRequestBuilder:
        return StationRequestBuilder()


class StationRequestBuilder(CatalogRequestBuilder[Station]):
    path = "stations"
    item_type = Station

    def live(self, client: ApiClient) -> list[Station]:
        """Fetch the Apple Music live radio stations."""
        context = self._drain_context(client).with_query(("filter[featured]", "apple-music-live-radio"))
        return self._fetch(client, self._base_path(context), context, Station)

    def personal(self, client: ApiClient) -> Station | None:
        """Fetch the user's personal station."""
        context = self._drain_context(client).with_query(("filter[identity]", "personal"))
        items = self._fetch(client, self._base_path(context), context, Station)
        return items[0] if items else None


class StationGenreAttributes(ApiModel):
    name: str = ""


class StationGenreRelationships(ContextModel):
    stations: Relationship[Station] | None = None


class StationGenre(ResourceModel):
    """Genre used to group radio stations."""

    type: Literal["station-genres"] = "station-genres"
    attributes: StationGenreAttributes | None = None
    relationships: StationGenreRelationships = Field(default_factory=StationGenreRelationships)

    @classmethod
    def get(cls) -> StationGenreRequestBuilder:
        return StationGenreRequestBuilder()


class StationGenreRequestBuilder(CatalogRequestBuilder[StationGenre]):
    path = "station-genres"
    item_type = StationGenre

    def all(self, client: ApiClient, limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0) -> Iterator[StationGenre]:
        """Lazily iterate every station genre of the storefront."""
        return self._all(client, limit, offset)
