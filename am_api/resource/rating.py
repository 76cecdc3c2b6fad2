"""
Ratings of the user.

A rating is 1 (love) or -1 (dislike) attached to a catalog or library
resource. Ratings are read with Rating.get() and written with Rating.set():

    Rating.set().add_rating(client, song, 1)
    Rating.set().remove_rating(client, song)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal, Sequence

from pydantic import Field

from am_api.request.builder import MusicRequestBuilder
from am_api.request.context import ApiModel, ContextModel, RequestContext
from am_api.request.fields import RelationshipField, for_object
from am_api.request.response import raise_for_error
from am_api.resource.base import ResourceModel, ensure_accepted
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.envelope import Resource


class RatingType(str, Enum):
    """Resource types that can be rated. The value is the endpoint segment."""
    ALBUM = "albums"
    MUSIC_VIDEO = "music-videos"
    PLAYLIST = "playlists"
    SONG = "songs"
    STATION = "stations"
    LIBRARY_ALBUM = "library-albums"
    LIBRARY_MUSIC_VIDEO = "library-music-videos"
    LIBRARY_PLAYLIST = "library-playlists"
    LIBRARY_SONG = "library-songs"

    def __str__(self) -> str:
        return self.value


RATING_TYPES = frozenset(rating_type.value for rating_type in RatingType)


@for_object("ratings")
class RatingRelationshipType(RelationshipField):
    CONTENT = "content"


class RatingAttributes(ApiModel):
    value: int | None = None


class RatingRelationships(ContextModel):
    content: Relationship[Resource] | None = None


class Rating(ResourceModel):
    type: Literal["ratings"] = "ratings"
    attributes: RatingAttributes | None = None
    relationships: RatingRelationships = Field(default_factory=RatingRelationships)

    @classmethod
    def get(cls) -> RatingGetRequestBuilder:
        return RatingGetRequestBuilder()

    @classmethod
    def set(cls) -> RatingSetRequestBuilder:
        return RatingSetRequestBuilder()


def _rating_path(rating_type: str, id: str | None = None) -> str:
    if id is None:
        return f"/v1/me/ratings/{rating_type}"
    return f"/v1/me/ratings/{rating_type}/{id}"


class RatingGetRequestBuilder(MusicRequestBuilder):

    def one(self, client: ApiClient, rating_type: RatingType, id: str) -> Rating | None:
        """Fetch the user's rating of one resource."""
        context = self._drain_context(client)
        items = self._fetch(client, _rating_path(str(rating_type), id), context, Rating)
        return items[0] if items else None

    def many(self, client: ApiClient, rating_type: RatingType, ids: Sequence[str]) -> list[Rating]:
        """Fetch the user's ratings of several resources of the same type."""
        context = self._drain_context(client).with_query(("ids", ",".join(ids)))
        return self._fetch(client, _rating_path(str(rating_type)), context, Rating)


class RatingSetRequestBuilder(MusicRequestBuilder):

    def _target(self, client: ApiClient, resource: ResourceModel, operation: str) -> tuple[RequestContext, str]:
        ensure_accepted(resource, RATING_TYPES, operation)
        return self._drain_context(client), _rating_path(resource.type, resource.id)

    def add_rating(self, client: ApiClient, resource: ResourceModel, value: int) -> Rating | None:
        """
        Rate a resource.

        Args:
            resource: Catalog or library album, music video, playlist, song,
                      or a station.
            value: 1 to love, -1 to dislike.

        Raises:
            InvalidResourceTypeError: The resource type cannot be rated.
        """
        context, endpoint = self._target(client, resource, "add_rating")
        body = {"type": "rating", "attributes": {"value": value}}
        items = self._fetch(client, endpoint, context, Rating, method="PUT", json=body)
        return items[0] if items else None

    def remove_rating(self, client: ApiClient, resource: ResourceModel) -> None:
        """
        Remove the user's rating of a resource.

        Raises:
            InvalidResourceTypeError: The resource type cannot be rated.
        """
        context, endpoint = self._target(client, resource, "remove_rating")
        raise_for_error(client.delete(endpoint, context.query))
