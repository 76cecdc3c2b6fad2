"""Catalog playlist."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import ExtensionField, RelationshipField, ViewField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.attributes import DescriptionAttribute, TitleOnlyAttribute
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import PlayParameters, TrackType
from am_api.resource.relationship import Relationship
from am_api.resource.view import View

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.envelope import Resource
    from am_api.resource.library.playlist import LibraryPlaylist


@for_object("playlists")
class PlaylistAttributesExtension(ExtensionField):
    TRACK_TYPES = "trackTypes"


@for_object("playlists")
class PlaylistRelationshipType(RelationshipField):
    CURATOR = "curator"
    LIBRARY = "library"
    TRACKS = "tracks"


@for_object("playlists")
class PlaylistViewType(ViewField):
    FEATURED_ARTISTS = "featured-artists"
    MORE_BY_CURATOR = "more-by-curator"


class PlaylistType(str, Enum):
    EDITORIAL = "editorial"
    EXTERNAL = "external"
    PERSONAL_MIX = "personal-mix"
    REPLAY = "replay"
    USER_SHARED = "user-shared"


class PlaylistAttributes(ApiModel):
    """
    Playlist attributes.

    Attributes:
        is_chart: Whether the playlist represents a popularity chart.
        last_modified_date: Last time the playlist was modified.
        track_types: (Extended) Resource types of the playlist's tracks.
    """
    artwork: Artwork | None = None
    curator_name: str = ""
    description: DescriptionAttribute | None = None
    is_chart: bool = False
    last_modified_date: datetime | None = None
    name: str = ""
    playlist_type: PlaylistType | None = None
    play_params: PlayParameters | None = None
    url: str = ""
    track_types: list[TrackType] | None = None


class PlaylistRelationships(ContextModel):
    """
    Playlist relationships.

    Attributes:
        curator: The curator (Curator or AppleCurator) that created the playlist.
        tracks: Songs and music videos on the playlist (default 100, max 300).
    """
    curator: Relationship[Resource] | None = None
    library: Relationship[LibraryPlaylist] | None = None
    tracks: Relationship[Resource] | None = None


class PlaylistViews(ContextModel):
    featured_artists: View[TitleOnlyAttribute, Artist] | None = Field(default=None, alias="featured-artists")
    more_by_curator: View[TitleOnlyAttribute, Playlist] | None = Field(default=None, alias="more-by-curator")


class Playlist(ResourceModel):
    """Catalog playlist."""

    type: Literal["playlists"] = "playlists"
    attributes: PlaylistAttributes | None = None
    relationships: PlaylistRelationships = Field(default_factory=PlaylistRelationships)
    views: PlaylistViews = Field(default_factory=PlaylistViews)

    @classmethod
    def get(cls) -> PlaylistRequestBuilder:
        return PlaylistRequestBuilder()


class PlaylistRequestBuilder(CatalogRequestBuilder[Playlist]):
    path = "playlists"
    item_type = Playlist

    def charts(self, client: ApiClient, storefront: str) -> list[Playlist]:
        """
        Fetch the chart playlists of a storefront.

        Args:
            storefront: Storefront whose charts to list. The request itself
                        still goes to the builder's storefront.
        """
        context = self._drain_context(client).with_query(("filter[storefront-chart]", storefront.lower()))
        return self._fetch(client, self._base_path(context), context, Playlist)
