"""Catalog album."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Sequence

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import ExtensionField, RelationshipField, ViewField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.attributes import TitleOnlyAttribute
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import (
    AudioVariant,
    ContentRating,
    EditorialNotes,
    PlayParameters,
    YearOrDate,
)
from am_api.resource.relationship import Relationship
from am_api.resource.view import View

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.catalog.music_video import MusicVideo
    from am_api.resource.catalog.playlist import Playlist
    from am_api.resource.catalog.record_label import RecordLabel
    from am_api.resource.envelope import Resource
    from am_api.resource.genre import Genre
    from am_api.resource.library.album import LibraryAlbum


@for_object("albums")
class AlbumAttributesExtension(ExtensionField):
    ARTIST_URL = "artistUrl"


@for_object("albums")
class AlbumRelationshipType(RelationshipField):
    ARTISTS = "artists"
    GENRES = "genres"
    TRACKS = "tracks"
    LIBRARY = "library"
    RECORD_LABELS = "record-labels"


@for_object("albums")
class AlbumViewType(ViewField):
    APPEARS_ON = "appears-on"
    OTHER_VERSIONS = "other-versions"
    RELATED_ALBUMS = "related-albums"
    RELATED_VIDEOS = "related-videos"


class AlbumAttributes(ApiModel):
    """
    Album attributes.

    Attributes:
        artist_url: (Extended) URL of the album's artist.
        is_complete: False when the album is only partially available.
        release_date: Year or full date; pre-release albums may be in the future.
        upc: Universal Product Code.
    """
    artist_name: str = ""
    artist_url: str | None = None
    artwork: Artwork = Field(default_factory=Artwork)
    audio_variants: list[AudioVariant] | None = None
    content_rating: ContentRating | None = None
    copyright: str = ""
    editorial_notes: EditorialNotes | None = None
    genre_names: list[str] = Field(default_factory=list)
    is_compilation: bool = False
    is_complete: bool = False
    is_mastered_for_itunes: bool = False
    is_single: bool = False
    name: str = ""
    play_params: PlayParameters | None = None
    record_label: str | None = None
    release_date: YearOrDate | None = None
    track_count: int = 0
    upc: str | None = None
    url: str = ""


class AlbumRelationships(ContextModel):
    """
    Album relationships.

    Attributes:
        tracks: Songs and music videos on the album (default 300, max 300).
        library: The library album, if the album was added to the library.
    """
    artists: Relationship[Artist] | None = None
    genres: Relationship[Genre] | None = None
    tracks: Relationship[Resource] | None = None
    library: Relationship[LibraryAlbum] | None = None
    record_labels: Relationship[RecordLabel] | None = Field(default=None, alias="record-labels")


class AlbumViews(ContextModel):
    appears_on: View[TitleOnlyAttribute, Playlist] | None = Field(default=None, alias="appears-on")
    other_versions: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="other-versions")
    related_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="related-albums")
    related_videos: View[TitleOnlyAttribute, MusicVideo] | None = Field(default=None, alias="related-videos")


class Album(ResourceModel):
    """Catalog album."""

    type: Literal["albums"] = "albums"
    attributes: AlbumAttributes | None = None
    relationships: AlbumRelationships = Field(default_factory=AlbumRelationships)
    views: AlbumViews = Field(default_factory=AlbumViews)

    @classmethod
    def get(cls) -> AlbumRequestBuilder:
        return AlbumRequestBuilder()


class AlbumRequestBuilder(CatalogRequestBuilder[Album]):
    path = "albums"
    item_type = Album

    def many(self, client: ApiClient, ids: Sequence[str], upc: bool = False) -> list[Album]:
        """
        Fetch several albums.

        Args:
            ids: Album ids, or UPCs when `upc` is True.
        """
        return self._many(client, "filter[upc]" if upc else "ids", ids)
