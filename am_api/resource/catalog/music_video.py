"""Catalog music video."""

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
    ContentRating,
    EditorialNotes,
    PlayParameters,
    Preview,
    YearOrDate,
)
from am_api.resource.relationship import Relationship
from am_api.resource.view import View

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.album import Album
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.catalog.song import Song
    from am_api.resource.genre import Genre
    from am_api.resource.library.music_video import LibraryMusicVideo


@for_object("music-videos")
class MusicVideoAttributesExtension(ExtensionField):
    ARTIST_URL = "artistUrl"


@for_object("music-videos")
class MusicVideoRelationshipType(RelationshipField):
    ALBUMS = "albums"
    ARTISTS = "artists"
    GENRES = "genres"
    LIBRARY = "library"
    SONGS = "songs"


@for_object("music-videos")
class MusicVideoViewType(ViewField):
    MORE_BY_ARTIST = "more-by-artist"
    MORE_IN_GENRE = "more-in-genre"


class MusicVideoAttributes(ApiModel):
    """
    Music video attributes.

    Attributes:
        has_4k: Whether the video is available in 4K.
        has_hdr: Whether the video is available in HDR.
        video_sub_type: Set for special videos, e.g. "preview".
        work_id / work_name: Classical music only.
    """
    album_name: str | None = None
    artist_name: str = ""
    artist_url: str | None = None
    artwork: Artwork = Field(default_factory=Artwork)
    content_rating: ContentRating | None = None
    duration_in_millis: int = 0
    editorial_notes: EditorialNotes | None = None
    genre_names: list[str] = Field(default_factory=list)
    has_4k: bool = Field(default=False, alias="has4K")
    has_hdr: bool = Field(default=False, alias="hasHDR")
    isrc: str | None = None
    name: str = ""
    play_params: PlayParameters | None = None
    previews: list[Preview] = Field(default_factory=list)
    release_date: YearOrDate | None = None
    track_number: int | None = None
    url: str = ""
    video_sub_type: str | None = None
    work_id: str | None = None
    work_name: str | None = None


class MusicVideoRelationships(ContextModel):
    albums: Relationship[Album] | None = None
    artists: Relationship[Artist] | None = None
    genres: Relationship[Genre] | None = None
    library: Relationship[LibraryMusicVideo] | None = None
    songs: Relationship[Song] | None = None


class MusicVideoViews(ContextModel):
    more_by_artist: View[TitleOnlyAttribute, MusicVideo] | None = Field(default=None, alias="more-by-artist")
    more_in_genre: View[TitleOnlyAttribute, MusicVideo] | None = Field(default=None, alias="more-in-genre")


class MusicVideo(ResourceModel):
    """Catalog music video."""

    type: Literal["music-videos"] = "music-videos"
    attributes: MusicVideoAttributes | None = None
    relationships: MusicVideoRelationships = Field(default_factory=MusicVideoRelationships)
    views: MusicVideoViews = Field(default_factory=MusicVideoViews)

    @classmethod
    def get(cls) -> MusicVideoRequestBuilder:
        return MusicVideoRequestBuilder()


class MusicVideoRequestBuilder(CatalogRequestBuilder[MusicVideo]):
    path = "music-videos"
    item_type = MusicVideo

    def many(self, client: ApiClient, ids: Sequence[str], isrc: bool = False) -> list[MusicVideo]:
        """Fetch several music videos by id, or by ISRC when `isrc` is True."""
        return self._many(client, "filter[isrc]" if isrc else "ids", ids)
