"""Library music video."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import LibraryRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import RelationshipField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import ContentRating, PlayParameters, YearOrDate
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.resource.catalog.music_video import MusicVideo
    from am_api.resource.library.album import LibraryAlbum
    from am_api.resource.library.artist import LibraryArtist


@for_object("library-music-videos")
class LibraryMusicVideoRelationshipType(RelationshipField):
    ALBUMS = "albums"
    ARTISTS = "artists"
    CATALOG = "catalog"


class LibraryMusicVideoAttributes(ApiModel):
    album_name: str | None = None
    artist_name: str = ""
    artwork: Artwork = Field(default_factory=Artwork)
    content_rating: ContentRating | None = None
    duration_in_millis: int = 0
    genre_names: list[str] = Field(default_factory=list)
    name: str = ""
    play_params: PlayParameters | None = None
    release_date: YearOrDate | None = None
    track_number: int | None = None


class LibraryMusicVideoRelationships(ContextModel):
    albums: Relationship[LibraryAlbum] | None = None
    artists: Relationship[LibraryArtist] | None = None
    catalog: Relationship[MusicVideo] | None = None


class LibraryMusicVideo(ResourceModel):
    type: Literal["library-music-videos"] = "library-music-videos"
    attributes: LibraryMusicVideoAttributes | None = None
    relationships: LibraryMusicVideoRelationships = Field(default_factory=LibraryMusicVideoRelationships)

    @classmethod
    def get(cls) -> LibraryMusicVideoRequestBuilder:
        return LibraryMusicVideoRequestBuilder()


class LibraryMusicVideoRequestBuilder(LibraryRequestBuilder[LibraryMusicVideo]):
    path = "music-videos"
    item_type = LibraryMusicVideo
