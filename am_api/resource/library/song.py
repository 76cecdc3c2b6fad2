"""Library song."""

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
    from am_api.resource.catalog.song import Song
    from am_api.resource.library.album import LibraryAlbum
    from am_api.resource.library.artist import LibraryArtist


@for_object("library-songs")
class LibrarySongRelationshipType(RelationshipField):
    ALBUMS = "albums"
    ARTISTS = "artists"
    CATALOG = "catalog"


class LibrarySongAttributes(ApiModel):
    album_name: str | None = None
    artist_name: str = ""
    artwork: Artwork = Field(default_factory=Artwork)
    content_rating: ContentRating | None = None
    disc_number: int | None = None
    duration_in_millis: int = 0
    genre_names: list[str] = Field(default_factory=list)
    has_lyrics: bool = False
    name: str = ""
    play_params: PlayParameters | None = None
    release_date: YearOrDate | None = None
    track_number: int | None = None


class LibrarySongRelationships(ContextModel):
    albums: Relationship[LibraryAlbum] | None = None
    artists: Relationship[LibraryArtist] | None = None
    catalog: Relationship[Song] | None = None


class LibrarySong(ResourceModel):
    type: Literal["library-songs"] = "library-songs"
    attributes: LibrarySongAttributes | None = None
    relationships: LibrarySongRelationships = Field(default_factory=LibrarySongRelationships)

    @classmethod
    def get(cls) -> LibrarySongRequestBuilder:
        return LibrarySongRequestBuilder()


class LibrarySongRequestBuilder(LibraryRequestBuilder[LibrarySong]):
    path = "songs"
    item_type = LibrarySong
