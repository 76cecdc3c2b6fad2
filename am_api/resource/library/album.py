"""Library album."""

from __future__ import annotations

from datetime import datetime
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
    from am_api.resource.catalog.album import Album
    from am_api.resource.envelope import Resource
    from am_api.resource.library.artist import LibraryArtist


@for_object("library-albums")
class LibraryAlbumRelationshipType(RelationshipField):
    ARTISTS = "artists"
    CATALOG = "catalog"
    TRACKS = "tracks"


class LibraryAlbumAttributes(ApiModel):
    artist_name: str = ""
    artwork: Artwork = Field(default_factory=Artwork)
    content_rating: ContentRating | None = None
    date_added: datetime | None = None
    name: str = ""
    play_params: PlayParameters | None = None
    release_date: YearOrDate | None = None
    track_count: int = 0
    genre_names: list[str] = Field(default_factory=list)


class LibraryAlbumRelationships(ContextModel):
    """
    Library album relationships.

    Attributes:
        catalog: The catalog album this library album was added from.
        tracks: Library songs and music videos of the album.
    """
    artists: Relationship[LibraryArtist] | None = None
    catalog: Relationship[Album] | None = None
    tracks: Relationship[Resource] | None = None


class LibraryAlbum(ResourceModel):
    type: Literal["library-albums"] = "library-albums"
    attributes: LibraryAlbumAttributes | None = None
    relationships: LibraryAlbumRelationships = Field(default_factory=LibraryAlbumRelationships)

    @classmethod
    def get(cls) -> LibraryAlbumRequestBuilder:
        return LibraryAlbumRequestBuilder()


class LibraryAlbumRequestBuilder(LibraryRequestBuilder[LibraryAlbum]):
    path = "albums"
    item_type = LibraryAlbum
