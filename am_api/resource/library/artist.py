"""Library artist."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import LibraryRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import RelationshipField, for_object
from am_api.resource.base import ResourceModel
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.library.album import LibraryAlbum


@for_object("library-artists")
class LibraryArtistRelationshipType(RelationshipField):
    ALBUMS = "albums"
    CATALOG = "catalog"


class LibraryArtistAttributes(ApiModel):
    name: str = ""


class LibraryArtistRelationships(ContextModel):
    albums: Relationship[LibraryAlbum] | None = None
    catalog: Relationship[Artist] | None = None


class LibraryArtist(ResourceModel):
    type: Literal["library-artists"] = "library-artists"
    attributes: LibraryArtistAttributes | None = None
    relationships: LibraryArtistRelationships = Field(default_factory=LibraryArtistRelationships)

    @classmethod
    def get(cls) -> LibraryArtistRequestBuilder:
        return LibraryArtistRequestBuilder()


class LibraryArtistRequestBuilder(LibraryRequestBuilder[LibraryArtist]):
    path = "artists"
    item_type = LibraryArtist
