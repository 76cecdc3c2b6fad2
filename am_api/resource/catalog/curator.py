"""
Catalog curators.

Curator is a third party (e.g. a magazine) that publishes playlists;
AppleCurator is a curator run by Apple, such as a genre team or a radio show.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import RelationshipField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import EditorialNotes
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.resource.catalog.playlist import Playlist


class CuratorKind(str, Enum):
    CURATOR = "Curator"
    GENRE = "Genre"
    SHOW = "Show"


@for_object("apple-curators")
class AppleCuratorRelationshipType(RelationshipField):
    PLAYLISTS = "playlists"


@for_object("curators")
class CuratorRelationshipType(RelationshipField):
    PLAYLISTS = "playlists"


class AppleCuratorAttributes(ApiModel):
    """
    Apple curator attributes.

    Attributes:
        kind: What the curator represents.
        show_host_name: Host of the show, for curators of kind Show.
    """
    artwork: Artwork = Field(default_factory=Artwork)
    editorial_notes: EditorialNotes | None = None
    kind: CuratorKind | None = None
    name: str = ""
    short_name: str | None = None
    show_host_name: str | None = None
    url: str = ""


class CuratorAttributes(ApiModel):
    artwork: Artwork = Field(default_factory=Artwork)
    editorial_notes: EditorialNotes | None = None
    name: str = ""
    url: str = ""


class CuratorRelationships(ContextModel):
    playlists: Relationship[Playlist] | None = None


class AppleCurator(ResourceModel):
    type: Literal["apple-curators"] = "apple-curators"
    attributes: AppleCuratorAttributes | None = None
    relationships: CuratorRelationships = Field(default_factory=CuratorRelationships)

    @classmethod
    def get(cls) -> AppleCuratorRequestBuilder:
        return AppleCuratorRequestBuilder()


class Curator(ResourceModel):
    type: Literal["curators"] = "curators"
    attributes: CuratorAttributes | None = None
    relationships: CuratorRelationships = Field(default_factory=CuratorRelationships)

    @classmethod
    def get(cls) -> CuratorRequestBuilder:
        return CuratorRequestBuilder()


class AppleCuratorRequestBuilder(CatalogRequestBuilder[AppleCurator]):
    path = "apple-curators"
    item_type = AppleCurator


class CuratorRequestBuilder(CatalogRequestBuilder[Curator]):
    path = "curators"
    item_type = Curator
