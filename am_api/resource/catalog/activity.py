"""Catalog activity, e.g. "Party" or "Workout"."""

from __future__ import annotations

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


@for_object("activities")
class ActivityRelationshipType(RelationshipField):
    PLAYLISTS = "playlists"


class ActivityAttributes(ApiModel):
    artwork: Artwork = Field(default_factory=Artwork)
    editorial_notes: EditorialNotes | None = None
    name: str = ""
    url: str = ""


class ActivityRelationships(ContextModel):
    playlists: Relationship[Playlist] | None = None


class Activity(ResourceModel):
    type: Literal["activities"] = "activities"
    attributes: ActivityAttributes | None = None
    relationships: ActivityRelationships = Field(default_factory=ActivityRelationships)

    @classmethod
    def get(cls) -> ActivityRequestBuilder:
        return ActivityRequestBuilder()


class ActivityRequestBuilder(CatalogRequestBuilder[Activity]):
    path = "activities"
    item_type = Activity
