"""Catalog record label."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import ViewField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.attributes import DescriptionAttribute, TitleOnlyAttribute
from am_api.resource.base import ResourceModel
from am_api.resource.view import View

if TYPE_CHECKING:
    from am_api.resource.catalog.album import Album


@for_object("record-labels")
class RecordLabelViewType(ViewField):
    LATEST_RELEASES = "latest-releases"
    TOP_RELEASES = "top-releases"


class RecordLabelAttributes(ApiModel):
    artwork: Artwork = Field(default_factory=Artwork)
    description: DescriptionAttribute | None = None
    name: str = ""
    url: str = ""


class RecordLabelViews(ContextModel):
    latest_releases: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="latest-releases")
    top_releases: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="top-releases")


class RecordLabel(ResourceModel):
    """Catalog record label."""

    type: Literal["record-labels"] = "record-labels"
    attributes: RecordLabelAttributes | None = None
    views: RecordLabelViews = Field(default_factory=RecordLabelViews)

    @classmethod
    def get(cls) -> RecordLabelRequestBuilder:
        return RecordLabelRequestBuilder()


class RecordLabelRequestBuilder(CatalogRequestBuilder[RecordLabel]):
    path = "record-labels"
    item_type = RecordLabel
