"""Personal recommendations of the user."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Literal

from pydantic import Field

from am_api.request.builder import DEFAULT_FETCH_LIMIT, ResourceRequestBuilder
from am_api.request.context import ApiModel, ContextModel, RequestContext
from am_api.request.fields import RelationshipField, for_object
from am_api.resource.base import ResourceModel
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.envelope import Resource


class PersonalRecommendationKind(str, Enum):
    MUSIC_RECOMMENDATIONS = "music-recommendations"
    RECENTLY_PLAYED = "recently-played"
    UNKNOWN = "unknown"


@for_object("personal-recommendation")
class PersonalRecommendationRelationshipType(RelationshipField):
    CONTENTS = "contents"


class DisplayString(ApiModel):
    string_for_display: str = ""


class PersonalRecommendationAttributes(ApiModel):
    """
    Recommendation attributes.

    Attributes:
        kind: Type of recommendation.
        next_update_date: When the recommendation will be refreshed.
        reason: Why the recommendation was made.
        resource_types: Resource types the recommendation contains.
        title: Localized title of the recommendation.
    """
    kind: PersonalRecommendationKind = PersonalRecommendationKind.UNKNOWN
    next_update_date: datetime | None = None
    reason: DisplayString | None = None
    resource_types: list[str] = Field(default_factory=list)
    title: DisplayString | None = None


class PersonalRecommendationRelationships(ContextModel):
    contents: Relationship[Resource] | None = None


class PersonalRecommendation(ResourceModel):
    type: Literal["personal-recommendation"] = "personal-recommendation"
    attributes: PersonalRecommendationAttributes | None = None
    relationships: PersonalRecommendationRelationships = Field(
        default_factory=PersonalRecommendationRelationships
    )

    @classmethod
    def get(cls) -> PersonalRecommendationRequestBuilder:
        return PersonalRecommendationRequestBuilder()


class PersonalRecommendationRequestBuilder(ResourceRequestBuilder[PersonalRecommendation]):
    path = "recommendations"
    item_type = PersonalRecommendation

    def _base_path(self, context: RequestContext) -> str:
        return f"/v1/me/{self.path}"

    def all(
        self,
        client: ApiClient,
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[PersonalRecommendation]:
        """Lazily iterate the user's default recommendations."""
        return self._all(client, limit, offset)
