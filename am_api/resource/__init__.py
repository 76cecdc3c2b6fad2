"""
Typed Apple Music resources.

Components:
    - envelope: The Resource union, discriminated on `type`
    - catalog/: Catalog resources and catalog search
    - library/: Library resources, library search and LibraryAddBuilder
    - genre, rating, storefront, personal_recommendation, history
    - relationship / view: Paginated containers embedded in resources
    - artwork / primitive / attributes: Shared value types

Resource models reference each other in cycles (an album has artists, an
artist has albums), so cross-module annotations are only resolved once every
model is defined. Importing this package does that; import resource models
from here or from a submodule, never before this package has loaded.
"""

from am_api.request.context import ApiModel
from am_api.resource.artwork import Artwork, ArtworkImageFormat, HexColor
from am_api.resource.attributes import DescriptionAttribute, TitleOnlyAttribute
from am_api.resource.base import ResourceHeader, ResourceModel, ensure_accepted, thin_reference
from am_api.resource.envelope import RESOURCE_TYPES, Resource
from am_api.resource.catalog import *  # noqa: F401,F403
from am_api.resource.catalog import __all__ as _catalog_all
from am_api.resource.genre import Genre, GenreAttributesExtension
from am_api.resource.history import History
from am_api.resource.library import *  # noqa: F401,F403
from am_api.resource.library import __all__ as _library_all
from am_api.resource.library.add import LIBRARY_ADD_TYPES, LibraryAddBuilder
from am_api.resource.personal_recommendation import (
    PersonalRecommendation,
    PersonalRecommendationKind,
    PersonalRecommendationRelationshipType,
)
from am_api.resource.primitive import (
    AudioVariant,
    ContentRating,
    EditorialNotes,
    PlayParameters,
    Preview,
    TrackType,
    YearOrDate,
)
from am_api.resource.rating import RATING_TYPES, Rating, RatingRelationshipType, RatingType
from am_api.resource.relationship import Relationship
from am_api.resource.storefront import ExplicitContentPolicy, Storefront
from am_api.resource.view import View


def _rebuild_models() -> None:
    """Resolve the deferred annotations of every model, including generic parametrizations."""
    namespace = {model.__name__: model for model in RESOURCE_TYPES.values()}
    namespace["Resource"] = Resource

    while True:
        rebuilt = 0
        pending = [ApiModel]
        while pending:
            model = pending.pop()
            pending.extend(model.__subclasses__())
            if not model.__pydantic_complete__:
                # _types_namespace is private pydantic API; setup.py pins the tested 2.10-2.12 range
                model.model_rebuild(force=True, _types_namespace=namespace)
                rebuilt += 1
        # Rebuilding can create new generic parametrizations; walk again until none are left
        if rebuilt == 0:
            return


_rebuild_models()

__all__ = [
    *_catalog_all,
    *_library_all,
    # Union
    "Resource",
    "RESOURCE_TYPES",
    # Base
    "ResourceHeader",
    "ResourceModel",
    "ensure_accepted",
    "thin_reference",
    # Containers
    "Relationship",
    "View",
    # Values
    "Artwork",
    "ArtworkImageFormat",
    "HexColor",
    "DescriptionAttribute",
    "TitleOnlyAttribute",
    "AudioVariant",
    "ContentRating",
    "EditorialNotes",
    "PlayParameters",
    "Preview",
    "TrackType",
    "YearOrDate",
    # Other resources
    "Genre",
    "GenreAttributesExtension",
    "History",
    "LibraryAddBuilder",
    "LIBRARY_ADD_TYPES",
    "PersonalRecommendation",
    "PersonalRecommendationKind",
    "PersonalRecommendationRelationshipType",
    "Rating",
    "RatingRelationshipType",
    "RatingType",
    "RATING_TYPES",
    "Storefront",
    "ExplicitContentPolicy",
]
