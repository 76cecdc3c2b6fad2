"""
Field-name enums for extensions, relationships and views.

Every resource exposes enums listing the names that can be passed to
`extend`, `include`/`include_lazy` and `view` on its request builder.
Each enum is bound to the wire name of the resource it belongs to with
the `for_object` decorator:

    @for_object("songs")
    class SongRelationshipType(RelationshipField):
        ALBUMS = "albums"
        MUSIC_VIDEOS = "music-videos"

    str(SongRelationshipType.MUSIC_VIDEOS)          # "music-videos"
    SongRelationshipType.MUSIC_VIDEOS.object_name  # "songs"
"""

from enum import Enum
from typing import Callable, TypeVar

F = TypeVar("F", bound="ResourceField")


class ResourceField(str, Enum):
    """Base for all field-name enums. Renders as its wire value."""

    def __str__(self) -> str:
        return self.value

    @property
    def object_name(self) -> str:
        name = getattr(type(self), "_object_name", None)
        if name is None:
            raise TypeError(f"{type(self).__name__} is not bound to a resource object")
        return name


class ExtensionField(ResourceField):
    """Attribute that is only returned when requested with extend[...]."""


class RelationshipField(ResourceField):
    """Relationship that can be requested with include[...] or relate[...]."""


class ViewField(ResourceField):
    """View that can be requested with views[...]."""


def for_object(object_name: str) -> Callable[[type[F]], type[F]]:
    """Bind a field-name enum to the resource wire type it applies to."""
    def decorate(cls: type[F]) -> type[F]:
        cls._object_name = object_name
        return cls
    return decorate
