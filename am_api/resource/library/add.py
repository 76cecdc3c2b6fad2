"""
Adding catalog resources to the user's library.

    LibraryAddBuilder().add_resource(album).add_resource(song).send(client)

Resources are grouped by type into one `ids[<type>]=...` query pair each
and sent in a single request.
"""

from typing import TYPE_CHECKING, Hashable

from am_api.request.accumulator import FieldSetAccumulator
from am_api.request.builder import MusicRequestBuilder
from am_api.resource.base import ResourceModel, ensure_accepted
from am_api.resource.envelope import Resource

if TYPE_CHECKING:
    from am_api.client import ApiClient

LIBRARY_ADD_TYPES = frozenset({"albums", "artists", "music-videos", "playlists", "songs"})


class IdStorage(FieldSetAccumulator):
    """Resource ids grouped by resource type."""

    def add_resource(self, resource: ResourceModel) -> None:
        self.add(resource.type, resource.id)

    def format_key(self, key: Hashable) -> str:
        return f"ids[{key}]"


class LibraryAddBuilder(MusicRequestBuilder):
    """Single-use builder collecting catalog resources to add to the library."""

    def __init__(self) -> None:
        super().__init__()
        self._ids = IdStorage()

    def add_resource(self, resource: ResourceModel) -> "LibraryAddBuilder":
        """
        Queue a catalog resource. Adding the same resource twice sends it once.

        Raises:
            InvalidResourceTypeError: The resource is not a catalog album,
                                      artist, music video, playlist or song.
        """
        self._ensure_open()
        ensure_accepted(resource, LIBRARY_ADD_TYPES, "LibraryAddBuilder.add_resource")
        self._ids.add_resource(resource)
        return self

    def send(self, client: "ApiClient") -> list[Resource]:
        """
        Add the queued resources to the library.

        Returns:
            Whatever the server echoes back; usually empty (202 Accepted).
        """
        context = self._drain_context(client)
        query: list[tuple[str, str]] = [("representation", "ids")]
        self._ids.drain(query)
        context = context.with_query(*query)
        return self._fetch(client, "/v1/me/library", context, Resource, method="POST")
