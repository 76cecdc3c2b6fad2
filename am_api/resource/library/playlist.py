"""
Library playlists and playlist folders.

Library playlists are the only library resources that can be written:

    playlist = (
        LibraryPlaylist.create("Road trip")
        .description("Songs for the drive")
        .tracks([song, library_song])
        .create(client)
    )
    playlist.add_tracks(client, [another_song])
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Literal

from pydantic import Field

from am_api.request.builder import LibraryRequestBuilder, MusicRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import ExtensionField, RelationshipField, for_object
from am_api.request.response import raise_for_error
from am_api.resource.artwork import Artwork
from am_api.resource.attributes import DescriptionAttribute
from am_api.resource.base import ResourceModel, ensure_accepted, thin_reference
from am_api.resource.primitive import PlayParameters, TrackType
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.playlist import Playlist
    from am_api.resource.envelope import Resource

# Resource types that can be added to a library playlist
PLAYLIST_TRACK_TYPES = frozenset(track_type.value for track_type in TrackType)

PLAYLIST_FOLDER_TYPE = "library-playlist-folders"


class LibraryTrackType(str, Enum):
    MUSIC_VIDEOS = "library-music-videos"
    SONGS = "library-songs"


@for_object("library-playlists")
class LibraryPlaylistAttributesExtension(ExtensionField):
    TRACK_TYPES = "trackTypes"


@for_object("library-playlists")
class LibraryPlaylistRelationshipType(RelationshipField):
    CATALOG = "catalog"
    TRACKS = "tracks"


@for_object("library-playlist-folders")
class LibraryPlaylistFolderRelationshipType(RelationshipField):
    CHILDREN = "children"
    PARENT = "parent"


class LibraryPlaylistAttributes(ApiModel):
    """
    Library playlist attributes.

    Attributes:
        can_edit: Whether tracks can be added to the playlist.
        has_catalog: Whether the playlist has a catalog counterpart.
        track_types: (Extended) Resource types of the playlist's tracks.
    """
    artwork: Artwork | None = None
    can_edit: bool = False
    date_added: datetime | None = None
    description: DescriptionAttribute | None = None
    has_catalog: bool = False
    name: str = ""
    play_params: PlayParameters | None = None
    is_public: bool = False
    track_types: list[LibraryTrackType] | None = None


class LibraryPlaylistRelationships(ContextModel):
    catalog: Relationship[Playlist] | None = None
    tracks: Relationship[Resource] | None = None


class LibraryPlaylist(ResourceModel):
    type: Literal["library-playlists"] = "library-playlists"
    attributes: LibraryPlaylistAttributes | None = None
    relationships: LibraryPlaylistRelationships = Field(default_factory=LibraryPlaylistRelationships)

    @classmethod
    def get(cls) -> LibraryPlaylistRequestBuilder:
        return LibraryPlaylistRequestBuilder()

    @classmethod
    def create(cls, name: str) -> LibraryPlaylistCreateBuilder:
        """Start building a new library playlist called `name`."""
        return LibraryPlaylistCreateBuilder(name)

    def add_tracks(self, client: ApiClient, tracks: Iterable[ResourceModel]) -> None:
        """
        Append tracks to this playlist.

        Every track is checked before anything is sent.

        Raises:
            InvalidResourceTypeError: A track is not a song or music video
                                      (catalog or library).
        """
        data = []
        for track in tracks:
            ensure_accepted(track, PLAYLIST_TRACK_TYPES, "LibraryPlaylist.add_tracks")
            data.append(thin_reference(track))

        response = client.post(f"/v1/me/library/playlists/{self.id}/tracks", json={"data": data})
        raise_for_error(response)


class LibraryPlaylistRequestBuilder(LibraryRequestBuilder[LibraryPlaylist]):
    path = "playlists"
    item_type = LibraryPlaylist


class LibraryPlaylistCreateBuilder(MusicRequestBuilder):
    """Builder for a new library playlist. Sent once with create()."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name
        self._description: str | None = None
        self._public = False
        self._tracks: list[dict[str, str]] | None = None
        self._parent: dict[str, str] | None = None

    def description(self, description: str) -> "LibraryPlaylistCreateBuilder":
        self._ensure_open()
        self._description = description
        return self

    def public(self, public: bool) -> "LibraryPlaylistCreateBuilder":
        self._ensure_open()
        self._public = public
        return self

    def tracks(self, resources: Iterable[ResourceModel]) -> "LibraryPlaylistCreateBuilder":
        """
        Add initial tracks.

        Raises:
            InvalidResourceTypeError: A resource is not a song or music video.
        """
        self._ensure_open()
        # Nothing is kept unless every resource is accepted
        accepted = []
        for resource in resources:
            ensure_accepted(resource, PLAYLIST_TRACK_TYPES, "LibraryPlaylist.create")
            accepted.append(thin_reference(resource))

        if self._tracks is None:
            self._tracks = []
        self._tracks.extend(accepted)
        return self

    def parent_folder(self, folder_id: str) -> "LibraryPlaylistCreateBuilder":
        """Create the playlist inside the library playlist folder `folder_id`."""
        self._ensure_open()
        self._parent = {"id": folder_id, "type": PLAYLIST_FOLDER_TYPE}
        return self

    def _body(self) -> dict[str, Any]:
        attributes: dict[str, Any] = {"name": self._name, "isPublic": self._public}
        if self._description is not None:
            attributes["description"] = self._description

        relationships: dict[str, Any] = {}
        if self._tracks is not None:
            relationships["tracks"] = {"data": self._tracks}
        if self._parent is not None:
            relationships["parent"] = {"data": [self._parent]}

        return {"attributes": attributes, "relationships": relationships}

    def create(self, client: ApiClient) -> LibraryPlaylist | None:
        """Create the playlist. Returns it as the server sent it back."""
        context = self._drain_context(client)
        items = self._fetch(
            client,
            "/v1/me/library/playlists",
            context,
            LibraryPlaylist,
            method="POST",
            json=self._body()
        )
        return items[0] if items else None


class LibraryPlaylistFolderAttributes(ApiModel):
    date_added: datetime | None = None
    name: str = ""


class LibraryPlaylistFolderRelationships(ContextModel):
    """
    Playlist folder relationships.

    Attributes:
        children: Playlists and folders inside the folder.
        parent: Folder containing this folder.
    """
    children: Relationship[Resource] | None = None
    parent: Relationship[LibraryPlaylistFolder] | None = None


class LibraryPlaylistFolder(ResourceModel):
    type: Literal["library-playlist-folders"] = "library-playlist-folders"
    attributes: LibraryPlaylistFolderAttributes | None = None
    relationships: LibraryPlaylistFolderRelationships = Field(
        default_factory=LibraryPlaylistFolderRelationships
    )

    @classmethod
    def get(cls) -> LibraryPlaylistFolderRequestBuilder:
        return LibraryPlaylistFolderRequestBuilder()


class LibraryPlaylistFolderRequestBuilder(LibraryRequestBuilder[LibraryPlaylistFolder]):
    path = "playlist-folders"
    item_type = LibraryPlaylistFolder
