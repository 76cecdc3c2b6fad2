"""
Resources of the user's library.

Library resources live under /v1/me/library/ and need a media user token.
LibraryAddBuilder (am_api.resource.library.add) depends on the Resource
union and is exported from am_api.resource instead.
"""

from am_api.resource.library.album import LibraryAlbum, LibraryAlbumRelationshipType
from am_api.resource.library.artist import LibraryArtist, LibraryArtistRelationshipType
from am_api.resource.library.music_video import LibraryMusicVideo, LibraryMusicVideoRelationshipType
from am_api.resource.library.playlist import (
    LibraryPlaylist,
    LibraryPlaylistAttributesExtension,
    LibraryPlaylistCreateBuilder,
    LibraryPlaylistFolder,
    LibraryPlaylistFolderRelationshipType,
    LibraryPlaylistRelationshipType,
    LibraryTrackType,
)
from am_api.resource.library.search import LibrarySearch, LibrarySearchResults, LibrarySearchType
from am_api.resource.library.song import LibrarySong, LibrarySongRelationshipType

__all__ = [
    "LibraryAlbum",
    "LibraryAlbumRelationshipType",
    "LibraryArtist",
    "LibraryArtistRelationshipType",
    "LibraryMusicVideo",
    "LibraryMusicVideoRelationshipType",
    "LibraryPlaylist",
    "LibraryPlaylistAttributesExtension",
    "LibraryPlaylistCreateBuilder",
    "LibraryPlaylistFolder",
    "LibraryPlaylistFolderRelationshipType",
    "LibraryPlaylistRelationshipType",
    "LibraryTrackType",
    "LibrarySearch",
    "LibrarySearchResults",
    "LibrarySearchType",
    "LibrarySong",
    "LibrarySongRelationshipType",
]
