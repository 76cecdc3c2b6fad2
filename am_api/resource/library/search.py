"""Search in the user's library."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable

from pydantic import Field

from am_api.request.builder import MusicRequestBuilder
from am_api.request.context import ContextModel, propagate_context
from am_api.request.response import ResultsResponse, decode_response
from am_api.resource.catalog.search import search_term
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.library.album import LibraryAlbum
    from am_api.resource.library.artist import LibraryArtist
    from am_api.resource.library.music_video import LibraryMusicVideo
    from am_api.resource.library.playlist import LibraryPlaylist
    from am_api.resource.library.song import LibrarySong


class LibrarySearchType(str, Enum):
    LIBRARY_ALBUMS = "library-albums"
    LIBRARY_ARTISTS = "library-artists"
    LIBRARY_MUSIC_VIDEOS = "library-music-videos"
    LIBRARY_PLAYLISTS = "library-playlists"
    LIBRARY_SONGS = "library-songs"

    def __str__(self) -> str:
        return self.value


class LibrarySearchResults(ContextModel):
    library_albums: Relationship[LibraryAlbum] | None = Field(default=None, alias="library-albums")
    library_artists: Relationship[LibraryArtist] | None = Field(default=None, alias="library-artists")
    library_music_videos: Relationship[LibraryMusicVideo] | None = Field(
        default=None, alias="library-music-videos"
    )
    library_playlists: Relationship[LibraryPlaylist] | None = Field(default=None, alias="library-playlists")
    library_songs: Relationship[LibrarySong] | None = Field(default=None, alias="library-songs")


class LibrarySearch:
    """Entry point for library search requests."""

    @staticmethod
    def search() -> LibrarySearchRequestBuilder:
        return LibrarySearchRequestBuilder()


class LibrarySearchRequestBuilder(MusicRequestBuilder):

    def search(
        self,
        client: ApiClient,
        types: Iterable[LibrarySearchType],
        term: str
    ) -> LibrarySearchResults:
        """Search the user's library for `term` among `types`."""
        context = self._drain_context(client).with_query(
            ("types", ",".join(str(search_type) for search_type in types)),
            ("term", search_term(term))
        )
        response = client.get("/v1/me/library/search", context.query)
        results = decode_response(response, ResultsResponse[LibrarySearchResults]).results
        propagate_context(results, context)
        return results
