"""
Listening history of the user.

All history endpoints are paginated and may return any resource type, so
each one yields Resource union members:

    for item in History.get().recently_played(client):
        if isinstance(item, Album):
            ...
"""

from typing import TYPE_CHECKING, Iterable, Iterator

from am_api.request.builder import DEFAULT_FETCH_LIMIT, MusicRequestBuilder
from am_api.resource.envelope import Resource
from am_api.resource.primitive import TrackType

if TYPE_CHECKING:
    from am_api.client import ApiClient


class History:
    """Entry point for history requests."""

    @staticmethod
    def get() -> "HistoryRequestBuilder":
        return HistoryRequestBuilder()


class HistoryRequestBuilder(MusicRequestBuilder):

    def _history(
        self,
        client: "ApiClient",
        endpoint: str,
        limit: int,
        offset: int,
        *extra: tuple[str, str]
    ) -> Iterator[Resource]:
        context = self._drain_context(client).with_query(("limit", limit), *extra)
        return self._paginate(client, endpoint, context, offset, Resource)

    def heavy_rotation(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[Resource]:
        """Content the user played most often recently."""
        return self._history(client, "/v1/me/history/heavy-rotation", limit, offset)

    def recently_played(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[Resource]:
        """Recently played albums, playlists and stations."""
        return self._history(client, "/v1/me/recent/played", limit, offset)

    def recently_played_tracks(
        self,
        client: "ApiClient",
        types: Iterable[TrackType],
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[Resource]:
        """
        Recently played tracks.

        Args:
            types: Track types to return (songs, music videos, and their
                   library counterparts).
        """
        types_value = ",".join(str(track_type) for track_type in types)
        return self._history(client, "/v1/me/recent/played/tracks", limit, offset, ("types", types_value))

    def recently_played_stations(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[Resource]:
        return self._history(client, "/v1/me/recent/radio-stations", limit, offset)

    def recently_added_to_library(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0
    ) -> Iterator[Resource]:
        return self._history(client, "/v1/me/library/recently-added", limit, offset)
