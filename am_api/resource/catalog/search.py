"""
Catalog search.

    results = CatalogSearch.search().search(
        client, [CatalogSearchType.SONGS, CatalogSearchType.ALBUMS], "daft punk"
    )
    for song in results.songs.iter(client):
        ...

Every result type is a Relationship, so each can be paged further with
iter() independently of the others.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable

from pydantic import Field

from am_api.request.builder import MusicRequestBuilder
from am_api.request.context import ApiModel, ContextModel, propagate_context
from am_api.request.response import ResultsResponse, decode_response
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.activity import Activity
    from am_api.resource.catalog.album import Album
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.catalog.curator import AppleCurator, Curator
    from am_api.resource.catalog.music_video import MusicVideo
    from am_api.resource.catalog.playlist import Playlist
    from am_api.resource.catalog.record_label import RecordLabel
    from am_api.resource.catalog.song import Song
    from am_api.resource.catalog.station import Station
    from am_api.resource.envelope import Resource


class CatalogSearchType(str, Enum):
    ACTIVITIES = "activities"
    ALBUMS = "albums"
    APPLE_CURATORS = "apple-curators"
    CURATORS = "curators"
    ARTISTS = "artists"
    MUSIC_VIDEOS = "music-videos"
    PLAYLISTS = "playlists"
    RECORD_LABELS = "record-labels"
    SONGS = "songs"
    STATIONS = "stations"

    def __str__(self) -> str:
        return self.value


class SuggestionKind(str, Enum):
    TERMS = "terms"
    TOP_RESULTS = "topResults"

    def __str__(self) -> str:
        return self.value


class CatalogSearchResults(ContextModel):
    """Search results, one relationship per requested type. Types with no match are None."""

    activities: Relationship[Activity] | None = None
    albums: Relationship[Album] | None = None
    apple_curators: Relationship[AppleCurator] | None = Field(default=None, alias="apple-curators")
    curators: Relationship[Curator] | None = None
    artists: Relationship[Artist] | None = None
    music_videos: Relationship[MusicVideo] | None = Field(default=None, alias="music-videos")
    playlists: Relationship[Playlist] | None = None
    record_labels: Relationship[RecordLabel] | None = Field(default=None, alias="record-labels")
    songs: Relationship[Song] | None = None
    stations: Relationship[Station] | None = None


class CatalogSearchSuggestion(ContextModel):
    """
    One search suggestion.

    Attributes:
        kind: Kind of suggestion.
        search_term: Term to send as a search, for "terms" suggestions.
        display_term: Term to display, for "terms" suggestions.
        content: Suggested resource, for "topResults" suggestions.
    """
    kind: SuggestionKind
    search_term: str = ""
    display_term: str = ""
    content: Resource | None = None


class CatalogSearchHints(ApiModel):
    terms: list[str] = Field(default_factory=list)


class CatalogSearchSuggestions(ContextModel):
    suggestions: list[CatalogSearchSuggestion] = Field(default_factory=list)


def _join(values: Iterable[Enum]) -> str:
    return ",".join(str(value) for value in values)


def search_term(term: str) -> str:
    """Apple Music expects spaces in search terms as '+'."""
    return term.replace(" ", "+")


class CatalogSearch:
    """Entry point for catalog search requests."""

    @staticmethod
    def search() -> CatalogSearchRequestBuilder:
        return CatalogSearchRequestBuilder()


class CatalogSearchRequestBuilder(MusicRequestBuilder):

    def _endpoint(self, storefront: str, suffix: str = "") -> str:
        return f"/v1/catalog/{storefront}/search{suffix}"

    def search(
        self,
        client: ApiClient,
        types: Iterable[CatalogSearchType],
        term: str
    ) -> CatalogSearchResults:
        """
        Search the catalog.

        Args:
            types: Resource types to search for.
            term: Search term.
        """
        context = self._drain_context(client).with_query(
            ("types", _join(types)),
            ("term", search_term(term))
        )
        response = client.get(self._endpoint(context.storefront), context.query)
        results = decode_response(response, ResultsResponse[CatalogSearchResults]).results
        propagate_context(results, context)
        return results

    def search_hints(self, client: ApiClient, term: str, limit: int) -> list[str]:
        """Fetch search term completions for `term`."""
        context = self._drain_context(client).with_query(
            ("limit", limit),
            ("term", search_term(term))
        )
        response = client.get(self._endpoint(context.storefront, "/hints"), context.query)
        return decode_response(response, ResultsResponse[CatalogSearchHints]).results.terms

    def suggestions(
        self,
        client: ApiClient,
        kinds: Iterable[SuggestionKind],
        types: Iterable[CatalogSearchType],
        term: str,
        limit: int
    ) -> list[CatalogSearchSuggestion]:
        """Fetch search suggestions (terms and/or top results) for `term`."""
        context = self._drain_context(client).with_query(
            ("types", _join(types)),
            ("kinds", _join(kinds)),
            ("term", search_term(term)),
            ("limit", limit)
        )
        response = client.get(self._endpoint(context.storefront, "/suggestions"), context.query)
        suggestions = decode_response(response, ResultsResponse[CatalogSearchSuggestions]).results.suggestions
        propagate_context(suggestions, context)
        return suggestions
