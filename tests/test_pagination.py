# tests/test_pagination.py
"""Test offset pagination and next-link continuation"""

from itertools import islice

import pytest

from am_api.core.exceptions import MissingContextError, MusicApiError
from am_api.resource import (
    Album,
    AlbumRelationshipType,
    Artist,
    ArtistViewType,
    Genre,
    History,
    LibraryAlbum,
    LibrarySong,
    Playlist,
    Relationship,
    Song,
    StationGenre,
    Storefront,
    TrackType,
    View,
)

from conftest import BASE_URL, album_payload, library_song_payload, query_value, song_payload


def library_page(start, count):
    related = {"href": "/v1/me/library/songs/x/albums", "data": []}
    return [library_song_payload(f"i.{n}", albums=related) for n in range(start, start + count)]


class TestPaginate:
    """Test the offset pagination driver"""

    def test_walks_all_pages(self, client, session):
        """Test that offsets advance by items received until an empty page"""
        session.queue_data(library_page(0, 21), library_page(21, 21), library_page(42, 5), [])

        songs = list(LibrarySong.get().all(client))

        assert len(songs) == 47
        assert [song.id for song in songs[:2]] == ["i.0", "i.1"]
        assert songs[-1].id == "i.46"
        assert [query_value(call, "offset") for call in session.calls] == ["0", "21", "42", "47"]
        assert all(call.url == BASE_URL + "/v1/me/library/songs" for call in session.calls)
        assert all(query_value(call, "limit") == "21" for call in session.calls)

    def test_query_pairs(self, client, session):
        """Test that each page sends the base query plus offset"""
        session.queue_data([])

        list(LibrarySong.get().all(client, limit=50, offset=100))

        assert session.calls[0].params == [
            ("art[url]", "f"),
            ("l", "en-US"),
            ("limit", "50"),
            ("offset", "100"),
        ]

    def test_lazy(self, client, session):
        """Test that nothing is requested before iteration and early stop stops requests"""
        session.queue_data(library_page(0, 21), library_page(21, 21))

        iterator = LibrarySong.get().all(client)
        assert session.calls == []

        first = list(islice(iterator, 5))

        assert len(first) == 5
        assert len(session.calls) == 1

    def test_short_page_is_not_the_end(self, client, session):
        """Test that a page shorter than the limit does not end iteration"""
        session.queue_data(library_page(0, 3), library_page(3, 2), [])

        songs = list(LibrarySong.get().all(client, limit=10))

        assert len(songs) == 5
        assert len(session.calls) == 3

    def test_items_carry_base_context(self, client, session):
        """Test that yielded items hold the context without the offset pair"""
        session.queue_data(library_page(0, 2), [])

        songs = list(LibrarySong.get().all(client, limit=2))

        context = songs[0].relationships.albums.context
        assert context is songs[1].relationships.albums.context
        assert ("limit", "2") in context.query
        assert all(key != "offset" for key, _ in context.query)

    def test_error_mid_stream(self, client, session):
        """Test that already yielded items stay with the caller when a later page fails"""
        session.queue_data(library_page(0, 21))
        session.queue((500, {"errors": [{"id": "x", "title": "Upstream Error", "status": "500", "code": "50000"}]}))

        received = []
        with pytest.raises(MusicApiError) as exc_info:
            for song in LibrarySong.get().all(client):
                received.append(song)

        assert len(received) == 21
        assert exc_info.value.status_code == 500

    def test_genre_all(self, client, session):
        """Test paginated catalog listing"""
        session.queue_data([{"id": "34", "type": "genres", "attributes": {"name": "Music"}}], [])

        genres = list(Genre.get().all(client))

        assert genres[0].attributes.name == "Music"
        assert session.calls[0].url == BASE_URL + "/v1/catalog/us/genres"

    @pytest.mark.parametrize("model, endpoint", [
        (StationGenre, "/v1/catalog/us/station-genres"),
        (Storefront, "/v1/storefronts"),
    ])
    def test_other_listings(self, client, session, model, endpoint):
        """Test paginated station genre and storefront listings"""
        session.queue_data([])

        assert list(model.get().all(client)) == []
        assert session.calls[0].url == BASE_URL + endpoint


class TestHistory:
    """Test history endpoints"""

    def test_recently_played_mixed_types(self, client, session):
        """Test that history yields Resource union members"""
        session.queue_data(
            [album_payload("1"), {"id": "pl.1", "type": "playlists", "attributes": {"name": "Mix"}}],
            [],
        )

        items = list(History.get().recently_played(client, limit=10))

        assert isinstance(items[0], Album)
        assert isinstance(items[1], Playlist)
        assert session.calls[0].url == BASE_URL + "/v1/me/recent/played"

    def test_recently_played_tracks_types(self, client, session):
        """Test the track type filter"""
        session.queue_data([song_payload("1")], [])

        items = list(History.get().recently_played_tracks(client, [TrackType.SONG, TrackType.LIBRARY_SONG]))

        assert isinstance(items[0], Song)
        assert query_value(session.calls[0], "types") == "songs,library-songs"
        assert session.calls[0].url == BASE_URL + "/v1/me/recent/played/tracks"

    @pytest.mark.parametrize("method, endpoint", [
        ("heavy_rotation", "/v1/me/history/heavy-rotation"),
        ("recently_played_stations", "/v1/me/recent/radio-stations"),
        ("recently_added_to_library", "/v1/me/library/recently-added"),
    ])
    def test_endpoints(self, client, session, method, endpoint):
        """Test history endpoint paths"""
        session.queue_data([])

        assert list(getattr(History.get(), method)(client)) == []
        assert session.calls[0].url == BASE_URL + endpoint


class TestContinuation:
    """Test relationship and view iteration"""

    def test_follows_next(self, client, session, sample_album_data):
        """Test that held items come first, then next pages are fetched"""
        session.queue_data([sample_album_data])
        album = Album.get().include(AlbumRelationshipType.TRACKS).one(client, "1")

        session.queue((200, {"href": "/v1/catalog/us/albums/1/tracks", "data": [song_payload("12")]}))
        tracks = list(album.relationships.tracks.iter(client))

        assert [track.id for track in tracks] == ["10", "11", "12"]
        continuation = session.calls[1]
        assert continuation.url == BASE_URL + "/v1/catalog/us/albums/1/tracks?offset=2"
        assert continuation.params == [
            ("art[url]", "f"),
            ("l", "en-US"),
            ("include[albums]", "tracks"),
        ]

    def test_lazy_continuation(self, client, session, sample_album_data):
        """Test that the next page is only requested after held items are consumed"""
        session.queue_data([sample_album_data])
        album = Album.get().one(client, "1")

        iterator = album.relationships.tracks.iter(client)
        assert next(iterator).id == "10"
        assert next(iterator).id == "11"
        assert len(session.calls) == 1

    def test_no_next(self, client, session):
        """Test a relationship that fits in one page"""
        session.queue_data([album_payload("1", tracks={"data": [song_payload("10")]})])
        album = Album.get().one(client, "1")

        assert [track.id for track in album.relationships.tracks.iter(client)] == ["10"]
        assert len(session.calls) == 1

    def test_missing_context(self, client, session):
        """Test that hand-built containers cannot be iterated"""
        with pytest.raises(MissingContextError):
            Relationship[Song](data=[]).iter(client)
        with pytest.raises(MissingContextError):
            View().iter(client)
        assert session.calls == []

    def test_view_iteration(self, client, session):
        """Test a view with a title and a continuation page"""
        artist = {
            "id": "5",
            "type": "artists",
            "attributes": {"name": "Artist"},
            "views": {
                "top-songs": {
                    "href": "/v1/catalog/us/artists/5/view/top-songs",
                    "next": "/v1/catalog/us/artists/5/view/top-songs?offset=1",
                    "attributes": {"title": "Top Songs"},
                    "data": [song_payload("1")],
                },
            },
        }
        session.queue_data([artist])
        session.queue((200, {"data": [song_payload("2")]}))

        result = Artist.get().view(ArtistViewType.TOP_SONGS).one(client, "5")
        top_songs = result.views.top_songs

        assert top_songs.attributes.title == "Top Songs"
        assert [song.id for song in top_songs.iter(client)] == ["1", "2"]
        assert query_value(session.calls[0], "views[artists]") == "top-songs"

    def test_library_relationship_error(self, client, session):
        """Test that a failing continuation raises from the iterator"""
        related = {
            "href": "/v1/me/library/albums/l.1/tracks",
            "next": "/v1/me/library/albums/l.1/tracks?offset=1",
            "data": [library_song_payload("i.1")],
        }
        session.queue_data([{"id": "l.1", "type": "library-albums", "relationships": {"tracks": related}}])
        session.queue((404, {"errors": [{"title": "Not Found", "status": "404"}]}))

        album = LibraryAlbum.get().one(client, "l.1")
        iterator = album.relationships.tracks.iter(client)

        assert next(iterator).id == "i.1"
        with pytest.raises(MusicApiError) as exc_info:
            next(iterator)
        assert exc_info.value.is_not_found
