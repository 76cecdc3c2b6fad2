# tests/test_resources.py
"""Test search, library writes, ratings and recommendations"""

import pytest

from am_api.core.exceptions import BuilderConsumedError, InvalidResourceTypeError
from am_api.resource import (
    Album,
    Artist,
    CatalogSearch,
    CatalogSearchType,
    LibraryAddBuilder,
    LibraryPlaylist,
    LibrarySearch,
    LibrarySearchType,
    LibrarySong,
    PersonalRecommendation,
    PersonalRecommendationKind,
    Playlist,
    Rating,
    RatingType,
    Song,
    SuggestionKind,
)

from conftest import BASE_URL, album_payload, library_song_payload, query_value, song_payload


class TestCatalogSearch:
    """Test catalog search"""

    def test_search(self, client, session):
        """Test search query and typed results"""
        session.queue((200, {
            "results": {
                "songs": {
                    "href": "/v1/catalog/us/search?term=daft+punk&types=songs",
                    "next": "/v1/catalog/us/search?offset=1&term=daft+punk&types=songs",
                    "data": [song_payload("1", "One More Time")],
                },
            },
        }))

        results = CatalogSearch.search().search(
            client, [CatalogSearchType.SONGS, CatalogSearchType.ALBUMS], "daft punk"
        )

        call = session.calls[0]
        assert call.url == BASE_URL + "/v1/catalog/us/search"
        assert call.params == [
            ("art[url]", "f"),
            ("l", "en-US"),
            ("types", "songs,albums"),
            ("term", "daft+punk"),
        ]
        assert results.songs.data[0].attributes.name == "One More Time"
        assert results.albums is None
        assert results.songs.context.storefront == "us"

    def test_search_hints(self, client, session):
        """Test search term completions"""
        session.queue((200, {"results": {"terms": ["daft punk", "daft punk get lucky"]}}))

        terms = CatalogSearch.search().search_hints(client, "daft", 5)

        assert terms == ["daft punk", "daft punk get lucky"]
        assert session.calls[0].url == BASE_URL + "/v1/catalog/us/search/hints"
        assert query_value(session.calls[0], "limit") == "5"

    def test_suggestions(self, client, session):
        """Test term and top result suggestions"""
        session.queue((200, {
            "results": {
                "suggestions": [
                    {"kind": "terms", "searchTerm": "daft punk", "displayTerm": "daft punk"},
                    {"kind": "topResults", "content": album_payload("1", "Discovery")},
                ],
            },
        }))

        suggestions = CatalogSearch.search().suggestions(
            client, [SuggestionKind.TERMS, SuggestionKind.TOP_RESULTS], [CatalogSearchType.ALBUMS], "daft", 3
        )

        assert suggestions[0].kind == SuggestionKind.TERMS
        assert suggestions[0].search_term == "daft punk"
        assert isinstance(suggestions[1].content, Album)
        assert query_value(session.calls[0], "kinds") == "terms,topResults"
        assert query_value(session.calls[0], "types") == "albums"

    def test_library_search(self, client, session):
        """Test searching the library"""
        session.queue((200, {
            "results": {"library-songs": {"data": [library_song_payload("i.1")]}},
        }))

        results = LibrarySearch.search().search(client, [LibrarySearchType.LIBRARY_SONGS], "one more")

        assert isinstance(results.library_songs.data[0], LibrarySong)
        assert session.calls[0].url == BASE_URL + "/v1/me/library/search"
        assert query_value(session.calls[0], "term") == "one+more"


class TestLibraryAdd:
    """Test adding catalog resources to the library"""

    def test_send(self, client, session):
        """Test that ids are grouped by type and duplicates dropped"""
        session.queue((202, None))

        song = Song(id="1")
        result = (
            LibraryAddBuilder()
            .add_resource(song)
            .add_resource(Album(id="2"))
            .add_resource(song)
            .send(client)
        )

        call = session.calls[0]
        assert result == []
        assert call.method == "POST"
        assert call.url == BASE_URL + "/v1/me/library"
        assert call.params == [
            ("art[url]", "f"),
            ("l", "en-US"),
            ("representation", "ids"),
            ("ids[songs]", "1"),
            ("ids[albums]", "2"),
        ]

    def test_rejects_library_resources(self):
        """Test that library resources cannot be added again"""
        with pytest.raises(InvalidResourceTypeError) as exc_info:
            LibraryAddBuilder().add_resource(LibrarySong(id="i.1"))

        assert exc_info.value.details["type"] == "library-songs"

    def test_single_use(self, client, session):
        """Test that a sent add builder cannot be reused"""
        session.queue((202, None))
        builder = LibraryAddBuilder().add_resource(Playlist(id="pl.1"))
        builder.send(client)

        with pytest.raises(BuilderConsumedError):
            builder.add_resource(Song(id="1"))


class TestLibraryPlaylist:
    """Test library playlist writes"""

    def test_create(self, client, session):
        """Test the create request body"""
        session.queue_data([{
            "id": "p.new",
            "type": "library-playlists",
            "attributes": {"name": "Road trip", "canEdit": True, "isPublic": False},
        }])

        playlist = (
            LibraryPlaylist.create("Road trip")
            .description("Songs for the drive")
            .tracks([Song(id="1"), LibrarySong(id="i.2")])
            .parent_folder("p.folder")
            .create(client)
        )

        call = session.calls[0]
        assert playlist.id == "p.new"
        assert playlist.attributes.can_edit is True
        assert call.method == "POST"
        assert call.url == BASE_URL + "/v1/me/library/playlists"
        assert call.json == {
            "attributes": {"name": "Road trip", "isPublic": False, "description": "Songs for the drive"},
            "relationships": {
                "tracks": {"data": [{"id": "1", "type": "songs"}, {"id": "i.2", "type": "library-songs"}]},
                "parent": {"data": [{"id": "p.folder", "type": "library-playlist-folders"}]},
            },
        }

    def test_create_minimal(self, client, session):
        """Test a playlist with only a name"""
        session.queue_data([])

        assert LibraryPlaylist.create("Empty").public(True).create(client) is None
        assert session.calls[0].json == {"attributes": {"name": "Empty", "isPublic": True}, "relationships": {}}

    def test_create_rejects_albums(self):
        """Test that only songs and music videos can be tracks"""
        with pytest.raises(InvalidResourceTypeError):
            LibraryPlaylist.create("Bad").tracks([Album(id="2")])

    def test_rejected_tracks_leave_builder_unchanged(self, client, session):
        """Test that a rejected track list adds nothing to the playlist body"""
        session.queue_data([])
        builder = LibraryPlaylist.create("Mix")

        with pytest.raises(InvalidResourceTypeError):
            builder.tracks([Song(id="1"), Album(id="2")])
        builder.tracks([Song(id="3")]).create(client)

        assert session.calls[0].json == {
            "attributes": {"name": "Mix", "isPublic": False},
            "relationships": {"tracks": {"data": [{"id": "3", "type": "songs"}]}},
        }

    def test_add_tracks(self, client, session):
        """Test appending tracks to a playlist"""
        session.queue((204, None))

        LibraryPlaylist(id="p.1").add_tracks(client, [Song(id="1")])

        call = session.calls[0]
        assert call.url == BASE_URL + "/v1/me/library/playlists/p.1/tracks"
        assert call.json == {"data": [{"id": "1", "type": "songs"}]}

    def test_add_tracks_checks_everything_first(self, client, session):
        """Test that nothing is sent when one track is invalid"""
        with pytest.raises(InvalidResourceTypeError):
            LibraryPlaylist(id="p.1").add_tracks(client, [Song(id="1"), Artist(id="3")])

        assert session.calls == []


class TestRatings:
    """Test ratings"""

    def test_get_one(self, client, session):
        """Test reading one rating"""
        session.queue_data([{"id": "1", "type": "ratings", "attributes": {"value": 1}}])

        rating = Rating.get().one(client, RatingType.SONG, "1")

        assert rating.attributes.value == 1
        assert session.calls[0].url == BASE_URL + "/v1/me/ratings/songs/1"

    def test_get_many(self, client, session):
        """Test reading several ratings"""
        session.queue_data([])

        assert Rating.get().many(client, RatingType.LIBRARY_ALBUM, ["l.1", "l.2"]) == []
        assert session.calls[0].url == BASE_URL + "/v1/me/ratings/library-albums"
        assert query_value(session.calls[0], "ids") == "l.1,l.2"

    def test_add_rating(self, client, session):
        """Test the rating PUT body"""
        session.queue_data([{"id": "1", "type": "ratings", "attributes": {"value": -1}}])

        rating = Rating.set().add_rating(client, Song(id="1"), -1)

        call = session.calls[0]
        assert rating.attributes.value == -1
        assert call.method == "PUT"
        assert call.url == BASE_URL + "/v1/me/ratings/songs/1"
        assert call.json == {"type": "rating", "attributes": {"value": -1}}

    def test_remove_rating(self, client, session):
        """Test deleting a rating"""
        session.queue((204, None))

        Rating.set().remove_rating(client, LibraryPlaylist(id="p.1"))

        assert session.calls[0].method == "DELETE"
        assert session.calls[0].url == BASE_URL + "/v1/me/ratings/library-playlists/p.1"

    def test_unratable(self, client, session):
        """Test that artists cannot be rated"""
        with pytest.raises(InvalidResourceTypeError):
            Rating.set().add_rating(client, Artist(id="3"), 1)

        assert session.calls == []


class TestRecommendations:
    """Test personal recommendations"""

    def test_all(self, client, session):
        """Test the default recommendations listing"""
        session.queue_data([{
            "id": "6-27s5hU6azhJY",
            "type": "personal-recommendation",
            "attributes": {
                "kind": "music-recommendations",
                "title": {"stringForDisplay": "Made for You"},
                "resourceTypes": ["playlists"],
            },
            "relationships": {"contents": {"data": [{"id": "pl.1", "type": "playlists"}]}},
        }], [])

        recommendations = list(PersonalRecommendation.get().all(client))

        recommendation = recommendations[0]
        assert recommendation.attributes.kind == PersonalRecommendationKind.MUSIC_RECOMMENDATIONS
        assert recommendation.attributes.title.string_for_display == "Made for You"
        assert isinstance(recommendation.relationships.contents.data[0], Playlist)
        assert session.calls[0].url == BASE_URL + "/v1/me/recommendations"

    def test_one(self, client, session):
        """Test fetching one recommendation"""
        session.queue_data([])

        assert PersonalRecommendation.get().one(client, "6-27s5hU6azhJY") is None
        assert session.calls[0].url == BASE_URL + "/v1/me/recommendations/6-27s5hU6azhJY"
