# tests/test_request.py
"""Test field sets, accumulators, builders and request context"""

import pytest

from am_api.core.exceptions import BuilderConsumedError, ConfigError
from am_api.request import (
    ExtensionStorage,
    RelationshipStorage,
    RequestContext,
    ViewStorage,
    propagate_context,
)
from am_api.request.fields import RelationshipField
from am_api.resource import (
    Album,
    AlbumAttributesExtension,
    AlbumRelationshipType,
    AlbumViewType,
    Playlist,
    Song,
    SongAttributesExtension,
    SongRelationshipType,
    Station,
    Storefront,
)

from conftest import BASE_URL, album_payload, query_value, song_payload


class TestFields:
    """Test field-name enums"""

    def test_str_is_wire_name(self):
        """Test that members render as their wire value"""
        assert str(SongRelationshipType.MUSIC_VIDEOS) == "music-videos"
        assert str(AlbumViewType.APPEARS_ON) == "appears-on"

    def test_object_name(self):
        """Test that members know the resource they belong to"""
        assert SongRelationshipType.ALBUMS.object_name == "songs"
        assert AlbumAttributesExtension.ARTIST_URL.object_name == "albums"

    def test_unbound_enum(self):
        """Test that an enum without for_object has no object name"""
        class Unbound(RelationshipField):
            THING = "thing"

        with pytest.raises(TypeError):
            Unbound.THING.object_name


class TestAccumulators:
    """Test field-set accumulators"""

    def test_extensions_grouped_and_deduplicated(self):
        """Test one extend pair per object with unique values"""
        storage = ExtensionStorage()
        storage.add_extension(SongAttributesExtension.ARTIST_URL)
        storage.add_extension(SongAttributesExtension.AUDIO_VARIANTS)
        storage.add_extension(SongAttributesExtension.ARTIST_URL)
        storage.add_extension(AlbumAttributesExtension.ARTIST_URL)

        query = []
        storage.drain(query)

        assert query == [
            ("extend[songs]", "artistUrl,audioVariants"),
            ("extend[albums]", "artistUrl"),
        ]
        assert len(storage) == 0

    def test_eager_and_lazy_relationships(self):
        """Test that eager and lazy relationships use separate keys"""
        storage = RelationshipStorage()
        storage.add_relationship(SongRelationshipType.ALBUMS)
        storage.add_relationship(SongRelationshipType.ARTISTS, lazy=True)
        storage.add_relationship(SongRelationshipType.GENRES)

        query = []
        storage.drain(query)

        assert query == [
            ("include[songs]", "albums,genres"),
            ("relate[songs]", "artists"),
        ]

    def test_views(self):
        """Test view draining"""
        storage = ViewStorage()
        storage.add_view(AlbumViewType.APPEARS_ON)
        storage.add_view(AlbumViewType.OTHER_VERSIONS)

        query = []
        storage.drain(query)

        assert query == [("views[albums]", "appears-on,other-versions")]

    def test_drain_empty(self):
        """Test that an empty accumulator adds nothing"""
        query = [("l", "en-US")]
        ExtensionStorage().drain(query)
        assert query == [("l", "en-US")]


class TestRequestContext:
    """Test RequestContext"""

    def test_localization(self):
        """Test reading localization from the query"""
        context = RequestContext(storefront="us", query=(("l", "fr-FR"), ("ids", "1")))
        assert context.localization == "fr-FR"
        assert RequestContext(storefront="us").localization is None

    def test_with_query_copies(self):
        """Test that with_query never mutates the original"""
        context = RequestContext(storefront="us", query=(("l", "en-US"),))
        extended = context.with_query(("limit", 21), ("offset", 0))

        assert context.query == (("l", "en-US"),)
        assert extended.query == (("l", "en-US"), ("limit", "21"), ("offset", "0"))
        assert extended.storefront == "us"

    def test_propagate_ignores_plain_values(self):
        """Test that propagation skips None and primitives"""
        context = RequestContext(storefront="us")
        propagate_context(None, context)
        propagate_context(["a", 1, None], context)
        propagate_context({"key": "value"}, context)


class TestBuilder:
    """Test request builders"""

    def test_query_order(self, client, session):
        """Test that the query is l, extend, include/relate, views"""
        session.queue_data([album_payload("1")])

        (
            Album.get()
            .view(AlbumViewType.APPEARS_ON)
            .include_lazy(AlbumRelationshipType.ARTISTS)
            .include(AlbumRelationshipType.TRACKS)
            .extend(AlbumAttributesExtension.ARTIST_URL)
            .override_localization("fr-FR")
            .one(client, "1")
        )

        call = session.calls[0]
        assert call.method == "GET"
        assert call.url == BASE_URL + "/v1/catalog/us/albums/1"
        assert call.params[:3] == [
            ("art[url]", "f"),
            ("l", "fr-FR"),
            ("extend[albums]", "artistUrl"),
        ]
        # Eager and lazy relationships may come in either order
        assert set(call.params[3:5]) == {
            ("include[albums]", "tracks"),
            ("relate[albums]", "artists"),
        }
        assert call.params[5:] == [("views[albums]", "appears-on")]

    def test_client_defaults(self, client, session):
        """Test that client storefront and localization are used without overrides"""
        session.queue_data([song_payload("1")])

        song = Song.get().one(client, "1")

        assert isinstance(song, Song)
        assert song.attributes.name == "Song"
        assert session.calls[0].url == BASE_URL + "/v1/catalog/us/songs/1"
        assert query_value(session.calls[0], "l") == "en-US"

    def test_override_storefront(self, client, session):
        """Test that the storefront override is normalized and used in the path"""
        session.queue_data([])

        assert Song.get().override_storefront("GB").one(client, "1") is None
        assert session.calls[0].url == BASE_URL + "/v1/catalog/gb/songs/1"

    def test_override_storefront_invalid(self):
        """Test that an invalid storefront is rejected immediately"""
        with pytest.raises(ConfigError):
            Song.get().override_storefront("usa")

    def test_single_use(self, client, session):
        """Test that a sent builder cannot be reused"""
        session.queue_data([song_payload("1")])
        builder = Song.get()
        builder.one(client, "1")

        with pytest.raises(BuilderConsumedError):
            builder.one(client, "1")
        with pytest.raises(BuilderConsumedError):
            builder.include(SongRelationshipType.ALBUMS)
        assert len(session.calls) == 1

    def test_many(self, client, session):
        """Test fetching several resources by id"""
        session.queue_data([song_payload("1"), song_payload("2")])

        songs = Song.get().many(client, ["1", "2"])

        assert [song.id for song in songs] == ["1", "2"]
        assert session.calls[0].url == BASE_URL + "/v1/catalog/us/songs"
        assert query_value(session.calls[0], "ids") == "1,2"

    def test_many_by_isrc(self, client, session):
        """Test the ISRC filter"""
        session.queue_data([song_payload("1")])

        Song.get().many(client, ["USUM71900001"], isrc=True)

        assert query_value(session.calls[0], "filter[isrc]") == "USUM71900001"
        assert query_value(session.calls[0], "ids") is None

    def test_many_by_upc(self, client, session):
        """Test the UPC filter"""
        session.queue_data([album_payload("1")])

        Album.get().many(client, ["00602567"], upc=True)

        assert query_value(session.calls[0], "filter[upc]") == "00602567"

    def test_playlist_charts(self, client, session):
        """Test chart playlists of a storefront"""
        session.queue_data([{"id": "pl.1", "type": "playlists", "attributes": {"name": "Top 100", "isChart": True}}])

        playlists = Playlist.get().charts(client, "GB")

        assert playlists[0].attributes.is_chart is True
        assert session.calls[0].url == BASE_URL + "/v1/catalog/us/playlists"
        assert query_value(session.calls[0], "filter[storefront-chart]") == "gb"

    def test_station_live_and_personal(self, client, session):
        """Test the live radio and personal station filters"""
        station = {"id": "ra.1", "type": "stations", "attributes": {"name": "Apple Music 1", "isLive": True}}
        session.queue_data([station], [])

        live = Station.get().live(client)
        personal = Station.get().personal(client)

        assert live[0].attributes.is_live is True
        assert personal is None
        assert query_value(session.calls[0], "filter[featured]") == "apple-music-live-radio"
        assert query_value(session.calls[1], "filter[identity]") == "personal"

    def test_storefront_one(self, client, session):
        """Test that storefronts are fetched outside the catalog path"""
        session.queue_data([{
            "id": "gb",
            "type": "storefronts",
            "attributes": {
                "name": "United Kingdom",
                "defaultLanguageTag": "en-GB",
                "explicitContentPolicy": "allowed",
                "supportedLanguageTags": ["en-GB"],
            },
        }])

        storefront = Storefront.get().one(client, "GB")

        assert storefront.attributes.default_language_tag == "en-GB"
        assert session.calls[0].url == BASE_URL + "/v1/storefronts/gb"


class TestContextPropagation:
    """Test that decoded trees carry the request context"""

    def test_shared_context(self, client, session, sample_album_data):
        """Test that every nested container holds the same context object"""
        session.queue_data([sample_album_data])

        album = Album.get().include(AlbumRelationshipType.TRACKS).one(client, "1")

        tracks = album.relationships.tracks
        nested = tracks.data[0].relationships.albums
        assert tracks.context is not None
        assert tracks.context is nested.context
        assert tracks.context == RequestContext(
            storefront="us",
            query=(("l", "en-US"), ("include[albums]", "tracks")),
        )

    def test_override_reaches_context(self, client, session, sample_album_data):
        """Test that overrides are what containers remember"""
        session.queue_data([sample_album_data])

        album = Album.get().override_storefront("jp").override_localization("ja").one(client, "1")

        context = album.relationships.tracks.context
        assert context.storefront == "jp"
        assert context.localization == "ja"
