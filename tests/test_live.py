# tests/test_live.py
"""Smoke tests against the real Apple Music API

Skipped unless DEVELOPER_TOKEN and MEDIA_USER_TOKEN are set.
"""

import os
from itertools import islice

import pytest

from am_api import ApiClient
from am_api.resource import Album, AlbumRelationshipType, LibrarySong, Storefront

pytestmark = pytest.mark.skipif(
    not (os.getenv("DEVELOPER_TOKEN") and os.getenv("MEDIA_USER_TOKEN")),
    reason="DEVELOPER_TOKEN and MEDIA_USER_TOKEN are required for live tests",
)


@pytest.fixture(scope="module")
def live_client():
    with ApiClient(os.environ["DEVELOPER_TOKEN"], os.environ["MEDIA_USER_TOKEN"]) as client:
        yield client


class TestLive:
    """Test a few read-only calls end to end"""

    def test_storefront(self, live_client):
        """Test fetching the default storefront"""
        storefront = Storefront.get().one(live_client, "us")
        assert storefront.id == "us"

    def test_album_tracks(self, live_client):
        """Test an album with its tracks relationship"""
        # Discovery, Daft Punk
        album = Album.get().include(AlbumRelationshipType.TRACKS).one(live_client, "697194953")

        tracks = list(album.relationships.tracks.iter(live_client))
        assert len(tracks) == album.attributes.track_count

    def test_library_songs(self, live_client):
        """Test the first page of library songs"""
        songs = list(islice(LibrarySong.get().all(live_client, limit=5), 5))
        assert all(song.type == "library-songs" for song in songs)
