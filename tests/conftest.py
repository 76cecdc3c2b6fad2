"""Test configuration and fixtures"""

import json
import logging
from types import SimpleNamespace

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from am_api import ApiClient
from am_api.core.logger import PACKAGE_LOGGER_NAME, shutdown_logging

BASE_URL = ApiClient.BASE_URL


def make_response(status_code=200, body=None, method="GET", url=BASE_URL + "/v1/test"):
    """Build a real requests.Response with a JSON (or raw bytes) body"""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


class FakeSession:
    """
    Stand-in for requests.Session.

    Queued replies are (status_code, body) pairs or exceptions, returned in
    order. Every call is recorded in `calls`.
    """

    def __init__(self):
        self.headers = CaseInsensitiveDict()
        self.calls = []
        self.replies = []
        self.closed = False

    def queue(self, *replies):
        self.replies.extend(replies)

    def queue_data(self, *pages):
        """Queue 200 responses with {"data": page} bodies"""
        for page in pages:
            self.replies.append((200, {"data": page}))

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append(
            SimpleNamespace(method=method, url=url, params=list(params or []), json=json, timeout=timeout)
        )
        if not self.replies:
            raise AssertionError(f"Unexpected request: {method} {url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        status_code, body = reply
        return make_response(status_code, body, method=method, url=url)

    def close(self):
        self.closed = True


def query_value(call, key):
    """Value of the first `key` pair sent with a recorded call"""
    for name, value in call.params:
        if name == key:
            return value
    return None


@pytest.fixture
def session():
    """Fake HTTP session"""
    return FakeSession()


@pytest.fixture
def client(session):
    """Client wired to the fake session"""
    return ApiClient(
        "dev-token",
        "user-token",
        storefront="us",
        localization="en-US",
        session=session,
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no am_api variables set"""
    for name in ("DEVELOPER_TOKEN", "MEDIA_USER_TOKEN", "AM_API_STOREFRONT", "AM_API_LOCALIZATION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests see default propagation"""
    yield
    shutdown_logging()
    logging.getLogger(PACKAGE_LOGGER_NAME).propagate = True


def song_payload(song_id, name="Song", **relationships):
    payload = {
        "id": song_id,
        "type": "songs",
        "href": f"/v1/catalog/us/songs/{song_id}",
        "attributes": {"name": name, "artistName": "Artist", "durationInMillis": 200000},
    }
    if relationships:
        payload["relationships"] = relationships
    return payload


def library_song_payload(song_id, name="Library Song", **relationships):
    payload = {
        "id": song_id,
        "type": "library-songs",
        "href": f"/v1/me/library/songs/{song_id}",
        "attributes": {"name": name, "artistName": "Artist"},
    }
    if relationships:
        payload["relationships"] = relationships
    return payload


def album_payload(album_id, name="Album", **relationships):
    payload = {
        "id": album_id,
        "type": "albums",
        "href": f"/v1/catalog/us/albums/{album_id}",
        "attributes": {"name": name, "artistName": "Artist", "trackCount": 10},
    }
    if relationships:
        payload["relationships"] = relationships
    return payload


@pytest.fixture
def sample_album_data():
    """Album with a two-page tracks relationship"""
    return album_payload(
        "1",
        tracks={
            "href": "/v1/catalog/us/albums/1/tracks",
            "next": "/v1/catalog/us/albums/1/tracks?offset=2",
            "data": [
                song_payload("10", albums={"href": "/v1/catalog/us/songs/10/albums", "data": []}),
                song_payload("11"),
            ],
        },
    )
