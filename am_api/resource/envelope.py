"""
The Resource union.

Endpoints that can return any kind of resource (history, library adds,
playlist tracks, recommendation contents) decode their items as Resource,
a union of every concrete resource model discriminated on the `type`
field. Unknown `type` values are rejected when decoding.

    for item in History.get().recently_played(client):
        match item:
            case Album():
                ...
            case Playlist():
                ...
"""

from typing import Annotated, Union

from pydantic import Field

from am_api.resource.catalog.activity import Activity
from am_api.resource.catalog.album import Album
from am_api.resource.catalog.artist import Artist
from am_api.resource.catalog.curator import AppleCurator, Curator
from am_api.resource.catalog.music_video import MusicVideo
from am_api.resource.catalog.playlist import Playlist
from am_api.resource.catalog.record_label import RecordLabel
from am_api.resource.catalog.song import Song
from am_api.resource.catalog.station import Station, StationGenre
from am_api.resource.genre import Genre
from am_api.resource.library.album import LibraryAlbum
from am_api.resource.library.artist import LibraryArtist
from am_api.resource.library.music_video import LibraryMusicVideo
from am_api.resource.library.playlist import LibraryPlaylist, LibraryPlaylistFolder
from am_api.resource.library.song import LibrarySong
from am_api.resource.personal_recommendation import PersonalRecommendation
from am_api.resource.rating import Rating

Resource = Annotated[
    Union[
        Activity,
        Album,
        Artist,
        AppleCurator,
        Curator,
        Genre,
        MusicVideo,
        PersonalRecommendation,
        Playlist,
        Rating,
        RecordLabel,
        Song,
        Station,
        StationGenre,
        LibraryAlbum,
        LibraryArtist,
        LibraryMusicVideo,
        LibraryPlaylist,
        LibraryPlaylistFolder,
        LibrarySong,
    ],
    Field(discriminator="type"),
]

# Wire type -> model class, for every member of Resource
RESOURCE_TYPES = {
    "activities": Activity,
    "albums": Album,
    "artists": Artist,
    "apple-curators": AppleCurator,
    "curators": Curator,
    "genres": Genre,
    "music-videos": MusicVideo,
    "personal-recommendation": PersonalRecommendation,
    "playlists": Playlist,
    "ratings": Rating,
    "record-labels": RecordLabel,
    "songs": Song,
    "stations": Station,
    "station-genres": StationGenre,
    "library-albums": LibraryAlbum,
    "library-artists": LibraryArtist,
    "library-music-videos": LibraryMusicVideo,
    "library-playlists": LibraryPlaylist,
    "library-playlist-folders": LibraryPlaylistFolder,
    "library-songs": LibrarySong,
}
