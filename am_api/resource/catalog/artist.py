"""Catalog artist."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import RelationshipField, ViewField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.attributes import TitleOnlyAttribute
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import EditorialNotes
from am_api.resource.relationship import Relationship
from am_api.resource.view import View

if TYPE_CHECKING:
    from am_api.resource.catalog.album import Album
    from am_api.resource.catalog.music_video import MusicVideo
    from am_api.resource.catalog.playlist import Playlist
    from am_api.resource.catalog.song import Song
    from am_api.resource.catalog.station import Station
    from am_api.resource.genre import Genre


@for_object("artists")
class ArtistRelationshipType(RelationshipField):
    ALBUMS = "albums"
    GENRES = "genres"
    MUSIC_VIDEOS = "music-videos"
    PLAYLISTS = "playlists"
    STATION = "station"


@for_object("artists")
class ArtistViewType(ViewField):
    APPEARS_ON_ALBUMS = "appears-on-albums"
    COMPILATION_ALBUMS = "compilation-albums"
    FEATURED_ALBUMS = "featured-albums"
    FEATURED_MUSIC_VIDEOS = "featured-music-videos"
    FEATURED_PLAYLISTS = "featured-playlists"
    FULL_ALBUMS = "full-albums"
    LATEST_RELEASE = "latest-release"
    LIVE_ALBUMS = "live-albums"
    SIMILAR_ARTISTS = "similar-artists"
    SINGLES = "singles"
    TOP_MUSIC_VIDEOS = "top-music-videos"
    TOP_SONGS = "top-songs"


class ArtistAttributes(ApiModel):
    artwork: Artwork | None = None
    editorial_notes: EditorialNotes | None = None
    genre_names: list[str] = Field(default_factory=list)
    name: str = ""
    url: str = ""


class ArtistRelationships(ContextModel):
    albums: Relationship[Album] | None = None
    genres: Relationship[Genre] | None = None
    music_videos: Relationship[MusicVideo] | None = Field(default=None, alias="music-videos")
    playlists: Relationship[Playlist] | None = None
    station: Relationship[Station] | None = None


class ArtistViews(ContextModel):
    """
    Artist views.

    Fetch limits are 10 items by default and 100 at most for every view.
    """
    appears_on_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="appears-on-albums")
    compilation_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="compilation-albums")
    featured_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="featured-albums")
    featured_music_videos: View[TitleOnlyAttribute, MusicVideo] | None = Field(
        default=None, alias="featured-music-videos"
    )
    featured_playlists: View[TitleOnlyAttribute, Playlist] | None = Field(default=None, alias="featured-playlists")
    full_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="full-albums")
    latest_release: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="latest-release")
    live_albums: View[TitleOnlyAttribute, Album] | None = Field(default=None, alias="live-albums")
    similar_artists: View[TitleOnlyAttribute, Artist] | None = Field(default=None, alias="similar-artists")
    singles: View[TitleOnlyAttribute, Album] | None = None
    top_music_videos: View[TitleOnlyAttribute, MusicVideo] | None = Field(default=None, alias="top-music-videos")
    top_songs: View[TitleOnlyAttribute, Song] | None = Field(default=None, alias="top-songs")


class Artist(ResourceModel):
    """Catalog artist."""

    type: Literal["artists"] = "artists"
    attributes: ArtistAttributes | None = None
    relationships: ArtistRelationships = Field(default_factory=ArtistRelationships)
    views: ArtistViews = Field(default_factory=ArtistViews)

    @classmethod
    def get(cls) -> ArtistRequestBuilder:
        return ArtistRequestBuilder()


class ArtistRequestBuilder(CatalogRequestBuilder[Artist]):
    path = "artists"
    item_type = Artist
