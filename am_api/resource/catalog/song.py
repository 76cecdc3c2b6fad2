"""Catalog song."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Sequence

from pydantic import Field

from am_api.request.builder import CatalogRequestBuilder
from am_api.request.context import ApiModel, ContextModel
from am_api.request.fields import ExtensionField, RelationshipField, for_object
from am_api.resource.artwork import Artwork
from am_api.resource.base import ResourceModel
from am_api.resource.primitive import (
    AudioVariant,
    ContentRating,
    EditorialNotes,
    PlayParameters,
    Preview,
    YearOrDate,
)
from am_api.resource.relationship import Relationship

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.resource.catalog.album import Album
    from am_api.resource.catalog.artist import Artist
    from am_api.resource.catalog.music_video import MusicVideo
    from am_api.resource.catalog.station import Station
    from am_api.resource.genre import Genre
    from am_api.resource.library.song import LibrarySong


@for_object("songs")
class SongAttributesExtension(ExtensionField):
    ARTIST_URL = "artistUrl"
    AUDIO_VARIANTS = "audioVariants"


@for_object("songs")
class SongRelationshipType(RelationshipField):
    ALBUMS = "albums"
    ARTISTS = "artists"
    COMPOSERS = "composers"
    GENRES = "genres"
    LIBRARY = "library"
    MUSIC_VIDEOS = "music-videos"
    STATION = "station"


class SongAttributes(ApiModel):
    """
    Song attributes.

    Attributes:
        artist_url: (Extended) URL of the song's artist.
        audio_variants: (Extended) Audio variants available for the song.
        movement_count / movement_name / movement_number: Classical music only.
        release_date: Year or full date, when known.
    """
    album_name: str = ""
    artist_name: str = ""
    artist_url: str | None = None
    artwork: Artwork = Field(default_factory=Artwork)
    attribution: str | None = None
    audio_variants: list[AudioVariant] | None = None
    composer_name: str | None = None
    content_rating: ContentRating | None = None
    disc_number: int | None = None
    duration_in_millis: int = 0
    editorial_notes: EditorialNotes | None = None
    genre_names: list[str] = Field(default_factory=list)
    has_lyrics: bool = False
    is_apple_digital_master: bool = False
    isrc: str | None = None
    movement_count: int | None = None
    movement_name: str | None = None
    movement_number: int | None = None
    name: str = ""
    play_params: PlayParameters | None = None
    previews: list[Preview] = Field(default_factory=list)
    release_date: YearOrDate | None = None
    track_number: int | None = None
    url: str = ""
    work_name: str | None = None


class SongRelationships(ContextModel):
    albums: Relationship[Album] | None = None
    artists: Relationship[Artist] | None = None
    composers: Relationship[Artist] | None = None
    genres: Relationship[Genre] | None = None
    library: Relationship[LibrarySong] | None = None
    music_videos: Relationship[MusicVideo] | None = Field(default=None, alias="music-videos")
    station: Relationship[Station] | None = None


class Song(ResourceModel):
    """Catalog song."""

    type: Literal["songs"] = "songs"
    attributes: SongAttributes | None = None
    relationships: SongRelationships = Field(default_factory=SongRelationships)

    @classmethod
    def get(cls) -> SongRequestBuilder:
        return SongRequestBuilder()


class SongRequestBuilder(CatalogRequestBuilder[Song]):
    path = "songs"
    item_type = Song

    def many(self, client: ApiClient, ids: Sequence[str], isrc: bool = False) -> list[Song]:
        """
        Fetch several songs.

        Args:
            ids: Song ids, or ISRCs when `isrc` is True.
        """
        return self._many(client, "filter[isrc]" if isrc else "ids", ids)
