"""
Apple Music catalog resources.

Catalog resources live under /v1/catalog/{storefront}/ and are the same
for every user of a storefront.
"""

from am_api.resource.catalog.activity import Activity, ActivityRelationshipType
from am_api.resource.catalog.album import (
    Album,
    AlbumAttributesExtension,
    AlbumRelationshipType,
    AlbumViewType,
)
from am_api.resource.catalog.artist import Artist, ArtistRelationshipType, ArtistViewType
from am_api.resource.catalog.curator import (
    AppleCurator,
    AppleCuratorRelationshipType,
    Curator,
    CuratorKind,
    CuratorRelationshipType,
)
from am_api.resource.catalog.music_video import (
    MusicVideo,
    MusicVideoAttributesExtension,
    MusicVideoRelationshipType,
    MusicVideoViewType,
)
from am_api.resource.catalog.playlist import (
    Playlist,
    PlaylistAttributesExtension,
    PlaylistRelationshipType,
    PlaylistType,
    PlaylistViewType,
)
from am_api.resource.catalog.record_label import RecordLabel, RecordLabelViewType
from am_api.resource.catalog.search import (
    CatalogSearch,
    CatalogSearchResults,
    CatalogSearchSuggestion,
    CatalogSearchType,
    SuggestionKind,
)
from am_api.resource.catalog.song import Song, SongAttributesExtension, SongRelationshipType
from am_api.resource.catalog.station import (
    MediaKind,
    Station,
    StationGenre,
    StationGenreRelationshipType,
    StationRelationshipType,
)

__all__ = [
    "Activity",
    "ActivityRelationshipType",
    "Album",
    "AlbumAttributesExtension",
    "AlbumRelationshipType",
    "AlbumViewType",
    "AppleCurator",
    "AppleCuratorRelationshipType",
    "Artist",
    "ArtistRelationshipType",
    "ArtistViewType",
    "Curator",
    "CuratorKind",
    "CuratorRelationshipType",
    "MusicVideo",
    "MusicVideoAttributesExtension",
    "MusicVideoRelationshipType",
    "MusicVideoViewType",
    "Playlist",
    "PlaylistAttributesExtension",
    "PlaylistRelationshipType",
    "PlaylistType",
    "PlaylistViewType",
    "RecordLabel",
    "RecordLabelViewType",
    "Song",
    "SongAttributesExtension",
    "SongRelationshipType",
    "MediaKind",
    "Station",
    "StationGenre",
    "StationGenreRelationshipType",
    "StationRelationshipType",
    # Search
    "CatalogSearch",
    "CatalogSearchResults",
    "CatalogSearchSuggestion",
    "CatalogSearchType",
    "SuggestionKind",
]
