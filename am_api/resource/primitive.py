"""Small value types shared by many resources."""

from datetime import date
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from am_api.request.context import ApiModel


class PlayParameters(ApiModel):
    id: str = ""
    kind: str = ""


class EditorialNotes(ApiModel):
    """
    Editorial notes.

    Attributes:
        name: Name for the editorial notes.
        short: Abbreviated notes shown inline or next to other content.
        standard: Notes shown when the content is displayed prominently.
        tagline: Tag line for the editorial notes.
    """
    name: str | None = None
    short: str | None = None
    standard: str | None = None
    tagline: str | None = None


class Preview(ApiModel):
    url: str = ""


class AudioVariant(str, Enum):
    DOLBY_ATMOS = "dolby-atmos"
    DOLBY_AUDIO = "dolby-audio"
    HI_RES_LOSSLESS = "hi-res-lossless"
    LOSSLESS = "lossless"
    LOSSY_STEREO = "lossy-stereo"


class ContentRating(str, Enum):
    CLEAN = "clean"
    EXPLICIT = "explicit"


class TrackType(str, Enum):
    """Resource types that can appear as playlist tracks."""
    LIBRARY_MUSIC_VIDEO = "library-music-videos"
    LIBRARY_SONG = "library-songs"
    MUSIC_VIDEO = "music-videos"
    SONG = "songs"

    def __str__(self) -> str:
        return self.value


def _parse_year_or_date(value: Any) -> Any:
    # "2013" is a year, "2013-06-18" a full date
    if isinstance(value, str):
        if "-" in value:
            return date.fromisoformat(value)
        return int(value)
    return value


def _format_year_or_date(value: int | date) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return f"{value:04d}"


# Release dates are either a bare year or a full date
YearOrDate = Annotated[
    int | date,
    BeforeValidator(_parse_year_or_date),
    PlainSerializer(_format_year_or_date, return_type=str),
]
