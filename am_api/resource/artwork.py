"""
Artwork information.

Apple Music returns artwork as a URL template, for example:

    https://is1-ssl.mzstatic.com/image/thumb/.../{w}x{h}bb.{f}

The template must be rendered with a size and image format before it can
be downloaded. Colors are sent as six-digit hex strings ("f4f4f4") and
exposed as integers.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from am_api.core.exceptions import ArtworkTemplateError
from am_api.request.context import ApiModel


def _parse_hex_color(value: Any) -> Any:
    if isinstance(value, str):
        return int(value.lstrip("#"), 16)
    return value


HexColor = Annotated[
    int,
    BeforeValidator(_parse_hex_color),
    PlainSerializer(lambda value: f"{value:06x}", return_type=str),
]


class ArtworkImageFormat(str, Enum):
    """Image formats the artwork CDN can render."""
    PNG = "png"
    WEBP = "webp"
    JPEG = "jpg"


class Artwork(ApiModel):
    """
    Artwork of a resource.

    Attributes:
        width: Maximum width available, in pixels.
        height: Maximum height available, in pixels.
        url: Template URL. Do not request it as-is; use get_image_url().
        bg_color: Average background color.
        text_color_1..text_color_4: Text colors readable on bg_color,
                                     from most to least prominent.
    """
    width: int = 0
    height: int = 0
    url: str = ""
    bg_color: HexColor | None = None
    text_color_1: HexColor | None = None
    text_color_2: HexColor | None = None
    text_color_3: HexColor | None = None
    text_color_4: HexColor | None = None

    def get_image_url(
        self,
        width: int,
        height: int,
        image_format: ArtworkImageFormat = ArtworkImageFormat.JPEG,
        crop: str = "bb"
    ) -> str:
        """
        Render the artwork template into a downloadable URL.

        Args:
            width: Preferred width in pixels.
            height: Preferred height in pixels.
            image_format: Format of the rendered image.
            crop: Crop code for templates that carry a {c} placeholder.

        Raises:
            ArtworkTemplateError: If the template has unknown placeholders
                                  or is not a valid format string.
        """
        values = {
            "w": width,
            "h": height,
            "f": ArtworkImageFormat(image_format).value,
            "c": crop,
        }
        try:
            return self.url.format_map(values)
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ArtworkTemplateError(
                f"Cannot render artwork template: {e!r}",
                details={"url": self.url, "original_error": str(e)}
            ) from e
