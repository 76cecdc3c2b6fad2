"""Attribute payloads shared by several resources."""

from am_api.request.context import ApiModel


class DescriptionAttribute(ApiModel):
    short: str | None = None
    standard: str = ""


class TitleOnlyAttribute(ApiModel):
    """Attributes of a view: a localized title to display for it."""
    title: str = ""
