"""
Resource header and the base class of every resource model.

Every resource decoded from Apple Music carries the same three top-level
fields: `id`, `href` and `type`. The `type` string is the discriminator of
the Resource union (see am_api.resource.envelope); each concrete model
pins it with a Literal default.
"""

from typing import Iterable

from am_api.core.exceptions import InvalidResourceTypeError
from am_api.request.context import ApiModel, ContextModel


class ResourceHeader(ApiModel):
    """
    Stable identity of a resource.

    Attributes:
        id: Persistent identifier of the resource.
        href: Relative location of the resource.
    """
    id: str = ""
    href: str = ""


class ResourceModel(ContextModel):
    """Base of every concrete resource model."""

    type: str
    id: str
    href: str = ""

    @property
    def header(self) -> ResourceHeader:
        return ResourceHeader(id=self.id, href=self.href)


def ensure_accepted(resource: ResourceModel, accepted: Iterable[str], operation: str) -> None:
    """
    Check that `resource` is one of the types a write operation accepts.

    Raises:
        InvalidResourceTypeError: If the resource type is not in `accepted`.
    """
    accepted = frozenset(accepted)
    resource_type = getattr(resource, "type", None)
    if resource_type not in accepted:
        raise InvalidResourceTypeError(
            f"Resource type '{resource_type}' is not accepted by {operation}",
            details={
                "type": resource_type,
                "id": getattr(resource, "id", None),
                "accepted": sorted(accepted),
            }
        )


def thin_reference(resource: ResourceModel) -> dict[str, str]:
    """Identifier-only form of a resource, as used in write request bodies."""
    return {"id": resource.id, "type": resource.type}
