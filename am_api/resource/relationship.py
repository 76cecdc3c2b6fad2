"""
Relationship container.

A relationship links a resource to other resources, e.g. an album to its
tracks. The server sends the first page of related items in `data` and,
when there are more, a relative `next` link. iter() walks all of them.
"""

from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from pydantic import Field, PrivateAttr

from am_api.core.exceptions import MissingContextError
from am_api.request.context import ContextModel, RequestContext
from am_api.request.continuation import follow_next

if TYPE_CHECKING:
    from am_api.client import ApiClient

T = TypeVar("T")


class Relationship(ContextModel, Generic[T]):
    """
    Apple Music relationship.

    Attributes:
        href: Relative location of the relationship.
        next: Relative cursor to the next page, if more items exist.
        data: Items fetched so far, in server order.
    """

    href: str | None = None
    next: str | None = None
    data: list[T] = Field(default_factory=list)

    _context: RequestContext | None = PrivateAttr(default=None)

    @property
    def context(self) -> RequestContext | None:
        """Context of the request this relationship was decoded from."""
        return self._context

    def set_context(self, context: RequestContext) -> None:
        self._context = context
        super().set_context(context)

    def iter(self, client: "ApiClient") -> Iterator[T]:
        """
        Iterate every item of the relationship, following `next` links.

        The already fetched items are yielded first; further pages are
        requested lazily as the iterator is consumed.

        Raises:
            MissingContextError: Immediately, if this relationship was not
                                 decoded as part of a library response.
        """
        if self._context is None:
            raise MissingContextError(
                "Relationship has no request context; only relationships from "
                "responses decoded by am_api can be iterated"
            )
        return follow_next(self, client, self._context)
