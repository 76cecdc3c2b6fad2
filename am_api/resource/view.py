"""
View container.

Views are server-curated collections attached to a resource, such as an
album's "appears-on" playlists. They page the same way relationships do
and additionally carry display attributes (usually a title).
"""

from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from pydantic import Field, PrivateAttr

from am_api.core.exceptions import MissingContextError
from am_api.request.context import ContextModel, RequestContext
from am_api.request.continuation import follow_next

if TYPE_CHECKING:
    from am_api.client import ApiClient

A = TypeVar("A")
T = TypeVar("T")


class View(ContextModel, Generic[A, T]):
    """
    Apple Music view.

    Attributes:
        href: Relative location to fetch the view directly.
        next: Relative location of the next page, if more items exist.
        attributes: View attributes. Continuation pages may omit them.
        data: Items fetched so far, in server order.
    """

    href: str | None = None
    next: str | None = None
    attributes: A | None = None
    data: list[T] = Field(default_factory=list)

    _context: RequestContext | None = PrivateAttr(default=None)

    @property
    def context(self) -> RequestContext | None:
        return self._context

    def set_context(self, context: RequestContext) -> None:
        self._context = context
        super().set_context(context)

    def iter(self, client: "ApiClient") -> Iterator[T]:
        """
        Iterate every item of the view, following `next` links.

        Raises:
            MissingContextError: Immediately, if this view was not decoded
                                 as part of a library response.
        """
        if self._context is None:
            raise MissingContextError(
                "View has no request context; only views from responses "
                "decoded by am_api can be iterated"
            )
        return follow_next(self, client, self._context)
