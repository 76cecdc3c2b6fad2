"""
Request builders.

A builder collects everything that shapes one request (storefront and
localization overrides, extended attributes, included relationships,
views) and is then sent by exactly one terminal call such as `one`,
`many` or `all`. Sending drains the builder into a RequestContext; any
further use raises BuilderConsumedError.

    album = (
        Album.get()
        .extend(AlbumAttributesExtension.ARTIST_URL)
        .include(AlbumRelationshipType.TRACKS)
        .override_localization("fr-FR")
        .one(client, "1676791755")
    )

Resource modules subclass CatalogRequestBuilder or LibraryRequestBuilder
and only declare the endpoint path and item type; endpoint-specific
terminal calls are added on the subclass.
"""

from typing import TYPE_CHECKING, Any, ClassVar, Generic, Iterator, Sequence, TypeVar

from am_api.core.config import normalize_storefront
from am_api.core.exceptions import BuilderConsumedError
from am_api.request.accumulator import ExtensionStorage, RelationshipStorage, ViewStorage
from am_api.request.context import RequestContext, propagate_context
from am_api.request.fields import ExtensionField, RelationshipField, ViewField
from am_api.request.paginated import paginate
from am_api.request.response import decode_data

if TYPE_CHECKING:
    from am_api.client import ApiClient

T = TypeVar("T")

# Page size used by `all` when the caller does not pass one
DEFAULT_FETCH_LIMIT = 21


class MusicRequestBuilder:
    """
    Fluent, single-use request builder.

    Every configuration method returns the builder itself. The first
    terminal call drains the builder; after that every method raises
    BuilderConsumedError.
    """

    def __init__(self) -> None:
        self._storefront_override: str | None = None
        self._localization_override: str | None = None
        self._extensions = ExtensionStorage()
        self._relationships = RelationshipStorage()
        self._views = ViewStorage()
        self._consumed = False

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                f"{type(self).__name__} was already sent; create a new builder for another request"
            )

    def override_storefront(self, storefront: str) -> "MusicRequestBuilder":
        """Use `storefront` instead of the client default for this request."""
        self._ensure_open()
        self._storefront_override = normalize_storefront(storefront)
        return self

    def override_localization(self, localization: str) -> "MusicRequestBuilder":
        """Use `localization` instead of the client default for this request."""
        self._ensure_open()
        self._localization_override = localization
        return self

    def extend(self, extension: ExtensionField) -> "MusicRequestBuilder":
        """Request an extended attribute."""
        self._ensure_open()
        self._extensions.add_extension(extension)
        return self

    def include(self, relationship: RelationshipField) -> "MusicRequestBuilder":
        """Include a relationship with full objects."""
        self._ensure_open()
        self._relationships.add_relationship(relationship)
        return self

    def include_lazy(self, relationship: RelationshipField) -> "MusicRequestBuilder":
        """Include a relationship with identifiers only."""
        self._ensure_open()
        self._relationships.add_relationship(relationship, lazy=True)
        return self

    def view(self, view: ViewField) -> "MusicRequestBuilder":
        """Attach a relationship view."""
        self._ensure_open()
        self._views.add_view(view)
        return self

    def _drain_context(self, client: "ApiClient") -> RequestContext:
        """
        Resolve overrides against the client defaults and drain the accumulators.

        The query is built as: l, extend[...], include/relate[...], views[...].
        """
        self._ensure_open()
        self._consumed = True

        storefront = self._storefront_override or client.storefront
        localization = self._localization_override or client.localization

        query: list[tuple[str, str]] = [("l", localization)]
        self._extensions.drain(query)
        self._relationships.drain(query)
        self._views.drain(query)

        return RequestContext(storefront=storefront, query=tuple(query))

    # =========================================================================
    # Helpers for terminal calls
    # =========================================================================

    @staticmethod
    def _fetch(
        client: "ApiClient",
        endpoint: str,
        context: RequestContext,
        item_type: Any,
        method: str = "GET",
        json: Any = None
    ) -> list:
        """Send one request, decode {"data": [...]} and propagate `context` into the items."""
        response = client.request(method, endpoint, context.query, json)
        items = decode_data(response, item_type)
        propagate_context(items, context)
        return items

    @staticmethod
    def _paginate(
        client: "ApiClient",
        endpoint: str,
        context: RequestContext,
        offset: int,
        item_type: Any
    ) -> Iterator:
        return paginate(client, endpoint, context, offset, item_type)


class ResourceRequestBuilder(MusicRequestBuilder, Generic[T]):
    """
    Builder for a resource type reachable at `<base>/<path>[/<id>]`.

    Subclasses set `path` and `item_type` and implement `_base_path`.
    """

    path: ClassVar[str]
    item_type: ClassVar[Any]

    def _base_path(self, context: RequestContext) -> str:
        raise NotImplementedError

    def one(self, client: "ApiClient", id: str) -> T | None:
        """Fetch one resource by id. Returns None when the response holds no data."""
        context = self._drain_context(client)
        items = self._fetch(client, f"{self._base_path(context)}/{id}", context, self.item_type)
        return items[0] if items else None

    def many(self, client: "ApiClient", ids: Sequence[str]) -> list[T]:
        """Fetch several resources by id."""
        return self._many(client, "ids", ids)

    def _many(self, client: "ApiClient", key: str, ids: Sequence[str]) -> list[T]:
        context = self._drain_context(client).with_query((key, ",".join(ids)))
        return self._fetch(client, self._base_path(context), context, self.item_type)

    def _all(self, client: "ApiClient", limit: int, offset: int, *extra: tuple[str, Any]) -> Iterator[T]:
        context = self._drain_context(client).with_query(("limit", limit), *extra)
        return self._paginate(client, self._base_path(context), context, offset, self.item_type)


class CatalogRequestBuilder(ResourceRequestBuilder[T]):
    """Builder for /v1/catalog/{storefront}/<path> resources."""

    def _base_path(self, context: RequestContext) -> str:
        return f"/v1/catalog/{context.storefront}/{self.path}"


class LibraryRequestBuilder(ResourceRequestBuilder[T]):
    """Builder for /v1/me/library/<path> resources. Library paths carry no storefront."""

    def _base_path(self, context: RequestContext) -> str:
        return f"/v1/me/library/{self.path}"

    def all(self, client: "ApiClient", limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0) -> Iterator[T]:
        """Lazily iterate every resource of this type in the user's library."""
        return self._all(client, limit, offset)
