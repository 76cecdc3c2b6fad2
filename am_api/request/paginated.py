"""
Offset pagination driver.

paginate() turns an endpoint into a lazy iterator of typed items. One GET
is issued per page, only when the consumer asks for the first item of that
page; stopping iteration early stops the requests.
"""

from typing import TYPE_CHECKING, Any, Iterator

from am_api.core.logger import get_logger
from am_api.request.context import RequestContext, propagate_context
from am_api.request.response import decode_data

if TYPE_CHECKING:
    from am_api.client import ApiClient

logger = get_logger(__name__)


def paginate(
    client: "ApiClient",
    endpoint: str,
    context: RequestContext,
    offset: int,
    item_type: Any
) -> Iterator[Any]:
    """
    Iterate every item of a paginated endpoint, starting at `offset`.

    Args:
        client: Client used for the requests.
        endpoint: Endpoint path, e.g. "/v1/me/library/songs".
        context: Base context. Each page is requested with a copy carrying
                 an extra ("offset", n) pair; the base context (without
                 offset) is the one propagated into the items.
        offset: Offset of the first page.
        item_type: Type each element of "data" is decoded as.

    Yields:
        Items in server order across pages.

    Raises:
        TransportError, MusicApiError, DecodeError: Raised from the iterator
        when the page that failed is requested. Items already yielded stay
        with the caller.

    Behavior:
        1. Request the page at `offset`
        2. Stop if the page is empty (the only end condition)
        3. Advance `offset` by the number of items received, not by the
           requested limit, since pages may be shorter than the limit
        4. Yield the page's items, then go back to 1
    """
    while True:
        page_context = context.with_query(("offset", offset))
        response = client.get(endpoint, page_context.query)
        items = decode_data(response, item_type)

        if not items:
            logger.debug(f"{endpoint}: end of results at offset {offset}")
            return

        propagate_context(items, context)
        logger.debug(f"{endpoint}: {len(items)} item(s) at offset {offset}")
        offset += len(items)

        yield from items
