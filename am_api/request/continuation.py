"""
Cursor continuation for relationships and views.

A relationship or view embedded in a response holds the first page of its
items plus an optional `next` link. follow_next() yields the held items and
keeps requesting `next` (verbatim, with the base query of the original
request) until a page without `next` is reached.
"""

from typing import TYPE_CHECKING, Any, Iterator

from am_api.core.logger import get_logger
from am_api.request.context import RequestContext, propagate_context
from am_api.request.response import decode_response

if TYPE_CHECKING:
    from am_api.client import ApiClient

logger = get_logger(__name__)


def follow_next(container: Any, client: "ApiClient", context: RequestContext) -> Iterator[Any]:
    """
    Yield every item of `container`, then of each page reached through `next`.

    Args:
        container: A Relationship or View (anything with `data` and `next`).
                   Each further page is decoded as the same class.
        client: Client used for the requests.
        context: Context of the request `container` was decoded from.
    """
    while True:
        for item in container.data:
            propagate_context(item, context)
            yield item

        if container.next is None:
            return

        logger.debug(f"Following continuation link {container.next}")
        response = client.get(container.next, context.query)
        container = decode_response(response, type(container))
