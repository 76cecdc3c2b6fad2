"""
Request building, context propagation and pagination.

    - fields: Field-name enum bases for extensions, relationships and views
    - accumulator: Field-set accumulators drained into query pairs
    - context: RequestContext and context propagation
    - builder: Fluent single-use request builders
    - response: Response envelopes and decoding
    - paginated: Offset pagination driver
    - continuation: `next` link continuation for relationships and views
"""

from am_api.request.accumulator import (
    ExtensionStorage,
    FieldSetAccumulator,
    RelationshipStorage,
    ViewStorage,
)
from am_api.request.builder import (
    DEFAULT_FETCH_LIMIT,
    CatalogRequestBuilder,
    LibraryRequestBuilder,
    MusicRequestBuilder,
)
from am_api.request.context import (
    ApiModel,
    ContextModel,
    RequestContext,
    propagate_context,
)
from am_api.request.continuation import follow_next
from am_api.request.fields import (
    ExtensionField,
    RelationshipField,
    ViewField,
    for_object,
)
from am_api.request.paginated import paginate
from am_api.request.response import (
    ErrorResponse,
    MusicError,
    ResourceResponse,
    ResultsResponse,
    decode_data,
    decode_response,
    raise_for_error,
)

__all__ = [
    "DEFAULT_FETCH_LIMIT",
    # Fields
    "ExtensionField",
    "RelationshipField",
    "ViewField",
    "for_object",
    # Accumulators
    "FieldSetAccumulator",
    "ExtensionStorage",
    "RelationshipStorage",
    "ViewStorage",
    # Context
    "ApiModel",
    "ContextModel",
    "RequestContext",
    "propagate_context",
    # Builders
    "MusicRequestBuilder",
    "CatalogRequestBuilder",
    "LibraryRequestBuilder",
    # Responses
    "ResourceResponse",
    "ResultsResponse",
    "ErrorResponse",
    "MusicError",
    "decode_response",
    "decode_data",
    "raise_for_error",
    # Iteration
    "paginate",
    "follow_next",
]
