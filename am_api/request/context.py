"""
Request context and context propagation.

Apple Music responses never echo the storefront or localization a request
was made with. To keep paginating a relationship or view found deep inside
a response, every container in the decoded tree is handed the context of
the request that produced it. One RequestContext instance is shared by
reference across the whole tree; it is never mutated.
"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class RequestContext:
    """
    Resolved parameters of one logical request.

    Attributes:
        storefront: Lowercase two-letter storefront code used in catalog paths.
        query: Ordered query pairs. Always starts with ("l", localization),
               followed by extend/include/relate/views pairs and any
               endpoint-specific pairs (ids, limit, filters).
    """
    storefront: str
    query: tuple[tuple[str, str], ...] = ()

    @property
    def localization(self) -> str | None:
        for key, value in self.query:
            if key == "l":
                return value
        return None

    def with_query(self, *pairs: tuple[str, Any]) -> "RequestContext":
        """Return a copy with `pairs` appended to the query."""
        return replace(self, query=self.query + tuple((key, str(value)) for key, value in pairs))


class ApiModel(BaseModel):
    """Base for every model decoded from Apple Music JSON (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContextModel(ApiModel):
    """
    Model that forwards a RequestContext to its nested containers.

    Fields listed in `_context_skip` hold plain data (attributes) and are
    not walked.
    """

    _context_skip: ClassVar[frozenset[str]] = frozenset({"attributes"})

    def set_context(self, context: RequestContext) -> None:
        for name in type(self).model_fields:
            if name in self._context_skip:
                continue
            propagate_context(getattr(self, name), context)


def propagate_context(value: Any, context: RequestContext) -> None:
    """
    Push `context` into `value` and everything nested in it.

    None, primitives and plain data models are left untouched. Sequences
    and mappings are walked element by element, all sharing the same
    context object.
    """
    if isinstance(value, ContextModel):
        value.set_context(context)
    elif isinstance(value, (list, tuple)):
        for item in value:
            propagate_context(item, context)
    elif isinstance(value, dict):
        for item in value.values():
            propagate_context(item, context)
