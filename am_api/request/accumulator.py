"""
Field-set accumulators used by request builders.

Each accumulator maps a key (the resource object name, plus the eager/lazy
flag for relationships) to a set of requested field names. Draining turns
every key into exactly one query pair whose value is the comma-joined set:

    extensions     -> extend[songs]=artistUrl,audioVariants
    relationships  -> include[albums]=tracks  /  relate[albums]=artists
    views          -> views[albums]=appears-on

Sets are kept as insertion-ordered dicts so drained queries are stable
from run to run.
"""

from typing import Hashable

from am_api.request.fields import ExtensionField, RelationshipField, ViewField


class FieldSetAccumulator:
    """Multimap from a key to a de-duplicated set of field names."""

    def __init__(self) -> None:
        self._storage: dict[Hashable, dict[str, None]] = {}

    def add(self, key: Hashable, value: str) -> None:
        self._storage.setdefault(key, {})[value] = None

    def drain(self, query: list[tuple[str, str]]) -> None:
        """Append one (formatted key, joined values) pair per key to `query` and empty this accumulator."""
        for key, values in self._storage.items():
            query.append((self.format_key(key), ",".join(values)))
        self._storage.clear()

    def format_key(self, key: Hashable) -> str:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._storage)


class ExtensionStorage(FieldSetAccumulator):

    def add_extension(self, extension: ExtensionField) -> None:
        self.add(extension.object_name, str(extension))

    def format_key(self, key: Hashable) -> str:
        return f"extend[{key}]"


class RelationshipStorage(FieldSetAccumulator):
    """Eager and lazy relationships of the same object are stored under separate keys."""

    def add_relationship(self, relationship: RelationshipField, lazy: bool = False) -> None:
        self.add((relationship.object_name, lazy), str(relationship))

    def format_key(self, key: Hashable) -> str:
        object_name, lazy = key
        if lazy:
            return f"relate[{object_name}]"
        return f"include[{object_name}]"


class ViewStorage(FieldSetAccumulator):

    def add_view(self, view: ViewField) -> None:
        self.add(view.object_name, str(view))

    def format_key(self, key: Hashable) -> str:
        return f"views[{key}]"
