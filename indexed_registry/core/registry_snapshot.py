"""Registry Snapshot — serialization / deserialization for indexed collections.

Invariants:
    - registry_to_snapshot produces the plain ordered record list only (no views)
    - registry_from_snapshot rebuilds an equivalent collection from records + view config
    - Missing config keys fall back to "no views" / mutable (forward-compatible)

Design Decisions:
    - Views are derived data: persisting them would let stale indices survive a reload
    - json default hook instead of a JSONEncoder subclass: composes with callers' own dumps
"""

import json
from typing import Any

from indexed_registry.core.indexed_collection import (
    IndexedCollection,
    MutableIndexedCollection,
    ReadOnlyIndexedCollection,
)


def registry_to_snapshot(collection: IndexedCollection) -> list[Any]:
    """Canonical serialized shape: the raw mirror's records, in order. Pure, no IO."""
    return collection.to_json()


def registry_from_snapshot(
    records: list[Any] | None, config: dict | None = None,
) -> IndexedCollection:
    """Rebuild a collection from a snapshot. Pure, no IO.

    `config` carries the view paths and immutability flag (see
    IndexedCollection.config); records never carry view data.
    """
    config = config or {}
    cls = ReadOnlyIndexedCollection if config.get("immutable") else MutableIndexedCollection
    return cls(
        group=config.get("group"),
        index=config.get("index"),
        order=config.get("order"),
        initial_set=records or [],
    )


def json_default(value: Any) -> Any:
    """`default=` hook for json.dumps: indexed collections encode as their records."""
    if isinstance(value, IndexedCollection):
        return value.to_json()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(collection: IndexedCollection, **kwargs: Any) -> str:
    """JSON text for a collection (records only)."""
    return json.dumps(collection, default=json_default, **kwargs)
