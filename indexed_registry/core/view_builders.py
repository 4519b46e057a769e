"""View Builders — pure reducers that materialize one derived view.

Invariants:
    - Builders never mutate the input sequence; each call returns a new structure
    - group_by preserves relative order inside each group
    - index_by is last-write-wins on duplicate keys
    - sort_by is stable; records keyed None sort after every other record

Design Decisions:
    - Plain dict/list outputs: views serialize and compare without adapters
    - Builders raise TypeError on unhashable/incomparable keys; ViewRegistry
      wraps it with the view name (ADR: builders stay name-agnostic)
"""

from collections.abc import Callable, Iterable
from typing import Any

from indexed_registry.core.domain_types import ViewKind

KeyFn = Callable[[Any], Any]
Builder = Callable[[Iterable[Any], KeyFn], Any]


def group_by(records: Iterable[Any], key_fn: KeyFn) -> dict[Any, list[Any]]:
    """Map each resolved key to every record that shares it, in order."""
    groups: dict[Any, list[Any]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups


def index_by(records: Iterable[Any], key_fn: KeyFn) -> dict[Any, Any]:
    """Map each resolved key to a single record. Last write wins."""
    return {key_fn(record): record for record in records}


def sort_by(records: Iterable[Any], key_fn: KeyFn) -> list[Any]:
    """New list sorted ascending by resolved key. Stable; None keys last."""

    def sort_key(record: Any) -> tuple[bool, Any]:
        key = key_fn(record)
        return (key is None, 0 if key is None else key)

    return sorted(records, key=sort_key)


BUILDERS: dict[ViewKind, Builder] = {
    ViewKind.GROUP: group_by,
    ViewKind.INDEX: index_by,
    ViewKind.ORDER: sort_by,
}
