"""Indexed Collection — an ordered record sequence that keeps its own lookup views.

Invariants:
    - The public sequence and the raw mirror hold the same records in the same order
      between any two completed operations
    - Every completed structure-mutating operation invalidates all views exactly once,
      after the public sequence changes and before control returns
    - A mutation that fails (e.g. pop on empty) changes nothing and invalidates nothing
    - Declared view names can be read but never assigned or deleted
    - Immutability is structural: ReadOnlyIndexedCollection has no mutating methods

Design Decisions:
    - Composition over subclassing list: only the wrapped operations can mutate
    - Mutations are module-level list functions applied twice (public, then raw);
      the raw result is what the caller gets back
    - Two types instead of deleting methods at runtime (ADR: capability by type)
    - Seeding runs through the same duplexed push as any later append
"""

import copy
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from indexed_registry.core.domain_types import DECLARATION_ORDER, ViewKind, ViewName
from indexed_registry.core.errors import ImmutableViewError
from indexed_registry.core.view_registry import IndexView, ViewDeclaration, ViewRegistry

logger = logging.getLogger(__name__)

PathList = Iterable[str] | str | None

# Public names of the structure-mutating capabilities. Reserved in every
# variant so a view name means the same thing on mutable and read-only types.
MUTATING_OPERATIONS: tuple[str, ...] = (
    "append", "extend", "pop", "popleft", "appendleft",
    "splice", "reverse", "clear",
)


# ─── List primitives (applied to public sequence, then raw mirror) ─────

def _push(seq: list, records: list) -> int:
    seq.extend(records)
    return len(seq)


def _pop(seq: list) -> Any:
    return seq.pop()


def _shift(seq: list) -> Any:
    return seq.pop(0)


def _unshift(seq: list, records: list) -> int:
    seq[0:0] = records
    return len(seq)


def _splice(seq: list, start: int, delete_count: int | None, records: list) -> list:
    size = len(seq)
    start = max(size + start, 0) if start < 0 else min(start, size)
    if delete_count is None:
        delete_count = size - start
    delete_count = min(max(delete_count, 0), size - start)
    removed = seq[start:start + delete_count]
    seq[start:start + delete_count] = records
    return removed


def _reverse(seq: list) -> None:
    seq.reverse()


def _clear(seq: list) -> list:
    removed = list(seq)
    seq.clear()
    return removed


class IndexedCollection(Sequence):
    """Read surface shared by both variants: sequence access plus declared views."""

    def __init__(
        self,
        group: PathList = None,
        index: PathList = None,
        order: PathList = None,
        initial_set: Iterable[Any] | None = None,
        *,
        log_invalidations: bool = False,
    ):
        self._items: list[Any] = []
        self._raw: list[Any] = []
        self._paths: dict[ViewKind, tuple[str, ...]] = {
            ViewKind.GROUP: _as_paths(group),
            ViewKind.INDEX: _as_paths(index),
            ViewKind.ORDER: _as_paths(order),
        }
        self._log_invalidations = log_invalidations
        registry = ViewRegistry(
            lambda: self._raw,
            reserved=set(dir(type(self))) | set(MUTATING_OPERATIONS),
            log_invalidations=log_invalidations,
        )
        for kind in DECLARATION_ORDER:
            registry.declare(self._paths[kind], kind)
        self._registry = registry

        if initial_set is not None:
            self._apply("seed", _push, list(initial_set))
        logger.debug(
            "%s ready with %d records and views %s",
            type(self).__name__, len(self._raw), registry.names,
            extra={"record_count": len(self._raw)},
        )

    def _apply(self, operation: str, primitive: Callable[..., Any], *args: Any) -> Any:
        """Mutate public sequence, invalidate views, mutate raw mirror."""
        primitive(self._items, *args)
        self._registry.invalidate_all(operation)
        return primitive(self._raw, *args)

    # ─── Declared views ──────────────────────────────────────────

    def view(self, name: str) -> Any:
        """Current value of the declared view `name`."""
        return self._registry.read(name)

    @property
    def views(self) -> Mapping[ViewName, IndexView]:
        return self._registry.views

    @property
    def view_names(self) -> list[ViewName]:
        return self._registry.names

    @property
    def declarations(self) -> list[ViewDeclaration]:
        return self._registry.declarations

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        registry = self.__dict__.get("_registry")
        if registry is not None and name in registry:
            return registry.read(name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        registry = self.__dict__.get("_registry")
        if registry is not None and name in registry:
            raise ImmutableViewError(name)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        registry = self.__dict__.get("_registry")
        if registry is not None and name in registry:
            raise ImmutableViewError(name)
        super().__delattr__(name)

    # ─── Sequence reads (public sequence, unwrapped) ─────────────

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, record: object) -> bool:
        return record in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IndexedCollection):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, views={self.view_names!r})"

    # ─── Copying (rebuilt; never shares mirror or view source) ───

    def _rebuild(self, cls: type, records: Iterable[Any]) -> "IndexedCollection":
        return cls(
            group=self._paths[ViewKind.GROUP],
            index=self._paths[ViewKind.INDEX],
            order=self._paths[ViewKind.ORDER],
            initial_set=records,
            log_invalidations=self._log_invalidations,
        )

    def __copy__(self) -> "IndexedCollection":
        return self._rebuild(type(self), self._raw)

    def __deepcopy__(self, memo: dict) -> "IndexedCollection":
        return self._rebuild(type(self), copy.deepcopy(self._raw, memo))

    # ─── Serialization hook ──────────────────────────────────────

    @property
    def raw(self) -> tuple[Any, ...]:
        """Snapshot of the raw mirror."""
        return tuple(self._raw)

    def to_json(self) -> list[Any]:
        """Plain ordered list of records. Views are never included."""
        return list(self._raw)

    @property
    def config(self) -> dict[str, Any]:
        """View configuration this collection was built with (no records)."""
        return {
            "group": list(self._paths[ViewKind.GROUP]),
            "index": list(self._paths[ViewKind.INDEX]),
            "order": list(self._paths[ViewKind.ORDER]),
            "immutable": not isinstance(self, MutableIndexedCollection),
        }


class ReadOnlyIndexedCollection(IndexedCollection):
    """Seeded once at construction; offers no structure-mutating operations."""


class MutableIndexedCollection(IndexedCollection):
    """Indexed collection with the duplexed, view-invalidating mutation set."""

    def append(self, *records: Any) -> int:
        """Push one or more records onto the end. Returns the new length."""
        return self._apply("append", _push, list(records))

    def extend(self, records: Iterable[Any]) -> int:
        """Push every record from `records` onto the end. Returns the new length."""
        return self._apply("extend", _push, list(records))

    def pop(self) -> Any:
        """Remove and return the last record. IndexError when empty."""
        return self._apply("pop", _pop)

    def popleft(self) -> Any:
        """Remove and return the first record. IndexError when empty."""
        return self._apply("popleft", _shift)

    def appendleft(self, *records: Any) -> int:
        """Insert records at the front, keeping their argument order. Returns the new length."""
        return self._apply("appendleft", _unshift, list(records))

    def splice(self, start: int, delete_count: int | None = None, *records: Any) -> list[Any]:
        """Remove `delete_count` records at `start` and insert `records` there.

        Negative `start` counts from the end; out-of-range values are clamped.
        `delete_count=None` removes everything from `start`. Returns the
        removed records.
        """
        return self._apply("splice", _splice, start, delete_count, list(records))

    def reverse(self) -> None:
        """Reverse the records in place."""
        return self._apply("reverse", _reverse)

    def clear(self) -> list[Any]:
        """Remove every record. Returns the removed records."""
        return self._apply("clear", _clear)

    def freeze(self) -> ReadOnlyIndexedCollection:
        """Read-only copy of the current records with the same views."""
        return self._rebuild(ReadOnlyIndexedCollection, self._raw)


def _as_paths(paths: PathList) -> tuple[str, ...]:
    if not paths:
        return ()
    if isinstance(paths, str):
        return (paths,)
    return tuple(paths)
