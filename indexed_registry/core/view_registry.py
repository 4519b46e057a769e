"""View Registry — named, lazily computed, read-only views over a record sequence.

Invariants:
    - A view's cache is absent after invalidate_all() until the next read
    - A present cache equals what the builder would produce on the current source
    - Two reads with no intervening invalidation return the identical object
    - Public names are unique across all declarations and never shadow a reserved name
    - A failing declare() installs nothing (batch is checked before install)

Design Decisions:
    - read() and _invalidate() are separate operations: there is no write path
      at all, so no sentinel value is needed to tell legal from illegal writes
    - Coarse invalidation (every view on every mutation): the resolver has no
      change detection, so per-path precision would need a diff per mutation
    - Lazy recompute: several mutations between reads cost one rebuild
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from indexed_registry.core.domain_types import PathSpec, ViewKind, ViewName
from indexed_registry.core.errors import (
    DuplicateViewNameError,
    InvalidPathError,
    UnknownViewError,
    ViewComputationError,
)
from indexed_registry.core.inflector import view_name_for
from indexed_registry.core.path_resolver import PathGetter, make_path_getter
from indexed_registry.core.view_builders import BUILDERS, Builder

logger = logging.getLogger(__name__)

Source = Callable[[], Sequence[Any]]


@dataclass(frozen=True)
class ViewDeclaration:
    """What a view is: created once at construction, never changes."""
    kind: ViewKind
    source_path: PathSpec
    public_name: ViewName


class IndexView:
    """One declared view — a read capability backed by a private cache."""

    __slots__ = ("declaration", "_source", "_builder", "_key_fn", "_cache", "_cached")

    def __init__(
        self,
        declaration: ViewDeclaration,
        source: Source,
        builder: Builder,
        key_fn: PathGetter,
    ):
        self.declaration = declaration
        self._source = source
        self._builder = builder
        self._key_fn = key_fn
        self._cache: Any = None
        self._cached = False

    @property
    def name(self) -> ViewName:
        return self.declaration.public_name

    @property
    def kind(self) -> ViewKind:
        return self.declaration.kind

    @property
    def is_cached(self) -> bool:
        return self._cached

    def read(self) -> Any:
        """Return the cached view, computing it first if absent."""
        if not self._cached:
            records = self._source()
            try:
                value = self._builder(records, self._key_fn)
            except TypeError as exc:
                raise ViewComputationError(self.name, str(exc)) from exc
            self._cache = value
            self._cached = True
            logger.debug(
                "view %s recomputed over %d records", self.name, len(records),
                extra={"view_name": self.name, "record_count": len(records)},
            )
        return self._cache

    def _invalidate(self) -> None:
        self._cache = None
        self._cached = False

    def __repr__(self) -> str:
        state = "cached" if self._cached else "absent"
        return (
            f"IndexView({self.name!r}, kind={self.kind.value!r}, "
            f"path={self.declaration.source_path!r}, {state})"
        )


def _path_text(path: str | Sequence[str]) -> str:
    if isinstance(path, str):
        return path.strip()
    return ".".join(str(p) for p in path)


class ViewRegistry:
    """Declares views over `source` and invalidates them in bulk."""

    def __init__(
        self,
        source: Source,
        reserved: Iterable[str] = (),
        log_invalidations: bool = False,
    ):
        self._source = source
        self._reserved = frozenset(reserved)
        self._log_invalidations = log_invalidations
        self._views: dict[ViewName, IndexView] = {}

    def declare(
        self,
        paths: Iterable[str | Sequence[str]] | str | None,
        kind: ViewKind,
        builder: Builder | None = None,
    ) -> list[ViewName]:
        """Install one view per path. Returns the public names, in order."""
        if not paths:
            return []
        if isinstance(paths, str):
            paths = [paths]
        builder = builder or BUILDERS[kind]

        pending: dict[ViewName, tuple[ViewDeclaration, PathGetter]] = {}
        for path in paths:
            key_fn = make_path_getter(path)
            text = _path_text(path)
            name = view_name_for(text, kind)
            if not name:
                raise InvalidPathError(path, "derives an empty view name")
            if name in self._views or name in pending:
                raise DuplicateViewNameError(name, text, "is already declared")
            if name in self._reserved:
                raise DuplicateViewNameError(name, text, "shadows an existing attribute")
            pending[name] = (ViewDeclaration(kind, PathSpec(text), name), key_fn)

        for name, (declaration, key_fn) in pending.items():
            self._views[name] = IndexView(declaration, self._source, builder, key_fn)
            logger.debug(
                "view declared: %s (%s on %r)", name, kind.value, declaration.source_path,
                extra={"view_name": name},
            )
        return list(pending)

    def invalidate_all(self, operation: str | None = None) -> None:
        """Mark every view's cache absent."""
        for view in self._views.values():
            view._invalidate()
        if self._log_invalidations:
            logger.debug(
                "invalidated %d views after %s", len(self._views), operation or "mutation",
                extra={"operation": operation},
            )

    def view(self, name: str) -> IndexView:
        try:
            return self._views[ViewName(name)]
        except KeyError:
            raise UnknownViewError(name) from None

    def read(self, name: str) -> Any:
        return self.view(name).read()

    @property
    def names(self) -> list[ViewName]:
        return list(self._views)

    @property
    def declarations(self) -> list[ViewDeclaration]:
        return [v.declaration for v in self._views.values()]

    @property
    def views(self) -> Mapping[ViewName, IndexView]:
        return MappingProxyType(self._views)

    def __contains__(self, name: object) -> bool:
        return name in self._views

    def __iter__(self) -> Iterator[ViewName]:
        return iter(self._views)

    def __len__(self) -> int:
        return len(self._views)
