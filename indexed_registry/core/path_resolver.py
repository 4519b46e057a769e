"""Path Resolver — reads a (possibly nested) value out of a record by path.

Invariants:
    - resolve_path is PURE: never mutates the record, never raises on a missing step
    - A missing step resolves to None (the "undefined" of a dotted getter)
    - Paths are parsed once per getter; resolution is O(len(path))

Design Decisions:
    - Mapping -> key, Sequence -> int index, anything else -> attribute:
      records can be dicts, dataclasses or pydantic models without adapters
    - Bracket indices ("items[0].id") accepted alongside dotted indices ("items.0.id")
"""

import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from indexed_registry.core.errors import InvalidPathError

_BRACKET = re.compile(r"\[([^\[\]]*)\]")

PathGetter = Callable[[Any], Any]


def parse_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Split a path spec into segments. Raises InvalidPathError when empty."""
    if isinstance(path, str):
        normalized = _BRACKET.sub(r".\1", path.strip())
        segments = tuple(s.strip() for s in normalized.split(".") if s.strip())
    elif isinstance(path, Sequence):
        segments = tuple(str(s).strip() for s in path if str(s).strip())
    else:
        raise InvalidPathError(path, "path must be a string or a sequence of segments")

    if not segments:
        raise InvalidPathError(path, "path has no segments")
    return segments


def _step(value: Any, segment: str) -> Any:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(segment)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        try:
            return value[int(segment)]
        except (ValueError, IndexError):
            return None
    return getattr(value, segment, None)


def resolve_segments(record: Any, segments: Sequence[str]) -> Any:
    value = record
    for segment in segments:
        value = _step(value, segment)
        if value is None:
            return None
    return value


def resolve_path(record: Any, path: str | Sequence[str]) -> Any:
    """Resolve `path` against `record`. Pure — returns None for missing steps."""
    return resolve_segments(record, parse_path(path))


def make_path_getter(path: str | Sequence[str]) -> PathGetter:
    """Parse `path` once and return a record -> value getter."""
    segments = parse_path(path)

    def getter(record: Any) -> Any:
        return resolve_segments(record, segments)

    getter.__name__ = f"get_{'_'.join(segments)}"
    return getter
