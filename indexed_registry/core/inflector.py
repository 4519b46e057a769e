"""Inflector — derives the public view name from a path and a kind tag.

Invariants:
    - Deterministic: same (path, prefix, suffix) always yields the same name
    - Prefix/suffix are never doubled ("byType" stays "byType" under "by")

Design Decisions:
    - Dotted and underscored paths are camel-joined: "meta.type" -> "metaType"
    - Cosmetic only; uniqueness is enforced by ViewRegistry, not here
"""

import re
from collections.abc import Callable

from indexed_registry.core.domain_types import NAMING_TAGS, ViewKind, ViewName

_SEPARATORS = re.compile(r"[._\[\]]+")


def _up_first(word: str, lower_rest: bool = False) -> str:
    if not word:
        return word
    rest = word[1:].lower() if lower_rest else word[1:]
    return word[0].upper() + rest


def _camel_join(path: str) -> str:
    steps = [s for s in _SEPARATORS.split(path.strip()) if s]
    if not steps:
        return ""
    return steps[0] + "".join(_up_first(s, lower_rest=True) for s in steps[1:])


def inflector(prefix: str = "", suffix: str = "") -> Callable[[str], str]:
    """Build a name-deriving function for one kind tag."""

    def inflect(path: str) -> str:
        name = _camel_join(path)
        if prefix and not name.lower().startswith(prefix.lower()):
            name = prefix + _up_first(name)
        if suffix and not name.lower().endswith(suffix.lower()):
            name = name + suffix
        return name

    return inflect


inflect_index = inflector("by")
inflect_order = inflector("in", "Order")


def view_name_for(path: str, kind: ViewKind) -> ViewName:
    """Public name for a view of `kind` over `path`."""
    prefix, suffix = NAMING_TAGS[kind]
    return ViewName(inflector(prefix, suffix)(path))
