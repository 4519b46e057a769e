"""Domain Types — rich types that replace bare strings across the registry.

Invariants:
    - PathSpec is owned by configuration and never mutated after construction
    - ViewName values are unique per collection (enforced by ViewRegistry)
    - Every ViewKind has exactly one naming tag (prefix, suffix)

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enum: kinds serialize to JSON and log lines without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PathSpec = NewType("PathSpec", str)     # "type", "meta.owner", "items[0].id"
ViewName = NewType("ViewName", str)     # "byType", "inPriorityOrder"


# ─── Enums ───────────────────────────────────────────────────────

class ViewKind(str, Enum):
    """The three derived view shapes a collection can maintain."""
    GROUP = "group"     # key -> list of records
    INDEX = "index"     # key -> single record (last write wins)
    ORDER = "order"     # stable ascending sequence


# Naming tags per kind: (prefix, suffix). GROUP and INDEX share "by",
# so declaring both on one path is a name collision.
NAMING_TAGS: dict[ViewKind, tuple[str, str]] = {
    ViewKind.GROUP: ("by", ""),
    ViewKind.INDEX: ("by", ""),
    ViewKind.ORDER: ("in", "Order"),
}

# Declaration order used at construction; duplicate detection spans all three.
DECLARATION_ORDER: tuple[ViewKind, ...] = (
    ViewKind.GROUP,
    ViewKind.INDEX,
    ViewKind.ORDER,
)
