"""Registry Schemas — Pydantic model for the construction-time configuration surface.

Invariants:
    - group/index/order: lists of non-blank path strings, stripped; absent means no views
    - initial_set accepts any records (no schema validation of records)
    - immutable defaults to False
    - Accepts camelCase (initialSet) and snake_case (initial_set) keys

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps model pure
    - A bare string path is promoted to a one-element list (common config slip)
    - View-name collisions are NOT checked here: ViewRegistry is the single source of truth
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegistryConfig(BaseModel):
    """Construction-time configuration for an indexed collection."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    group: list[str] | None = None
    index: list[str] | None = None
    order: list[str] | None = None
    initial_set: list[Any] | None = Field(None, alias="initialSet")
    immutable: bool = False

    @field_validator("group", "index", "order", mode="before")
    @classmethod
    def promote_single_path(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("group", "index", "order")
    @classmethod
    def strip_paths(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        stripped = [p.strip() for p in v]
        if any(not p for p in stripped):
            raise ValueError("paths cannot be empty or whitespace")
        return stripped

    def view_paths(self) -> dict[str, list[str]]:
        """Declared paths per kind, with absent kinds as empty lists."""
        return {
            "group": list(self.group or []),
            "index": list(self.index or []),
            "order": list(self.order or []),
        }
