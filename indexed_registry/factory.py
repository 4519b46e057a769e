"""Registry Factory — builds an indexed collection from a configuration object.

Invariants:
    - Returns MutableIndexedCollection unless config.immutable, then ReadOnlyIndexedCollection
    - Any invalid configuration raises ConfigurationError; no collection is returned
    - Construction order: group, index, order declarations, then seeding

Design Decisions:
    - Pydantic validation at the boundary, then plain arguments into core (ADR: core never
      imports schemas)
    - ValidationError (config or process settings) re-raised as ConfigurationError:
      callers handle one taxonomy
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from indexed_registry.config import get_settings
from indexed_registry.core.errors import ConfigurationError, ErrorContext
from indexed_registry.core.indexed_collection import (
    IndexedCollection,
    MutableIndexedCollection,
    ReadOnlyIndexedCollection,
)
from indexed_registry.schemas.registry import RegistryConfig

logger = logging.getLogger(__name__)


def _configuration_error(exc: ValidationError, source: str) -> ConfigurationError:
    """Map a pydantic ValidationError into the registry taxonomy."""
    fields = sorted({".".join(str(p) for p in e["loc"]) for e in exc.errors()})
    logger.warning("Invalid %s: %s", source, ", ".join(fields))
    return ConfigurationError(
        f"Invalid {source} ({', '.join(fields)})",
        context=ErrorContext(debug_info={"errors": exc.errors(include_url=False)}),
    )


def load_config(
    config: RegistryConfig | Mapping[str, Any] | None = None, **overrides: Any,
) -> RegistryConfig:
    """Validate `config` (+ keyword overrides) into a RegistryConfig."""
    if isinstance(config, RegistryConfig):
        data = {name: getattr(config, name) for name in config.model_fields_set}
    else:
        data = dict(config or {})
    data.update(overrides)
    try:
        return RegistryConfig.model_validate(data)
    except ValidationError as exc:
        raise _configuration_error(exc, "registry configuration") from exc


def _log_invalidations() -> bool:
    try:
        return get_settings().log_invalidations
    except ValidationError as exc:
        raise _configuration_error(exc, "registry settings") from exc


def create_registry(
    config: RegistryConfig | Mapping[str, Any] | None = None, **overrides: Any,
) -> IndexedCollection:
    """Build a collection: views declared, initial set seeded, immutability by type."""
    cfg = load_config(config, **overrides)
    cls = ReadOnlyIndexedCollection if cfg.immutable else MutableIndexedCollection
    log_invalidations = _log_invalidations()
    try:
        return cls(
            group=cfg.group,
            index=cfg.index,
            order=cfg.order,
            initial_set=cfg.initial_set,
            log_invalidations=log_invalidations,
        )
    except ConfigurationError as exc:
        logger.warning(
            "Registry construction failed: %s", exc.message,
            extra={"error_code": exc.code, "view_name": exc.context.view_name},
        )
        raise
