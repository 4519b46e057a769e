"""Error Hierarchy — typed, categorized exceptions for every registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration errors are fatal to construction; no partial collection escapes
    - Illegal view writes never take effect (raised before any state changes)
    - to_dict() produces a JSON-safe envelope for logs and callers

Design Decisions:
    - Single hierarchy with RegistryError base: callers can catch one type
    - Built-in mixins (TypeError, KeyError) on the errors that replace a
      built-in failure, so generic handlers keep working
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    PROGRAMMER = "programmer"
    RESOURCE_NOT_FOUND = "resource_not_found"
    COMPUTATION = "computation"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    view_name: str | None = None
    path: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class RegistryError(Exception):
    """Base exception for all indexed registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Convert to a JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "view_name": self.context.view_name,
                    "path": self.context.path,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Configuration Errors (fatal to construction) ───────────────

class ConfigurationError(RegistryError):
    """Collection configuration is invalid; construction is aborted."""
    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )


class DuplicateViewNameError(ConfigurationError):
    """Two declarations (or a declaration and an existing name) derive the same public name."""
    def __init__(self, view_name: str, path: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.view_name = view_name
        ctx.path = path
        super().__init__(
            f"View name '{view_name}' derived from path '{path}' {reason}",
            "DUPLICATE_VIEW_NAME", ctx,
        )
        self.view_name = view_name


class InvalidPathError(ConfigurationError):
    """A path spec is empty or cannot be parsed."""
    def __init__(self, path: object, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = str(path)
        super().__init__(
            f"Invalid path {path!r}: {reason}", "INVALID_PATH", ctx,
        )


# ─── Programmer Errors (raised at the illegal call site) ────────

class ImmutableViewError(RegistryError, TypeError):
    """External attempt to assign or delete a computed view."""
    def __init__(self, view_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.view_name = view_name
        super().__init__(
            f"{view_name} can not be set, it is a computed index of values",
            "IMMUTABLE_VIEW", ErrorCategory.PROGRAMMER,
            ErrorSeverity.ERROR, ctx,
        )
        self.view_name = view_name


class UnknownViewError(RegistryError, KeyError):
    """Requested view name was never declared."""
    def __init__(self, view_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.view_name = view_name
        super().__init__(
            f"No view named '{view_name}' is declared",
            "UNKNOWN_VIEW", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.view_name = view_name


# ─── Computation Errors (raised on read) ────────────────────────

class ViewComputationError(RegistryError):
    """A view builder could not materialize the view from current content."""
    def __init__(self, view_name: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.view_name = view_name
        super().__init__(
            f"Could not compute view '{view_name}': {reason}",
            "VIEW_COMPUTATION_FAILED", ErrorCategory.COMPUTATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.view_name = view_name
