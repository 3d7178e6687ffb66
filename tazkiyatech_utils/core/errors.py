"""Error Hierarchy: typed, categorized exceptions for all utility failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error also subclasses the matching builtin (ValueError, LookupError)
    - to_dict() produces a structured envelope suitable for JSON logs
    - Errors are raised, never logged, by the core layer

Design Decisions:
    - Single hierarchy with UtilsError base: callers can catch one type for all misuse
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MISSING_VALUE = "missing_value"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class UtilsError(Exception):
    """Base exception for all tazkiyatech_utils errors."""

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

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Misuse Errors ──────────────────────────────────────────────

class InvalidArgumentError(UtilsError, ValueError):
    """An argument violated the contract of the operation it was passed to."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.argument = argument


class NoValuePresentError(UtilsError, LookupError):
    """A value was requested from a container that holds none."""
    def __init__(self, message: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message or "There is no value to get from this Optional",
            "NO_VALUE_PRESENT", ErrorCategory.MISSING_VALUE,
            ErrorSeverity.ERROR, context,
        )
