"""Error Hierarchy — typed exceptions for every request failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to HTTP 400; store and body errors are not distinguished by status
    - to_response() produces the flat {"error": "<message>"} envelope

Design Decisions:
    - Single hierarchy with TasksApiError base: the task router catches once at its boundary
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging."""
    VALIDATION = "validation"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    table: str | None = None
    task_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TasksApiError(Exception):
    """Base exception for all task API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class StoreError(TasksApiError):
    """The data store rejected the query or could not be reached."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        store_code: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.ERROR, context,
        )
        self.status_code = status_code
        self.store_code = store_code


class BodyParseError(TasksApiError):
    """Request body missing, not JSON, or not a task envelope."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BODY_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )


def error_payload(exc: Exception) -> dict:
    """Flat error envelope for any exception raised while serving a request."""
    if isinstance(exc, TasksApiError):
        return exc.to_response()
    return {"error": str(exc)}


def error_code(exc: Exception) -> str:
    if isinstance(exc, TasksApiError):
        return exc.code
    return "INTERNAL_ERROR"
