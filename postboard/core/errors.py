"""Error Hierarchy — typed, categorized exceptions for all Postboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable; invariant violations are critical
    - to_response() produces the REST envelope
    - A missing profile on render is NOT an error: it is the "not found" text outcome

Design Decisions:
    - Single hierarchy with PostboardError base: FastAPI global handler catches all
    - InvariantViolationError is never caught inside core/ or services/: a broken
      post key means another author's history would be overwritten
"""

from dataclasses import dataclass, field
from enum import Enum
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    identity: str | None = None
    post_key: str | None = None


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "identity": self.context.identity,
                    "post_key": self.context.post_key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentityError(PostboardError):
    """Identity is empty or contains the post key separator."""
    def __init__(self, identity: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.identity = identity
        super().__init__(
            f"Invalid identity {identity!r}: {reason}",
            "INVALID_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.reason = reason


class MissingCallerIdentityError(PostboardError):
    """No caller identity could be resolved for a write."""
    def __init__(self, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Caller identity missing (expected {source})",
            "MISSING_CALLER_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.source = source


class ResourceNotFoundError(PostboardError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Invariant Violations (500-level) ───────────────────────────

class InvariantViolationError(PostboardError):
    """Storage invariant broken: duplicate post key, malformed key, exhausted counter."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVARIANT_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
