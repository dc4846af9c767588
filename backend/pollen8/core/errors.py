"""Error Hierarchy — typed, categorized exceptions for all Pollen8 failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any store mutation
    - Infrastructure errors (500-level) carry no driver details in the message
    - to_response() produces the REST envelope used by every handler

Design Decisions:
    - Single hierarchy with Pollen8Error base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - InviteTrackingError keeps a stable message so callers can tell a failed
      click from an arbitrary store error
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    DEPENDENCY = "dependency"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    invite_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class Pollen8Error(Exception):
    """Base exception for all Pollen8 errors."""

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
                    "user_id": self.context.user_id,
                    "invite_id": self.context.invite_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(Pollen8Error):
    """Missing or malformed argument, inverted date range, bad period string."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(Pollen8Error):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        context: ErrorContext | None = None,
        message: str | None = None,
        code: str = "RESOURCE_NOT_FOUND",
    ):
        super().__init__(
            message or f"{resource_type} '{resource_id}' not found",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConnectionNotFoundError(ResourceNotFoundError):
    """No connection record exists in either direction between two users."""
    def __init__(
        self, user_id: str, connected_user_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Connection", f"{user_id}<->{connected_user_id}", context,
            message="Connection does not exist", code="CONNECTION_NOT_FOUND",
        )


class ConflictError(Pollen8Error):
    """Write rejected because it would break a uniqueness invariant."""
    def __init__(
        self, message: str, code: str = "CONFLICT", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class ConnectionAlreadyExistsError(ConflictError):
    """A connection between the two users already exists (either direction)."""
    def __init__(
        self, user_id: str, connected_user_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Connection already exists", "CONNECTION_EXISTS", context,
        )
        self.user_id = user_id
        self.connected_user_id = connected_user_id


class DuplicateInviteUrlError(ConflictError):
    """Invite URL generation kept colliding with existing URLs."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not generate a unique invite URL after {attempts} attempt(s)",
            "DUPLICATE_INVITE_URL", context,
        )
        self.attempts = attempts


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(Pollen8Error):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class InviteTrackingError(Pollen8Error):
    """Click could not be recorded (unknown invite or store failure)."""
    def __init__(
        self, invite_id: str, invite_missing: bool = False,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.invite_id = invite_id
        super().__init__(
            "Failed to track invite click",
            "INVITE_TRACKING_FAILED", ErrorCategory.DEPENDENCY,
            ErrorSeverity.ERROR, ctx, 404 if invite_missing else 503,
        )
        self.invite_missing = invite_missing
