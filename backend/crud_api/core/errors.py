"""Error Hierarchy — typed, categorized exceptions for every user/todo failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All domain errors here are 400/404 — caller mistakes, never server faults
    - Every error response body (domain, validation, internal) comes from build_error_envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CrudApiError base: one global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
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
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    field_name: str | None = None


def build_error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    context: ErrorContext | None = None,
    details: list[dict] | None = None,
) -> dict:
    """The single `{"error": {...}}` body shape for every error response."""
    ctx = context or ErrorContext()
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        "timestamp": ctx.timestamp.isoformat(),
        "context": {
            "resource_id": ctx.resource_id,
            "field": ctx.field_name,
        },
    }
    if details is not None:
        error["details"] = details
    return {"error": error}


class CrudApiError(Exception):
    """Base exception for all service errors."""

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
        return build_error_envelope(
            self.code, self.message, self.category, self.severity,
            context=self.context,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidFieldError(CrudApiError):
    """A required text field was empty."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"Field '{field_name}' must not be empty",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field_name = field_name


class InvalidIdentifierError(CrudApiError):
    """Path identifier is outside the accepted range (zero)."""
    def __init__(self, resource_type: str, resource_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} id must be a positive integer, got {resource_id}",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.resource_id = resource_id


class ResourceNotFoundError(CrudApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
