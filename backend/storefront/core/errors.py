"""Error Hierarchy — typed, categorized exceptions for all Storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries success=False and a human-readable `errors` message
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - InvalidTokenError uses one message for bad signature, expiry and malformed input
      so callers cannot probe which check failed
    - UnknownEmailError / WrongPasswordError share InvalidCredentialsError so the
      route layer can collapse them into one message when hardening is enabled
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNAUTHORIZED = "unauthorized"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    product_id: int | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all Storefront errors."""

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
            "success": False,
            "errors": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(StorefrontError):
    """Request input failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidSlotError(ValidationError):
    """Cart slot index outside the fixed cart domain."""
    def __init__(self, slot: int, slots: int, context: ErrorContext | None = None):
        super().__init__(
            f"Cart slot {slot} is outside the range 0..{slots - 1}",
            "itemId", context,
        )
        self.code = "INVALID_SLOT"
        self.slot = slot


class DuplicateResourceError(StorefrontError):
    """Resource with the same unique key already exists."""
    def __init__(
        self, message: str, code: str = "DUPLICATE_RESOURCE",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class EmailTakenError(DuplicateResourceError):
    """Signup with an email that is already registered."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Existing User With Same Email Id", "EMAIL_TAKEN", context,
        )


class InvalidCredentialsError(StorefrontError):
    """Login failed."""
    def __init__(
        self, message: str = "Invalid email or password",
        code: str = "INVALID_CREDENTIALS", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, context, 400,
        )


class UnknownEmailError(InvalidCredentialsError):
    """Login with an email that has no account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid Email Id Please Register", "UNKNOWN_EMAIL", context,
        )


class WrongPasswordError(InvalidCredentialsError):
    """Login with a password that does not match."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Invalid Password", "WRONG_PASSWORD", context)


class UnauthorizedError(StorefrontError):
    """Request lacks a usable bearer token."""
    def __init__(
        self, message: str, code: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingTokenError(UnauthorizedError):
    """auth-token header absent or empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Please authenticate using valid token", "MISSING_TOKEN", context,
        )


class InvalidTokenError(UnauthorizedError):
    """Token malformed, forged or expired."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Please authenticate using a valid token", "INVALID_TOKEN", context,
        )


class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(StorefrontError):
    """Database operation failed or the store is unreachable."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
