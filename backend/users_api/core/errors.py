"""Error Hierarchy — typed, categorized exceptions for all Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages (passwords never appear)

Design Decisions:
    - Single hierarchy with UsersApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    field_name: str | None = None
    user_message: str | None = None


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmailConflictError(UsersApiError):
    """Another user already owns this email (unique constraint on users.email)."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = "email"
        super().__init__(
            f"A user with email '{email}' already exists",
            "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class SchemaMismatchError(UsersApiError):
    """ORM mapping declares tables/columns the database does not have."""
    def __init__(
        self,
        missing_tables: list[str],
        missing_columns: list[str],
        context: ErrorContext | None = None,
    ):
        parts = []
        if missing_tables:
            parts.append(f"missing tables: {', '.join(missing_tables)}")
        if missing_columns:
            parts.append(f"missing columns: {', '.join(missing_columns)}")
        super().__init__(
            f"Database schema does not match ORM mapping ({'; '.join(parts)})",
            "SCHEMA_MISMATCH", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.missing_tables = missing_tables
        self.missing_columns = missing_columns
