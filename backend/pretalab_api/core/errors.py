"""Error Hierarchy — typed, categorized exceptions for API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces a body with "message" only
    - Store outcomes (not found, malformed id, validation) are NOT exceptions:
      they travel as result variants (core/store_results.py)

Design Decisions:
    - Single hierarchy with PretalabError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Where the error happened, surfaced as log fields."""
    provider: str | None = None
    operation: str | None = None


class PretalabError(Exception):
    """Base exception for all API errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_fields(self) -> dict:
        """Structured fields for logger extra=."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "provider": self.context.provider,
            "operation": self.context.operation,
        }


# ─── Text Generation Errors ─────────────────────────────────────

class GenerationAuthError(PretalabError):
    """Generation provider rejected (or never received) the credential."""
    def __init__(self, message: str, provider: str):
        super().__init__(
            message, "GENERATION_AUTH_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, ErrorContext(provider=provider), 401,
        )


class GenerationError(PretalabError):
    """Generation provider call failed for any reason other than auth."""
    def __init__(self, message: str, provider: str, error_type: str = "unknown"):
        category = (
            ErrorCategory.TIMEOUT if error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            message, "GENERATION_ERROR", category,
            ErrorSeverity.CRITICAL, ErrorContext(provider=provider), 500,
        )
        self.error_type = error_type


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(PretalabError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ErrorContext(operation=operation), 500,
        )
